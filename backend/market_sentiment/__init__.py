# backend/market_sentiment/__init__.py
"""
Market Sentiment backend application package.

This package contains:
- main: FastAPI application entrypoint
- news: news search (Tavily) and keyword sentiment heuristic
- ai: LLM analysis (Anthropic / Zhipu) with deterministic mock fallback
- watchlist: Supabase watchlist writes
"""
