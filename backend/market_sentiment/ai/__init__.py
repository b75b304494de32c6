# backend/market_sentiment/ai/__init__.py
"""
AI 分析ロジック用パッケージ。

以下を提供する：
- /api/chat エンドポイント用のスキーマ（dashboard / factors の 2 形式）
- LLM バックエンドの選択と、失敗時のモックフォールバック
"""

from .schemas import AnalysisResult, DashboardAnalysis, FactorAnalysis, ResponseSchema  # noqa: F401
