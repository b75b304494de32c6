# backend/market_sentiment/watchlist/__init__.py
"""
ウォッチリスト（Supabase の watchlist テーブル）への追加を扱うパッケージ。
"""
