# backend/market_sentiment/utils/__init__.py
"""設定読み込み・結果型などの共通ユーティリティ。"""
