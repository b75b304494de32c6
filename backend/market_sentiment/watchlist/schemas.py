# backend/market_sentiment/watchlist/schemas.py

"""
/watchlist 用の Pydantic スキーマ定義。
"""

from pydantic import BaseModel, Field


class WatchlistAddRequest(BaseModel):
    """/watchlist のリクエストボディ。"""

    symbol: str = Field(..., min_length=1, max_length=32, description="追加するティッカー")


class WatchlistEntry(BaseModel):
    """追加されたウォッチリストの 1 行。"""

    symbol: str = Field(..., description="大文字に正規化したティッカー")
