# backend/market_sentiment/watchlist/service.py

"""
ウォッチリスト追加のサービス層。
"""

from .client import WatchlistClient
from .schemas import WatchlistEntry


class WatchlistService:
    """ティッカーを正規化して watchlist テーブルへ追加する。"""

    def __init__(self, client: WatchlistClient) -> None:
        self._client = client

    def add(self, symbol: str) -> WatchlistEntry:
        entry = WatchlistEntry(symbol=symbol.strip().upper())
        self._client.insert(entry.model_dump())
        return entry
