# backend/market_sentiment/watchlist/client.py

"""
Supabase の watchlist テーブルへの書き込みを担当するクライアントモジュール。
"""

import logging
from typing import Any, Dict, List, Optional

from supabase import Client, create_client

from .config import WatchlistSettings

logger = logging.getLogger(__name__)


class WatchlistClientError(RuntimeError):
    """ウォッチリストクライアント全般の例外。"""


class WatchlistNotConfiguredError(WatchlistClientError):
    """Supabase の URL / キーが設定されていない場合の例外。"""


class WatchlistClient:
    """
    supabase-py の薄いラッパー。

    Supabase クライアントは初回書き込み時に生成する（起動時に資格情報を検証しない）。
    """

    def __init__(self, settings: WatchlistSettings) -> None:
        self._settings = settings
        self._client: Optional[Client] = None

    @property
    def is_configured(self) -> bool:
        return self._settings.is_configured

    def _get_client(self) -> Client:
        if not self._settings.is_configured:
            raise WatchlistNotConfiguredError(
                "Supabase is not configured. Set SUPABASE_URL and SUPABASE_ANON_KEY."
            )
        if self._client is None:
            try:
                self._client = create_client(self._settings.url, self._settings.anon_key)
            except Exception as exc:  # noqa: BLE001
                raise WatchlistClientError(f"Failed to create Supabase client: {exc}") from exc
        return self._client

    def insert(self, row: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        watchlist テーブルに 1 行を挿入し、挿入された行を返す。
        """
        client = self._get_client()
        try:
            result = client.table(self._settings.table).insert([row]).execute()
        except Exception as exc:  # noqa: BLE001
            raise WatchlistClientError(f"Failed to insert into watchlist: {exc}") from exc

        logger.info("Inserted watchlist row. table=%s", self._settings.table)
        return list(result.data or [])
