# backend/market_sentiment/watchlist/config.py

"""
ウォッチリスト（Supabase）に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass
from typing import Optional

from market_sentiment.utils.config import get_env, get_first_env


@dataclass(frozen=True)
class WatchlistSettings:
    """Supabase 用の設定値コンテナ。"""

    url: Optional[str]
    anon_key: Optional[str]
    table: str = "watchlist"

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)


def get_watchlist_settings() -> WatchlistSettings:
    """
    環境変数から Supabase 設定を読み込む。

    任意（未設定の場合 /watchlist は 503 を返す）:
      - SUPABASE_URL       (NEXT_PUBLIC_SUPABASE_URL も可)
      - SUPABASE_ANON_KEY  (NEXT_PUBLIC_SUPABASE_ANON_KEY も可)
      - WATCHLIST_TABLE    (デフォルト: watchlist)
    """
    return WatchlistSettings(
        url=get_first_env("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL"),
        anon_key=get_first_env("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
        table=get_env("WATCHLIST_TABLE", default="watchlist", required=False),
    )
