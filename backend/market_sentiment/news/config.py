# backend/market_sentiment/news/config.py

"""
ニュース検索（Tavily）に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass
from typing import Optional

from market_sentiment.utils.config import get_env, get_env_float


@dataclass(frozen=True)
class NewsSettings:
    """Tavily Search API 用の設定値コンテナ。"""

    api_key: Optional[str]
    api_url: str
    max_results: int = 10
    timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


def get_news_settings() -> NewsSettings:
    """
    環境変数からニュース検索の設定を読み込む。

    任意:
      - TAVILY_API_KEY        (未設定ならモックニュースを使う)
      - TAVILY_API_URL        (デフォルト: https://api.tavily.com/search)
      - NEWS_TIMEOUT_SECONDS  (デフォルト: 10 秒)
    """
    return NewsSettings(
        api_key=get_env("TAVILY_API_KEY", required=False),
        api_url=get_env(
            "TAVILY_API_URL",
            default="https://api.tavily.com/search",
            required=False,
        ),
        timeout_seconds=get_env_float("NEWS_TIMEOUT_SECONDS", default=10.0),
    )
