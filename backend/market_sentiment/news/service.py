# backend/market_sentiment/news/service.py

"""
検索クライアントと内部スキーマをつなぐサービス層。

- ティッカーの最新ニュースを検索して NewsBundle に変換する
- API キー未設定・通信エラー・形式異常のときはモックニュースにフォールバックする
  （呼び出し側に例外は伝播させない）
"""

import logging
from typing import Any, Dict, List, Optional

from market_sentiment.mock_data import mock_news
from market_sentiment.utils.result import Sourced

from .client import TavilyClient
from .heuristic import classify_sentiment
from .schemas import NewsBundle, NewsItem

logger = logging.getLogger(__name__)

NEWS_QUERY_TEMPLATE = "{symbol} stock news latest analysis"
NEWS_ORIGIN = "tavily"


def _to_news_item(raw: Dict[str, Any]) -> NewsItem:
    """
    Tavily の result 1 件を NewsItem に変換する。

    summary は snippet を優先し、無ければ content を使う。
    センチメントは同じテキストからキーワードで判定する。
    """
    text = raw.get("snippet") or raw.get("content") or ""
    return NewsItem(
        title=raw.get("title") or "",
        summary=text,
        sentiment=classify_sentiment(text),
        url=raw.get("url"),
    )


class NewsService:
    """
    TavilyClient を利用して、ティッカーごとの NewsBundle を返すサービス。

    client が None の場合（API キー未設定）は常にモックニュースを返す。
    """

    def __init__(self, client: Optional[TavilyClient] = None) -> None:
        self._client = client

    def fetch_news(self, symbol: str) -> Sourced[NewsBundle]:
        if self._client is None:
            logger.info("No search API key; using mock news. symbol=%s", symbol)
            return Sourced.mock(mock_news(symbol), reason="search API key not configured")

        try:
            results = self._client.search(NEWS_QUERY_TEMPLATE.format(symbol=symbol))
            items: List[NewsItem] = [_to_news_item(raw) for raw in results]
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "News search failed; fallback to mock news. symbol=%s error=%s",
                symbol,
                exc,
            )
            return Sourced.mock(mock_news(symbol), reason=f"news search failed: {exc}")

        logger.info("Fetched %d news items for %s", len(items), symbol)
        return Sourced.live(NewsBundle(symbol=symbol.upper(), news=items), origin=NEWS_ORIGIN)
