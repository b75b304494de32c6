# backend/market_sentiment/news/client.py

"""
Tavily Search API との通信を担当するクライアントモジュール。
"""

from typing import Any, Dict, List

import httpx

from .config import NewsSettings


class TavilyClientError(RuntimeError):
    """Tavily クライアント全般の例外。"""


class TavilyAPIError(TavilyClientError):
    """HTTP ステータス異常やレスポンス形式の異常。"""


class TavilyClient:
    """
    Tavily Search API の薄いラッパークライアント。
    """

    def __init__(self, settings: NewsSettings) -> None:
        if not settings.api_key:
            raise TavilyClientError("TAVILY_API_KEY is not configured.")
        self._settings = settings

    def search(self, query: str) -> List[Dict[str, Any]]:
        """
        クエリで検索し、Tavily の生の results 配列を返す。

        回答生成・本文取得は行わず、basic 深度で最大 max_results 件を取得する。
        """
        payload: Dict[str, Any] = {
            "api_key": self._settings.api_key,
            "query": query,
            "search_depth": "basic",
            "max_results": self._settings.max_results,
            "include_answer": False,
            "include_raw_content": False,
        }

        try:
            response = httpx.post(
                self._settings.api_url,
                headers={"Content-Type": "application/json"},
                json=payload,
                timeout=self._settings.timeout_seconds,
            )
        except httpx.RequestError as exc:
            raise TavilyClientError(f"Failed to call Tavily API: {exc}") from exc

        if response.status_code // 100 != 2:
            raise TavilyAPIError(f"Tavily API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise TavilyAPIError("Tavily API returned a non-JSON body.") from exc

        results = (data.get("results") or []) if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise TavilyAPIError("Unexpected Tavily API response format: 'results' is not a list.")

        return results
