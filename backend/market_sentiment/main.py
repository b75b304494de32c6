# backend/market_sentiment/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- /api/chat   市場センチメント分析
- /watchlist  ウォッチリスト追加
- /health     ヘルスチェック

外部サービスのクライアントはここで一度だけ構築し、app.state 経由で各ルーターに渡す。
"""

import logging
from typing import Optional

from fastapi import FastAPI

from market_sentiment.ai.config import LLMSettings, get_llm_settings
from market_sentiment.ai.router import router as analysis_router
from market_sentiment.ai.service import AnalysisService
from market_sentiment.news.client import TavilyClient
from market_sentiment.news.config import NewsSettings, get_news_settings
from market_sentiment.news.service import NewsService
from market_sentiment.pipeline import SentimentPipeline
from market_sentiment.utils.config import get_env
from market_sentiment.watchlist.client import WatchlistClient
from market_sentiment.watchlist.config import get_watchlist_settings
from market_sentiment.watchlist.router import router as watchlist_router
from market_sentiment.watchlist.service import WatchlistService


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
DEFAULT_LOG_LEVEL = "INFO"


def get_log_level() -> str:
    """
    LOG_LEVEL 環境変数を取得する。

    - 未設定 or 不正な値の場合は INFO を返す（起動は止めない）。
    """
    raw = get_env("LOG_LEVEL", default=DEFAULT_LOG_LEVEL, required=False)
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        logging.getLogger(__name__).warning(
            "Invalid LOG_LEVEL %r; using %s instead.", raw, DEFAULT_LOG_LEVEL
        )
        return DEFAULT_LOG_LEVEL
    return level


def _configure_logging() -> None:
    level = get_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_pipeline(
    news_settings: Optional[NewsSettings] = None,
    llm_settings: Optional[LLMSettings] = None,
) -> SentimentPipeline:
    """
    設定値からニュース / 分析サービスを組み立てる。

    API キーが無いサービスはクライアントを持たず、モックで応答する。
    """
    news_settings = news_settings or get_news_settings()
    llm_settings = llm_settings or get_llm_settings()

    news_client = TavilyClient(news_settings) if news_settings.is_configured else None
    return SentimentPipeline(
        news_service=NewsService(client=news_client),
        analysis_service=AnalysisService(llm_settings),
    )


def create_app(
    *,
    pipeline: Optional[SentimentPipeline] = None,
    watchlist_service: Optional[WatchlistService] = None,
) -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    テストでは pipeline / watchlist_service にダミーを渡して外部通信を避ける。
    """
    _configure_logging()

    app = FastAPI(title="Market Sentiment Backend")
    app.state.pipeline = pipeline or build_pipeline()
    app.state.watchlist_service = watchlist_service or WatchlistService(
        WatchlistClient(get_watchlist_settings())
    )

    # ルーター登録
    app.include_router(analysis_router)
    app.include_router(watchlist_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {
            "status": "ok",
            "responseSchema": app.state.pipeline.response_schema.value,
        }

    return app


# uvicorn 実行時のエントリーポイント（pip install -e ".[server]" 後に
#   uvicorn market_sentiment.main:app）
app = create_app()
