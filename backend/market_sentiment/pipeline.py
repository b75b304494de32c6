# backend/market_sentiment/pipeline.py

"""
ニュース取得 → AI 分析 を順番に実行するパイプライン。

分析はニュースに依存するため、2 つの外部呼び出しは必ず直列に行う。
"""

import logging
from dataclasses import dataclass
from typing import Dict

from market_sentiment.ai.schemas import AnalysisResult, ResponseSchema
from market_sentiment.ai.service import AnalysisService
from market_sentiment.mock_data import mock_news
from market_sentiment.news.schemas import NewsBundle
from market_sentiment.news.service import NewsService
from market_sentiment.utils.result import Sourced

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineOutcome:
    """1 リクエスト分の処理結果。"""

    symbol: str
    news: Sourced[NewsBundle]
    analysis: Sourced[AnalysisResult]

    def response_body(self) -> dict:
        return self.analysis.value.to_wire()

    def source_headers(self) -> Dict[str, str]:
        return {
            "X-News-Source": self.news.origin,
            "X-Analysis-Source": self.analysis.origin,
        }


class SentimentPipeline:
    """
    NewsService と AnalysisService をまとめて、ティッカー 1 件を分析する。

    どちらのサービスも失敗時はモックに倒すため、run() が例外を出すことは想定外。
    """

    def __init__(self, news_service: NewsService, analysis_service: AnalysisService) -> None:
        self._news_service = news_service
        self._analysis_service = analysis_service

    @property
    def response_schema(self) -> ResponseSchema:
        return self._analysis_service.response_schema

    def run(self, symbol: str) -> PipelineOutcome:
        news = self._news_service.fetch_news(symbol)
        analysis = self._analysis_service.request_analysis(symbol, news.value)
        return PipelineOutcome(symbol=symbol, news=news, analysis=analysis)

    def fallback(self, symbol: str, reason: str) -> PipelineOutcome:
        """ニュース・分析ともモックで組み立てた結果を返す。"""
        logger.info("Using mock data as fallback for %s", symbol)
        return PipelineOutcome(
            symbol=symbol,
            news=Sourced.mock(mock_news(symbol), reason=reason),
            analysis=Sourced.mock(self._analysis_service.mock(symbol), reason=reason),
        )
