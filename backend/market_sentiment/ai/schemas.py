# backend/market_sentiment/ai/schemas.py

"""
/api/chat が返す分析結果の Pydantic スキーマ定義。

レスポンス形式は 2 種類あり、デプロイ設定（RESPONSE_SCHEMA）で切り替える:
- dashboard: ticker / 色 / 要約 / 看涨・看跌ポイント（ゲージ付きダッシュボード用）
- factors:   スコア / ラベル / 看涨・看跌要因のみ

どちらも LLM 出力の検証にそのまま使うため、制約（スコア範囲・3 件固定・文字数上限）を
フィールド側に持たせている。
"""

from enum import Enum
from typing import Annotated, List, Type, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from .bands import SentimentColor, SentimentLabel

PointText = Annotated[str, StringConstraints(max_length=100)]
ThreePoints = Annotated[List[PointText], Field(min_length=3, max_length=3)]


class _WireModel(BaseModel):
    """JSON 上は camelCase、Python 上は snake_case で扱うための基底クラス。"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class DashboardAnalysis(_WireModel):
    """レスポンス形式 dashboard。"""

    ticker: str = Field(..., description="股票代码")
    sentiment_score: int = Field(..., ge=0, le=100, description="情绪分数 0-100")
    sentiment_color: SentimentColor = Field(..., description="情绪颜色")
    summary: str = Field(..., max_length=200, description="一句话市场总结")
    bullish_points: ThreePoints = Field(..., description="3个看涨理由")
    bearish_points: ThreePoints = Field(..., description="3个看跌风险")


class FactorAnalysis(_WireModel):
    """レスポンス形式 factors。"""

    sentiment_score: int = Field(..., ge=0, le=100, description="情绪分数 0-100")
    sentiment_label: SentimentLabel = Field(..., description="情绪标签")
    bullish_factors: ThreePoints = Field(..., description="3个看涨因素")
    bearish_factors: ThreePoints = Field(..., description="3个看跌因素")


AnalysisResult = Union[DashboardAnalysis, FactorAnalysis]


class ResponseSchema(str, Enum):
    """レスポンス形式のバリアント。"""

    DASHBOARD = "dashboard"
    FACTORS = "factors"

    @property
    def model(self) -> Type[_WireModel]:
        if self is ResponseSchema.FACTORS:
            return FactorAnalysis
        return DashboardAnalysis

    def validate_payload(self, payload: object) -> AnalysisResult:
        """
        LLM が返した dict を該当バリアントのモデルで検証する。

        制約違反は pydantic.ValidationError として呼び出し側に伝播する。
        """
        return self.model.model_validate(payload)
