# backend/market_sentiment/news/schemas.py

"""
ニュース取得結果を内部で扱うためのスキーマ定義。
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Sentiment(str, Enum):
    """ニュース 1 件ごとのセンチメント。"""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class NewsItem(BaseModel):
    """
    検索 API の 1 件の結果を正規化した内部モデル。

    生成後は変更しない（frozen）。
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="記事タイトル")
    summary: str = Field(..., description="記事のスニペット / 本文抜粋")
    sentiment: Sentiment = Field(..., description="キーワードベースで判定したセンチメント")
    url: Optional[str] = Field(None, description="記事 URL（モックデータでは None）")


class NewsBundle(BaseModel):
    """
    1 リクエスト分のニュース集合。LLM へのプロンプトにそのまま埋め込まれる。
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="大文字に正規化したティッカー")
    news: List[NewsItem] = Field(default_factory=list)
