# backend/market_sentiment/news/heuristic.py

"""
ニューステキストのセンチメントをキーワード数で判定する簡易ロジック。
"""

from typing import Optional

from .schemas import Sentiment

POSITIVE_WORDS = (
    "上涨",
    "增长",
    "利好",
    "超预期",
    "上调",
    "买入",
    "强劲",
    "看好",
    "突破",
    "创新高",
    "盈利",
    "rise",
    "gain",
    "up",
)

NEGATIVE_WORDS = (
    "下跌",
    "下滑",
    "利空",
    "低于预期",
    "下调",
    "卖出",
    "疲弱",
    "看空",
    "跌破",
    "创新低",
    "亏损",
    "风险",
    "监管",
    "fall",
    "drop",
    "down",
    "risk",
)


def classify_sentiment(text: Optional[str]) -> Sentiment:
    """
    ポジティブ語とネガティブ語の出現数（部分一致、語ごとに 1 カウント）を比較する。

    同数の場合は NEUTRAL。
    """
    if not text:
        return Sentiment.NEUTRAL

    lowered = text.lower()
    positive_count = sum(1 for word in POSITIVE_WORDS if word in lowered)
    negative_count = sum(1 for word in NEGATIVE_WORDS if word in lowered)

    if positive_count > negative_count:
        return Sentiment.POSITIVE
    if negative_count > positive_count:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL
