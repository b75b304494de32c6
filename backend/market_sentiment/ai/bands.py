# backend/market_sentiment/ai/bands.py

"""
センチメントスコアの帯域テーブル。

モックデータの色・ラベル導出と、LLM プロンプト中の評分説明の両方で
このテーブルだけを参照する。
"""

from dataclasses import dataclass
from typing import List, Literal, Tuple

SentimentColor = Literal["red", "yellow", "green"]

SentimentLabel = Literal[
    "极度恐慌",
    "恐慌",
    "中性偏空",
    "中性",
    "中性偏多",
    "贪婪",
    "极度贪婪",
]


@dataclass(frozen=True)
class ScoreBand:
    """スコア帯域 1 行分。lower / upper は両端を含む。"""

    lower: int
    upper: int
    label: SentimentLabel
    display_color: str
    color: SentimentColor

    def contains(self, score: int) -> bool:
        return self.lower <= score <= self.upper


SCORE_BANDS: Tuple[ScoreBand, ...] = (
    ScoreBand(0, 30, "极度恐慌", "红色", "red"),
    ScoreBand(31, 45, "恐慌", "橙色", "red"),
    ScoreBand(46, 55, "中性偏空", "黄色", "yellow"),
    ScoreBand(56, 65, "中性", "灰色", "yellow"),
    ScoreBand(66, 80, "贪婪", "浅绿", "green"),
    ScoreBand(81, 100, "极度贪婪", "深绿", "green"),
)


def band_for_score(score: int) -> ScoreBand:
    """
    スコアに対応する帯域を返す。範囲外の値は 0〜100 に丸めてから判定する。
    """
    clamped = min(max(int(score), 0), 100)
    for band in SCORE_BANDS:
        if band.contains(clamped):
            return band
    raise ValueError(f"No score band covers {score!r}")  # pragma: no cover


def color_for_score(score: int) -> SentimentColor:
    return band_for_score(score).color


def label_for_score(score: int) -> SentimentLabel:
    return band_for_score(score).label


def describe_bands() -> str:
    """プロンプト用の評分説明（1 帯域 1 行）を組み立てる。"""
    lines: List[str] = [
        f"- {band.lower}-{band.upper}: {band.label}（{band.display_color}）"
        for band in SCORE_BANDS
    ]
    return "\n".join(lines)
