# backend/market_sentiment/mock_data.py

"""
外部 API が使えない場合に返す、決定的なモックデータの生成。

ティッカー文字列の文字コード合計をハッシュとして使い、
同じシンボルには常に同じ結果を返す（乱数は使わない）。
"""

from typing import List, Sequence

from market_sentiment.ai.bands import color_for_score, label_for_score
from market_sentiment.ai.schemas import DashboardAnalysis, FactorAnalysis
from market_sentiment.news.schemas import NewsBundle, NewsItem, Sentiment

OPTIMISTIC_THRESHOLD = 66

BEARISH_OPTIONS = (
    "行业监管政策可能带来不确定性",
    "竞争对手新产品可能加剧市场竞争",
    "宏观经济环境仍存在波动风险",
    "原材料价格上涨可能影响利润率",
    "汇率波动可能影响海外业务",
    "供应链中断风险需要持续关注",
)


def symbol_hash(symbol: str) -> int:
    """UTF-16 のコードユニット単位で合計する（BMP 外の文字はサロゲート 2 つ分）。"""
    data = symbol.encode("utf-16-le")
    return sum(int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2))


def _bullish_options(symbol: str) -> List[str]:
    return [
        f"{symbol} 营收超预期，显示公司基本面强劲",
        "分析师集体上调目标价，市场信心增强",
        "战略投资计划将推动长期增长",
        "新产品发布有望打开新的市场空间",
        "订单量持续增长，业务扩张势头良好",
        "市场份额稳步提升，竞争优势明显",
    ]


def _pick(options: Sequence[str], seed: int, offsets: Sequence[int]) -> List[str]:
    return [options[(seed + offset) % len(options)] for offset in offsets]


def mock_news(symbol: str) -> NewsBundle:
    """固定 5 件のニュース（ポジティブ 3 件、ネガティブ 2 件）。"""
    items = [
        NewsItem(
            title=f"{symbol} 发布季度财报，营收超预期 15%",
            summary="该公司本季度营收达到预期水平，净利润同比增长显著。",
            sentiment=Sentiment.POSITIVE,
        ),
        NewsItem(
            title=f"市场分析师上调 {symbol} 目标价",
            summary="多家投行发布研报，认为该公司业务前景乐观。",
            sentiment=Sentiment.POSITIVE,
        ),
        NewsItem(
            title=f"{symbol} 宣布新一轮战略投资计划",
            summary="公司将加大在核心业务领域的投入，预计未来增长强劲。",
            sentiment=Sentiment.POSITIVE,
        ),
        NewsItem(
            title=f"行业监管政策可能影响 {symbol} 业务",
            summary="新的监管政策可能对公司部分业务带来不确定性。",
            sentiment=Sentiment.NEGATIVE,
        ),
        NewsItem(
            title=f"{symbol} 竞争对手推出新产品",
            summary="主要竞争对手发布了类似产品，可能加剧市场竞争。",
            sentiment=Sentiment.NEGATIVE,
        ),
    ]
    return NewsBundle(symbol=symbol.upper(), news=items)


def mock_analysis(symbol: str) -> DashboardAnalysis:
    """
    dashboard 形式のモック分析結果。

    スコアは 50 + (hash % 41) で 50〜90 の範囲に収まる。
    看涨は hash+0..2、看跌は hash+3..5 番目を 6 件のプールから選ぶ。
    """
    seed = symbol_hash(symbol)
    score = 50 + seed % 41
    optimistic = score >= OPTIMISTIC_THRESHOLD

    # 長いシンボルでも必ず組み立てられるよう、文字数上限の検証は通さない
    return DashboardAnalysis.model_construct(
        ticker=symbol.upper(),
        sentiment_score=score,
        sentiment_color=color_for_score(score),
        summary=(
            f"{symbol} 当前市场情绪呈现{'偏乐观' if optimistic else '偏谨慎'}态势，"
            f"建议关注{'上行' if optimistic else '下行'}风险。"
        ),
        bullish_points=_pick(_bullish_options(symbol), seed, (0, 1, 2)),
        bearish_points=_pick(BEARISH_OPTIONS, seed, (3, 4, 5)),
    )


def mock_factor_analysis(symbol: str) -> FactorAnalysis:
    """factors 形式のモック。mock_analysis と同じスコア・ポイントを使う。"""
    base = mock_analysis(symbol)
    return FactorAnalysis.model_construct(
        sentiment_score=base.sentiment_score,
        sentiment_label=label_for_score(base.sentiment_score),
        bullish_factors=list(base.bullish_points),
        bearish_factors=list(base.bearish_points),
    )
