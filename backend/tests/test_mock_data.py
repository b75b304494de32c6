# backend/tests/test_mock_data.py

import json

from market_sentiment.ai.schemas import DashboardAnalysis
from market_sentiment.mock_data import (
    BEARISH_OPTIONS,
    _bullish_options,
    mock_analysis,
    mock_factor_analysis,
    mock_news,
    symbol_hash,
)
from market_sentiment.news.schemas import Sentiment


def test_mock_analysis_is_deterministic():
    first = mock_analysis("AAPL")
    second = mock_analysis("AAPL")

    assert json.dumps(first.to_wire(), ensure_ascii=False) == json.dumps(
        second.to_wire(), ensure_ascii=False
    )


def test_mock_analysis_known_values_for_aapl():
    # 65 + 65 + 80 + 76 = 286 -> 286 % 41 = 40 -> score 90
    assert symbol_hash("AAPL") == 286
    result = mock_analysis("AAPL")

    assert result.ticker == "AAPL"
    assert result.sentiment_score == 90
    assert result.sentiment_color == "green"
    assert result.summary == "AAPL 当前市场情绪呈现偏乐观态势，建议关注上行风险。"
    # 286 % 6 = 4 -> 4, 5, 0
    assert result.bullish_points == [
        "订单量持续增长，业务扩张势头良好",
        "市场份额稳步提升，竞争优势明显",
        "AAPL 营收超预期，显示公司基本面强劲",
    ]
    # 289 % 6 = 1 -> 1, 2, 3
    assert result.bearish_points == [
        "竞争对手新产品可能加剧市场竞争",
        "宏观经济环境仍存在波动风险",
        "原材料价格上涨可能影响利润率",
    ]


def test_mock_analysis_low_score_is_cautious():
    # 65 + 77 + 68 = 210 -> 210 % 41 = 5 -> score 55
    result = mock_analysis("AMD")

    assert result.sentiment_score == 55
    assert result.sentiment_color == "yellow"
    assert "偏谨慎" in result.summary
    assert "下行" in result.summary


def test_mock_analysis_ranges_and_pools():
    for symbol in ["A", "BTC", "ETH-USD", "tsla", "0700.HK", "X" * 20, "贵州茅台"]:
        result = mock_analysis(symbol)

        assert 50 <= result.sentiment_score <= 90
        assert len(result.bullish_points) == 3
        assert len(result.bearish_points) == 3
        assert len(set(result.bullish_points)) == 3
        assert len(set(result.bearish_points)) == 3
        assert set(result.bullish_points) <= set(_bullish_options(symbol))
        assert set(result.bearish_points) <= set(BEARISH_OPTIONS)


def test_mock_analysis_uppercases_ticker_only():
    result = mock_analysis("tsla")

    assert result.ticker == "TSLA"
    assert result.summary.startswith("tsla ")


def test_mock_factor_analysis_matches_dashboard_variant():
    base = mock_analysis("AAPL")
    factors = mock_factor_analysis("AAPL")

    assert factors.sentiment_score == base.sentiment_score
    assert factors.sentiment_label == "极度贪婪"
    assert factors.bullish_factors == base.bullish_points
    assert factors.bearish_factors == base.bearish_points


def test_mock_news_template():
    bundle = mock_news("nvda")

    assert bundle.symbol == "NVDA"
    assert len(bundle.news) == 5
    assert [item.sentiment for item in bundle.news] == [
        Sentiment.POSITIVE,
        Sentiment.POSITIVE,
        Sentiment.POSITIVE,
        Sentiment.NEGATIVE,
        Sentiment.NEGATIVE,
    ]
    assert bundle.news[0].title == "nvda 发布季度财报，营收超预期 15%"
    assert all(item.url is None for item in bundle.news)


def test_analysis_wire_round_trip():
    original = mock_analysis("MSFT")
    wire = json.loads(json.dumps(original.to_wire(), ensure_ascii=False))

    assert set(wire) == {
        "ticker",
        "sentimentScore",
        "sentimentColor",
        "summary",
        "bullishPoints",
        "bearishPoints",
    }
    assert DashboardAnalysis.model_validate(wire) == original


def test_symbol_hash_counts_utf16_code_units():
    # U+1F600 はサロゲートペア 0xD83D + 0xDE00 として数える
    assert symbol_hash("😀") == 0xD83D + 0xDE00
    assert symbol_hash("AAPL") == 286


def test_mock_analysis_accepts_long_symbol():
    symbol = "X" * 90

    result = mock_analysis(symbol)
    factors = mock_factor_analysis(symbol)

    assert result.ticker == symbol
    assert result.summary.startswith(symbol)
    assert factors.sentiment_score == result.sentiment_score
    assert result.to_wire()["ticker"] == symbol
