# backend/market_sentiment/ai/prompts.py

"""
LLM に渡す system / user プロンプトの組み立て。

評分説明は bands.SCORE_BANDS から生成するため、
モックの色・ラベル導出と常に一致する。
"""

from market_sentiment.news.schemas import NewsBundle

from .bands import describe_bands
from .schemas import ResponseSchema

_DASHBOARD_FORMAT = """{
  "ticker": "股票代码",
  "sentimentScore": 0-100 的整数,
  "sentimentColor": "red" | "yellow" | "green",
  "summary": "一句话市场总结（最多50字）",
  "bullishPoints": ["看涨理由1", "看涨理由2", "看涨理由3"],
  "bearishPoints": ["看跌风险1", "看跌风险2", "看跌风险3"]
}"""

_FACTORS_FORMAT = """{
  "sentimentScore": 0-100 的整数,
  "sentimentLabel": "极度恐慌" | "恐慌" | "中性偏空" | "中性" | "中性偏多" | "贪婪" | "极度贪婪",
  "bullishFactors": ["看涨因素1", "看涨因素2", "看涨因素3"],
  "bearishFactors": ["看跌因素1", "看跌因素2", "看跌因素3"]
}"""

_SYSTEM_TEMPLATE = """你是一个专业的投资分析师，擅长分析股票/加密货币的市场情绪。

你的任务是基于提供的新闻数据，分析该资产的市场情况，并严格按照以下 JSON 格式返回结果：

{response_format}

评分说明：
{bands}

请严格按照以上 JSON 格式返回，不要添加任何额外文字。"""

_USER_TEMPLATE = """请分析以下 {symbol} 的新闻数据：

{news_json}

请给出市场情绪分析结果。"""


def build_system_prompt(schema: ResponseSchema) -> str:
    response_format = _FACTORS_FORMAT if schema is ResponseSchema.FACTORS else _DASHBOARD_FORMAT
    return _SYSTEM_TEMPLATE.format(response_format=response_format, bands=describe_bands())


def build_user_prompt(symbol: str, bundle: NewsBundle) -> str:
    return _USER_TEMPLATE.format(
        symbol=symbol.upper(),
        news_json=bundle.model_dump_json(indent=2, exclude_none=True),
    )
