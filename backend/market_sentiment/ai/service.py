# backend/market_sentiment/ai/service.py

"""
AI 分析ロジックのサービス層。

責務:
- 設定された API キーから LLM バックエンド（Anthropic / 智谱 / モック）を選ぶ
- ニュースを埋め込んだプロンプトで分析を依頼し、出力をスキーマで検証する
- 通信エラー・HTTP エラー・JSON 解析失敗・スキーマ違反のときはモック分析に倒す
  （例外は呼び出し側に伝播させず、ログにだけ残す）
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from market_sentiment.mock_data import mock_analysis, mock_factor_analysis
from market_sentiment.news.schemas import NewsBundle
from market_sentiment.utils.result import Sourced

from .client import AnthropicClient, LLMClientError, ZhipuClient, strip_code_fences
from .config import SECONDARY_KEY_PREFIX, LLMSettings
from .prompts import build_system_prompt, build_user_prompt
from .schemas import AnalysisResult, ResponseSchema

logger = logging.getLogger(__name__)

STRUCTURED_TOOL_NAME = "record_market_sentiment"


class Backend(str, Enum):
    """分析に使うバックエンド。"""

    ANTHROPIC = "anthropic"
    ZHIPU = "zhipu"
    MOCK = "mock"


def select_backend(settings: LLMSettings) -> Backend:
    """
    バックエンド選択ルール:

    1. ZHIPU_API_KEY がある、または ANTHROPIC_API_KEY が特定の接頭辞で始まる → 智谱
    2. ANTHROPIC_API_KEY がある → Anthropic
    3. それ以外 → モック
    """
    anthropic_key = settings.anthropic_api_key or ""
    if settings.zhipu_api_key or anthropic_key.startswith(SECONDARY_KEY_PREFIX):
        return Backend.ZHIPU
    if anthropic_key:
        return Backend.ANTHROPIC
    return Backend.MOCK


def mock_result(schema: ResponseSchema, symbol: str) -> AnalysisResult:
    """レスポンス形式に応じたモック分析結果を返す。"""
    if schema is ResponseSchema.FACTORS:
        return mock_factor_analysis(symbol)
    return mock_analysis(symbol)


def parse_model_json(text: str) -> Any:
    """
    モデルの自由形式出力を JSON として解釈する。

    失敗時は json.JSONDecodeError（ValueError）を送出する。
    """
    return json.loads(strip_code_fences(text))


class AnalysisService:
    """
    ティッカーと NewsBundle を受け取り、分析結果を返すサービスクラス。

    - コンストラクタでクライアントを注入可能（テストではダミーを渡す）
    - 注入されない場合は、API キーがあるバックエンドの分だけクライアントを生成する
    """

    def __init__(
        self,
        settings: LLMSettings,
        *,
        anthropic_client: Optional[AnthropicClient] = None,
        zhipu_client: Optional[ZhipuClient] = None,
    ) -> None:
        self._settings = settings

        if anthropic_client is None and settings.anthropic_api_key:
            anthropic_client = AnthropicClient(settings)
        if zhipu_client is None and settings.secondary_api_key:
            zhipu_client = ZhipuClient(settings)

        self._anthropic = anthropic_client
        self._zhipu = zhipu_client

    @property
    def response_schema(self) -> ResponseSchema:
        return self._settings.response_schema

    def mock(self, symbol: str) -> AnalysisResult:
        return mock_result(self.response_schema, symbol)

    def request_analysis(self, symbol: str, bundle: NewsBundle) -> Sourced[AnalysisResult]:
        """
        分析結果を返す。どのような失敗でも例外は送出せず、モックに倒す。
        """
        backend = select_backend(self._settings)
        if backend is Backend.MOCK:
            logger.info("Using mock analysis (no AI API key). symbol=%s", symbol)
            return Sourced.mock(self.mock(symbol), reason="LLM API key not configured")

        system = build_system_prompt(self.response_schema)
        user = build_user_prompt(symbol, bundle)

        try:
            if backend is Backend.ZHIPU:
                logger.info("Using Zhipu AI for analysis. symbol=%s", symbol)
                result = self._analyze_with_zhipu(system, user)
            else:
                result = self._analyze_with_anthropic(system, user)
        except Exception as exc:  # noqa: BLE001
            # プロンプトやニュース本文はログに残さない
            logger.warning(
                "AI analysis failed; fallback to mock analysis. backend=%s symbol=%s error=%s",
                backend.value,
                symbol,
                exc,
            )
            return Sourced.mock(
                self.mock(symbol),
                reason=f"{backend.value} analysis failed: {exc}",
            )

        return Sourced.live(result, origin=backend.value)

    def _analyze_with_anthropic(self, system: str, user: str) -> AnalysisResult:
        if self._anthropic is None:
            raise LLMClientError("Anthropic client is not configured.")

        if self._settings.structured_output:
            payload = self._anthropic.generate_structured(
                system=system,
                user=user,
                tool_name=STRUCTURED_TOOL_NAME,
                input_schema=self.response_schema.model.model_json_schema(),
            )
        else:
            payload = parse_model_json(self._anthropic.generate_text(system=system, user=user))

        return self.response_schema.validate_payload(payload)

    def _analyze_with_zhipu(self, system: str, user: str) -> AnalysisResult:
        if self._zhipu is None:
            raise LLMClientError("No Zhipu AI API key")

        messages: List[Dict[str, str]] = [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]
        payload = parse_model_json(self._zhipu.chat(messages))
        return self.response_schema.validate_payload(payload)
