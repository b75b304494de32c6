# backend/market_sentiment/ai/config.py

"""
LLM 呼び出しに関する設定値の読み出しモジュール。

- Anthropic（プライマリ）/ 智谱 GLM（セカンダリ）の API キーとモデル
- 構造化出力を使うかどうか
- レスポンス形式（dashboard / factors）
"""

from dataclasses import dataclass
from typing import Optional

from market_sentiment.utils.config import get_env, get_env_bool, get_env_float

from .schemas import ResponseSchema

# この接頭辞を持つ ANTHROPIC_API_KEY は智谱側のエンドポイントで使う
SECONDARY_KEY_PREFIX = "sk-ant-api03-"


@dataclass(frozen=True)
class LLMSettings:
    """LLM バックエンド用の設定値コンテナ。"""

    anthropic_api_key: Optional[str] = None
    zhipu_api_key: Optional[str] = None
    anthropic_model: str = "claude-3-5-sonnet-20241022"
    anthropic_api_url: str = "https://api.anthropic.com/v1/messages"
    anthropic_version: str = "2023-06-01"
    anthropic_max_tokens: int = 2000
    zhipu_model: str = "glm-4-flash"
    zhipu_api_url: str = "https://open.bigmodel.cn/api/paas/v4/chat/completions"
    zhipu_temperature: float = 0.7
    zhipu_max_tokens: int = 2000
    structured_output: bool = True
    response_schema: ResponseSchema = ResponseSchema.DASHBOARD
    timeout_seconds: float = 30.0

    @property
    def secondary_api_key(self) -> Optional[str]:
        """智谱 API に渡す Bearer トークン（ZHIPU_API_KEY を優先）。"""
        return self.zhipu_api_key or self.anthropic_api_key


def _get_response_schema() -> ResponseSchema:
    raw = get_env("RESPONSE_SCHEMA", default=ResponseSchema.DASHBOARD.value, required=False)
    try:
        return ResponseSchema(raw.strip().lower())
    except ValueError as exc:  # noqa: TRY003
        raise RuntimeError(
            f"Invalid value for env var RESPONSE_SCHEMA: {raw!r} "
            f"(expected one of {[s.value for s in ResponseSchema]})"
        ) from exc


def get_llm_settings() -> LLMSettings:
    """
    LLMSettings を環境変数から構築して返す。

    任意（すべて未設定でも起動でき、その場合はモック分析になる）:
      - ANTHROPIC_API_KEY / ANTHROPIC_MODEL
      - ZHIPU_API_KEY / ZHIPU_MODEL
      - LLM_STRUCTURED_OUTPUT  (デフォルト: true)
      - LLM_TIMEOUT_SECONDS    (デフォルト: 30 秒)
      - RESPONSE_SCHEMA        (dashboard / factors、デフォルト: dashboard)
    """
    defaults = LLMSettings()
    return LLMSettings(
        anthropic_api_key=get_env("ANTHROPIC_API_KEY", required=False),
        zhipu_api_key=get_env("ZHIPU_API_KEY", required=False),
        anthropic_model=get_env(
            "ANTHROPIC_MODEL", default=defaults.anthropic_model, required=False
        ),
        zhipu_model=get_env("ZHIPU_MODEL", default=defaults.zhipu_model, required=False),
        structured_output=get_env_bool("LLM_STRUCTURED_OUTPUT", default=True),
        response_schema=_get_response_schema(),
        timeout_seconds=get_env_float("LLM_TIMEOUT_SECONDS", default=defaults.timeout_seconds),
    )
