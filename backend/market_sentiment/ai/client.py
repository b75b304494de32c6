# backend/market_sentiment/ai/client.py

"""
LLM プロバイダとの HTTP 通信を担当するクライアントモジュール。

- AnthropicClient: Messages API（構造化出力はツール呼び出しを強制して実現する）
- ZhipuClient: 智谱 GLM の chat/completions API
"""

import re
from typing import Any, Dict, List

import httpx

from .config import LLMSettings

_JSON_FENCE = re.compile(r"```json\n?")
_FENCE = re.compile(r"```\n?")


class LLMClientError(Exception):
    """LLM クライアント全般の基底例外。"""


class LLMConnectionError(LLMClientError):
    """接続エラー・タイムアウト時の例外。"""


class LLMHTTPError(LLMClientError):
    """HTTP ステータスコードがエラーだった場合の例外。"""

    def __init__(self, status_code: int, body: Any | None = None) -> None:
        super().__init__(f"LLM API error: status_code={status_code}")
        self.status_code = status_code
        self.body = body


class LLMResponseError(LLMClientError):
    """レスポンスが想定した形式でなかった場合の例外。"""


def strip_code_fences(text: str) -> str:
    """モデル出力から Markdown のコードフェンス記号を取り除く。"""
    return _FENCE.sub("", _JSON_FENCE.sub("", text)).strip()


def _post_json(
    url: str,
    *,
    headers: Dict[str, str],
    payload: Dict[str, Any],
    timeout: float,
) -> Dict[str, Any]:
    try:
        response = httpx.post(url, headers=headers, json=payload, timeout=timeout)
    except httpx.RequestError as exc:
        raise LLMConnectionError(str(exc)) from exc

    if response.status_code // 100 != 2:
        raise LLMHTTPError(status_code=response.status_code, body=response.text)

    try:
        data = response.json()
    except ValueError as exc:
        raise LLMResponseError("LLM API returned a non-JSON body.") from exc

    if not isinstance(data, dict):
        raise LLMResponseError("Unexpected LLM API response format: body is not an object.")
    return data


class AnthropicClient:
    """
    Anthropic Messages API への HTTP クライアント。
    """

    def __init__(self, settings: LLMSettings) -> None:
        if not settings.anthropic_api_key:
            raise LLMClientError("ANTHROPIC_API_KEY is not configured.")
        self._settings = settings

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self._settings.anthropic_api_key,
            "anthropic-version": self._settings.anthropic_version,
        }

    def _send(self, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        data = _post_json(
            self._settings.anthropic_api_url,
            headers=self._build_headers(),
            payload=payload,
            timeout=self._settings.timeout_seconds,
        )
        content = data.get("content")
        if not isinstance(content, list):
            raise LLMResponseError("Unexpected Anthropic response format: 'content' is not a list.")
        return content

    def _base_payload(self, system: str, user: str) -> Dict[str, Any]:
        return {
            "model": self._settings.anthropic_model,
            "max_tokens": self._settings.anthropic_max_tokens,
            "system": system,
            "messages": [{"role": "user", "content": user}],
        }

    def generate_structured(
        self,
        *,
        system: str,
        user: str,
        tool_name: str,
        input_schema: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        指定した JSON Schema のツール呼び出しを強制し、その入力（dict）を返す。

        スキーマへの適合チェックは呼び出し側（pydantic モデル）で行う。
        """
        payload = self._base_payload(system, user)
        payload["tools"] = [
            {
                "name": tool_name,
                "description": "Record the market sentiment analysis result.",
                "input_schema": input_schema,
            }
        ]
        payload["tool_choice"] = {"type": "tool", "name": tool_name}

        for block in self._send(payload):
            if isinstance(block, dict) and block.get("type") == "tool_use":
                tool_input = block.get("input")
                if not isinstance(tool_input, dict):
                    raise LLMResponseError("Anthropic tool_use block has no object input.")
                return tool_input

        raise LLMResponseError("Anthropic response contained no tool_use block.")

    def generate_text(self, *, system: str, user: str) -> str:
        """自由形式のテキスト生成。text ブロックを連結して返す。"""
        texts = [
            block.get("text", "")
            for block in self._send(self._base_payload(system, user))
            if isinstance(block, dict) and block.get("type") == "text"
        ]
        if not texts:
            raise LLMResponseError("Anthropic response contained no text block.")
        return "".join(texts)


class ZhipuClient:
    """
    智谱 GLM chat/completions API への HTTP クライアント。
    """

    def __init__(self, settings: LLMSettings) -> None:
        if not settings.secondary_api_key:
            raise LLMClientError("No Zhipu AI API key")
        self._settings = settings

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._settings.secondary_api_key}",
        }

    def chat(self, messages: List[Dict[str, str]]) -> str:
        """
        メッセージ列を送り、最初の choice の本文（コードフェンス除去済み）を返す。
        """
        data = _post_json(
            self._settings.zhipu_api_url,
            headers=self._build_headers(),
            payload={
                "model": self._settings.zhipu_model,
                "messages": messages,
                "temperature": self._settings.zhipu_temperature,
                "max_tokens": self._settings.zhipu_max_tokens,
            },
            timeout=self._settings.timeout_seconds,
        )

        try:
            content = data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError):
            content = ""

        return strip_code_fences(content)
