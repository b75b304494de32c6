# backend/tests/test_ai_client.py

import httpx
import pytest

from market_sentiment.ai.client import (
    AnthropicClient,
    LLMClientError,
    LLMConnectionError,
    LLMHTTPError,
    LLMResponseError,
    ZhipuClient,
    strip_code_fences,
)
from market_sentiment.ai.config import LLMSettings


def test_strip_code_fences():
    assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fences('```\n{"a": 1}```\n') == '{"a": 1}'
    assert strip_code_fences('{"a": 1}') == '{"a": 1}'


def test_anthropic_structured_returns_tool_input(monkeypatch):
    captured = {}

    def fake_post(url, **kwargs):
        captured["url"] = url
        captured.update(kwargs)
        return httpx.Response(
            200,
            json={
                "content": [
                    {"type": "tool_use", "name": "record", "input": {"sentimentScore": 70}},
                ]
            },
        )

    monkeypatch.setattr(httpx, "post", fake_post)

    client = AnthropicClient(LLMSettings(anthropic_api_key="dummy-anthropic-key"))
    result = client.generate_structured(
        system="sys",
        user="user",
        tool_name="record",
        input_schema={"type": "object"},
    )

    assert result == {"sentimentScore": 70}
    assert captured["url"] == "https://api.anthropic.com/v1/messages"
    assert captured["headers"]["x-api-key"] == "dummy-anthropic-key"
    body = captured["json"]
    assert body["model"] == "claude-3-5-sonnet-20241022"
    assert body["system"] == "sys"
    assert body["messages"] == [{"role": "user", "content": "user"}]
    assert body["tool_choice"] == {"type": "tool", "name": "record"}
    assert body["tools"][0]["input_schema"] == {"type": "object"}


def test_anthropic_structured_without_tool_use_raises(monkeypatch):
    monkeypatch.setattr(
        httpx,
        "post",
        lambda *a, **k: httpx.Response(200, json={"content": [{"type": "text", "text": "hi"}]}),
    )

    client = AnthropicClient(LLMSettings(anthropic_api_key="dummy-anthropic-key"))
    with pytest.raises(LLMResponseError):
        client.generate_structured(system="s", user="u", tool_name="t", input_schema={})


def test_anthropic_generate_text_joins_text_blocks(monkeypatch):
    monkeypatch.setattr(
        httpx,
        "post",
        lambda *a, **k: httpx.Response(
            200,
            json={"content": [{"type": "text", "text": "{\"a\": "}, {"type": "text", "text": "1}"}]},
        ),
    )

    client = AnthropicClient(LLMSettings(anthropic_api_key="dummy-anthropic-key"))
    assert client.generate_text(system="s", user="u") == '{"a": 1}'


def test_zhipu_chat_sends_fixed_parameters_and_strips_fences(monkeypatch):
    captured = {}

    def fake_post(url, **kwargs):
        captured["url"] = url
        captured.update(kwargs)
        return httpx.Response(
            200,
            json={"choices": [{"message": {"content": '```json\n{"ok": true}\n```'}}]},
        )

    monkeypatch.setattr(httpx, "post", fake_post)

    client = ZhipuClient(LLMSettings(zhipu_api_key="dummy-zhipu-key"))
    text = client.chat([{"role": "user", "content": "hi"}])

    assert text == '{"ok": true}'
    assert captured["url"] == "https://open.bigmodel.cn/api/paas/v4/chat/completions"
    assert captured["headers"]["Authorization"] == "Bearer dummy-zhipu-key"
    assert captured["json"]["model"] == "glm-4-flash"
    assert captured["json"]["temperature"] == 0.7
    assert captured["json"]["max_tokens"] == 2000
    assert captured["timeout"] == 30.0


def test_zhipu_uses_anthropic_key_when_no_zhipu_key(monkeypatch):
    captured = {}

    def fake_post(url, **kwargs):
        captured.update(kwargs)
        return httpx.Response(200, json={"choices": []})

    monkeypatch.setattr(httpx, "post", fake_post)

    client = ZhipuClient(LLMSettings(anthropic_api_key="sk-ant-api03-xyz"))

    assert client.chat([]) == ""
    assert captured["headers"]["Authorization"] == "Bearer sk-ant-api03-xyz"


def test_http_error_is_client_error(monkeypatch):
    monkeypatch.setattr(httpx, "post", lambda *a, **k: httpx.Response(401, text="unauthorized"))

    client = ZhipuClient(LLMSettings(zhipu_api_key="dummy-zhipu-key"))
    with pytest.raises(LLMHTTPError) as exc_info:
        client.chat([])

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == "unauthorized"
    assert issubclass(LLMHTTPError, LLMClientError)


def test_network_error_is_connection_error(monkeypatch):
    def fake_post(*args, **kwargs):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(httpx, "post", fake_post)

    client = AnthropicClient(LLMSettings(anthropic_api_key="dummy-anthropic-key"))
    with pytest.raises(LLMConnectionError):
        client.generate_text(system="s", user="u")


def test_clients_require_credentials():
    with pytest.raises(LLMClientError):
        AnthropicClient(LLMSettings())
    with pytest.raises(LLMClientError):
        ZhipuClient(LLMSettings())
