# backend/tests/test_config.py

import pytest

from market_sentiment.ai.bands import band_for_score, color_for_score, label_for_score
from market_sentiment.ai.config import get_llm_settings
from market_sentiment.ai.schemas import ResponseSchema
from market_sentiment.main import create_app, get_log_level
from market_sentiment.news.config import get_news_settings
from market_sentiment.utils.config import EnvVarMissingError, get_env, get_env_bool


def test_get_env_treats_empty_as_missing(monkeypatch):
    monkeypatch.setenv("MS_TEST_VALUE", "")

    assert get_env("MS_TEST_VALUE", default="fallback", required=False) == "fallback"
    with pytest.raises(EnvVarMissingError):
        get_env("MS_TEST_VALUE")


def test_get_env_bool_parses_and_rejects(monkeypatch):
    monkeypatch.setenv("MS_TEST_FLAG", "Off")
    assert get_env_bool("MS_TEST_FLAG", default=True) is False

    monkeypatch.setenv("MS_TEST_FLAG", "maybe")
    with pytest.raises(RuntimeError):
        get_env_bool("MS_TEST_FLAG", default=True)


def test_llm_settings_defaults_to_mock_friendly_values():
    settings = get_llm_settings()

    assert settings.anthropic_api_key is None
    assert settings.zhipu_api_key is None
    assert settings.structured_output is True
    assert settings.response_schema == ResponseSchema.DASHBOARD
    assert settings.zhipu_temperature == 0.7
    assert settings.zhipu_max_tokens == 2000


def test_llm_settings_from_env(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-api03-abc")
    monkeypatch.setenv("RESPONSE_SCHEMA", "Factors")
    monkeypatch.setenv("LLM_STRUCTURED_OUTPUT", "false")
    monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "12.5")

    settings = get_llm_settings()

    assert settings.secondary_api_key == "sk-ant-api03-abc"
    assert settings.response_schema == ResponseSchema.FACTORS
    assert settings.structured_output is False
    assert settings.timeout_seconds == 12.5


def test_invalid_response_schema_raises(monkeypatch):
    monkeypatch.setenv("RESPONSE_SCHEMA", "verbose")

    with pytest.raises(RuntimeError):
        get_llm_settings()


def test_news_settings_without_key_is_not_configured():
    assert get_news_settings().is_configured is False


def test_score_bands():
    assert (label_for_score(0), color_for_score(0)) == ("极度恐慌", "red")
    assert (label_for_score(30), label_for_score(31)) == ("极度恐慌", "恐慌")
    assert (label_for_score(45), color_for_score(45)) == ("恐慌", "red")
    assert (label_for_score(46), color_for_score(46)) == ("中性偏空", "yellow")
    assert (label_for_score(65), color_for_score(65)) == ("中性", "yellow")
    assert (label_for_score(66), color_for_score(66)) == ("贪婪", "green")
    assert (label_for_score(100), band_for_score(100).display_color) == ("极度贪婪", "深绿")


def test_log_level_falls_back_to_info_on_unknown_value(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert get_log_level() == "INFO"

    monkeypatch.setenv("LOG_LEVEL", " debug ")
    assert get_log_level() == "DEBUG"


def test_create_app_survives_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    app = create_app()

    assert app.title == "Market Sentiment Backend"
