from __future__ import annotations

import logging
from dataclasses import replace

import pytest

from mindmate.clients.http_chat import HttpChatCompletionProvider
from mindmate.clients.llm_providers import (
    LLMProvider,
    ModelConfig,
    create_provider,
    get_provider_config,
)
from mindmate.clients.llm_providers.base import DEFAULT_HTTP_CHAT_URL, DEFAULT_MODEL_IDS
from mindmate.core.config import Settings


def _settings(**overrides: object) -> Settings:
    base = Settings(
        host="127.0.0.1",
        port=8000,
        log_level="info",
        ai_provider="gemini",
        ai_model_id="",
        gemini_api_key="",
        openai_api_key="",
        http_ai_api_key="",
        http_ai_url="",
        ai_max_tokens=150,
        ai_temperature=None,
        ai_timeout_seconds=20.0,
        server_emotion_detection=True,
        static_dir="",
    )
    return replace(base, **overrides)  # type: ignore[arg-type]


def test_llm_provider_from_string() -> None:
    assert LLMProvider.from_string(" OpenAI ") == LLMProvider.OPENAI
    with pytest.raises(ValueError, match="Unsupported provider"):
        LLMProvider.from_string("claude")


def test_provider_config_missing_key_returns_none() -> None:
    assert get_provider_config(_settings()) is None
    assert get_provider_config(_settings(ai_provider="openai", gemini_api_key="g")) is None


def test_provider_config_gemini_defaults() -> None:
    config = get_provider_config(_settings(gemini_api_key="g-key"))

    assert config is not None
    assert config.provider == LLMProvider.GEMINI
    assert config.model_id == DEFAULT_MODEL_IDS[LLMProvider.GEMINI]
    assert config.max_tokens is None


def test_provider_config_openai_uses_bounded_sampling() -> None:
    config = get_provider_config(_settings(ai_provider="openai", openai_api_key="o-key"))

    assert config is not None
    assert config.provider == LLMProvider.OPENAI
    assert config.max_tokens == 150
    assert config.temperature == 0.7


def test_provider_config_http_keeps_backend_default_temperature() -> None:
    config = get_provider_config(
        _settings(ai_provider="http", http_ai_api_key="h-key", ai_model_id="custom")
    )

    assert config is not None
    assert config.provider == LLMProvider.HTTP
    assert config.temperature is None
    assert config.base_url == DEFAULT_HTTP_CHAT_URL
    assert config.model_id == "custom"


def test_provider_config_unknown_provider_falls_back_to_gemini() -> None:
    config = get_provider_config(_settings(ai_provider="mystery", gemini_api_key="g-key"))

    assert config is not None
    assert config.provider == LLMProvider.GEMINI


def test_create_provider_requires_api_key() -> None:
    config = ModelConfig(provider=LLMProvider.HTTP, model_id="m", api_key="")

    with pytest.raises(ValueError, match="API key is required"):
        create_provider(config)


def test_create_provider_builds_http_provider() -> None:
    config = ModelConfig(
        provider=LLMProvider.HTTP,
        model_id="m",
        api_key="k",
        base_url="https://llm.example.test/v1/chat/completions",
    )

    provider = create_provider(config)

    assert isinstance(provider, HttpChatCompletionProvider)
    assert provider.name == "http"


def test_provider_config_missing_key_warns_once(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        get_provider_config(_settings())

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "fallback mode" in warnings[0].getMessage()
