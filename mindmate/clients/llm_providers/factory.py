"""Factory for creating completion provider instances."""

from __future__ import annotations

import logging
from typing import Any

from mindmate.clients.llm_providers.base import (
    DEFAULT_HTTP_CHAT_URL,
    DEFAULT_MODEL_IDS,
    CompletionProvider,
    LLMProvider,
    ModelConfig,
)
from mindmate.core.config import DEFAULT_AI_TIMEOUT_SECONDS, Settings

logger = logging.getLogger(__name__)

# Sampling temperature for the chat-completion SDK backend when none is configured.
DEFAULT_OPENAI_TEMPERATURE = 0.7


def create_provider(
    config: ModelConfig, timeout_seconds: float = DEFAULT_AI_TIMEOUT_SECONDS
) -> CompletionProvider:
    """Create a completion provider instance.

    Args:
        config: Model configuration including provider, model_id, and api_key.
        timeout_seconds: Network timeout for backends that take one directly.

    Returns:
        A CompletionProvider for the configured backend.

    Raises:
        ValueError: If provider is not supported or API key is missing.
        ImportError: If required provider package is not installed.
    """
    if not config.api_key:
        raise ValueError(f"API key is required for provider '{config.provider.value}'")

    if config.provider == LLMProvider.GEMINI:
        return _create_gemini_provider(config)
    elif config.provider == LLMProvider.OPENAI:
        return _create_openai_provider(config)
    elif config.provider == LLMProvider.HTTP:
        return _create_http_provider(config, timeout_seconds)
    else:
        raise ValueError(f"Unsupported provider: {config.provider}")


def _create_gemini_provider(config: ModelConfig) -> CompletionProvider:
    """Create a Gemini-backed provider."""
    try:
        from strands.models.gemini import GeminiModel
    except ImportError as e:
        raise ImportError(
            "Gemini support requires 'strands-agents[gemini]'. "
            "Install with: pip install 'strands-agents[gemini]'"
        ) from e
    from mindmate.clients.strands_agent import StrandsCompletionProvider

    params: dict[str, Any] = {}
    if config.temperature is not None:
        params["temperature"] = config.temperature
    if config.max_tokens is not None:
        params["max_output_tokens"] = config.max_tokens

    model_kwargs: dict[str, Any] = {
        "client_args": {"api_key": config.api_key},
        "model_id": config.model_id,
    }
    if params:
        model_kwargs["params"] = params
    return StrandsCompletionProvider(GeminiModel(**model_kwargs), name="gemini")


def _create_openai_provider(config: ModelConfig) -> CompletionProvider:
    """Create an OpenAI chat-completion provider."""
    try:
        from strands.models.openai import OpenAIModel
    except ImportError as e:
        raise ImportError(
            "OpenAI support requires 'strands-agents[openai]'. "
            "Install with: pip install 'strands-agents[openai]'"
        ) from e
    from mindmate.clients.strands_agent import StrandsCompletionProvider

    params: dict[str, Any] = {}
    if config.temperature is not None:
        params["temperature"] = config.temperature
    if config.max_tokens is not None:
        params["max_tokens"] = config.max_tokens

    model = OpenAIModel(
        client_args={"api_key": config.api_key},
        model_id=config.model_id,
        params=params,
    )
    return StrandsCompletionProvider(model, name="openai")


def _create_http_provider(config: ModelConfig, timeout_seconds: float) -> CompletionProvider:
    """Create a raw HTTP chat-completion provider."""
    from mindmate.clients.http_chat import HttpChatCompletionProvider

    return HttpChatCompletionProvider(config, timeout_seconds=timeout_seconds)


def get_provider_config(settings: Settings) -> ModelConfig | None:
    """Build ModelConfig from application settings.

    Determines the appropriate provider and API key based on settings.
    Unknown provider names fall back to Gemini.

    Args:
        settings: Application settings.

    Returns:
        ModelConfig if a valid provider is configured, None otherwise.
    """
    provider_str = settings.ai_provider.lower().strip()

    # Resolve provider, API key and sampling options
    temperature = settings.ai_temperature
    max_tokens: int | None = settings.ai_max_tokens
    base_url = ""
    if provider_str == "gemini":
        api_key = settings.gemini_api_key
        max_tokens = None
    elif provider_str == "openai":
        api_key = settings.openai_api_key
        if temperature is None:
            temperature = DEFAULT_OPENAI_TEMPERATURE
    elif provider_str == "http":
        api_key = settings.http_ai_api_key
        base_url = settings.http_ai_url or DEFAULT_HTTP_CHAT_URL
    else:
        logger.warning("Unknown AI provider '%s', falling back to gemini", provider_str)
        api_key = settings.gemini_api_key
        provider_str = "gemini"
        max_tokens = None

    if not api_key:
        logger.warning(
            "No API key configured for provider '%s'. AI responses will use fallback mode.",
            provider_str,
        )
        return None

    try:
        provider = LLMProvider.from_string(provider_str)
    except ValueError:
        logger.error("Invalid provider: %s", provider_str)
        return None

    # Use configured model_id or default
    model_id = settings.ai_model_id or DEFAULT_MODEL_IDS[provider]

    return ModelConfig(
        provider=provider,
        model_id=model_id,
        api_key=api_key,
        temperature=temperature,
        max_tokens=max_tokens,
        base_url=base_url,
    )
