"""Completion provider abstraction for multi-backend support.

This module provides a unified interface for different completion backends:
- Gemini (Google), through strands-agents
- OpenAI chat completions, through strands-agents
- Any OpenAI-compatible chat-completions URL, called directly over HTTP

Usage:
    from mindmate.clients.llm_providers import create_provider, get_provider_config

    config = get_provider_config(settings)
    if config is not None:
        provider = create_provider(config)
        text = await provider.complete(system_prompt, user_prompt)
"""

from mindmate.clients.llm_providers.base import (
    CompletionProvider,
    LLMProvider,
    ModelConfig,
    ProviderError,
)
from mindmate.clients.llm_providers.factory import create_provider, get_provider_config

__all__ = [
    "CompletionProvider",
    "LLMProvider",
    "ModelConfig",
    "ProviderError",
    "create_provider",
    "get_provider_config",
]
