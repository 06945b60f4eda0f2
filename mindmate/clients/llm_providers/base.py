"""Base types and protocols for completion providers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class LLMProvider(str, Enum):
    """Supported completion backends."""

    GEMINI = "gemini"
    OPENAI = "openai"
    HTTP = "http"

    @classmethod
    def from_string(cls, value: str) -> LLMProvider:
        """Convert string to LLMProvider enum.

        Args:
            value: Provider name (case-insensitive).

        Returns:
            LLMProvider enum value.

        Raises:
            ValueError: If provider is not supported.
        """
        normalized = value.lower().strip()
        for provider in cls:
            if provider.value == normalized:
                return provider
        supported = ", ".join(p.value for p in cls)
        raise ValueError(f"Unsupported provider '{value}'. Supported: {supported}")


class ProviderError(Exception):
    """Raised by any provider when a completion cannot be produced."""


@dataclass(frozen=True)
class ModelConfig:
    """Configuration for a completion backend.

    Attributes:
        provider: The backend type (gemini, openai, http).
        model_id: The specific model identifier.
        api_key: API key for authentication.
        temperature: Optional sampling temperature.
        max_tokens: Optional maximum tokens in response.
        base_url: Endpoint URL, used by the raw HTTP backend only.
    """

    provider: LLMProvider
    model_id: str
    api_key: str
    temperature: float | None = None
    max_tokens: int | None = None
    base_url: str = ""


@runtime_checkable
class CompletionProvider(Protocol):
    """A backend that turns a system + user prompt pair into reply text.

    Implementations raise ProviderError on every failure.
    """

    async def complete(self, system_prompt: str, user_prompt: str) -> str: ...


# Default model IDs per provider
DEFAULT_MODEL_IDS: dict[LLMProvider, str] = {
    LLMProvider.GEMINI: "gemini-2.0-flash",
    LLMProvider.OPENAI: "gpt-4o-mini",
    LLMProvider.HTTP: "llama-3.1-8b-instant",
}

DEFAULT_HTTP_CHAT_URL = "https://api.groq.com/openai/v1/chat/completions"
