from __future__ import annotations

from functools import lru_cache

from mindmate.clients.llm_providers import CompletionProvider, create_provider, get_provider_config
from mindmate.core.config import Settings, load_settings
from mindmate.services.chat import ChatService
from mindmate.services.quick_action import QuickActionService


@lru_cache
def get_settings() -> Settings:
    return load_settings()


@lru_cache
def get_completion_provider() -> CompletionProvider | None:
    settings = get_settings()
    config = get_provider_config(settings)
    if config is None:
        return None
    return create_provider(config, timeout_seconds=settings.ai_timeout_seconds)


@lru_cache
def get_chat_service() -> ChatService:
    settings = get_settings()
    return ChatService(
        get_completion_provider(),
        timeout_seconds=settings.ai_timeout_seconds,
        server_emotion_detection=settings.server_emotion_detection,
    )


@lru_cache
def get_quick_action_service() -> QuickActionService:
    return QuickActionService(
        get_completion_provider(),
        timeout_seconds=get_settings().ai_timeout_seconds,
    )
