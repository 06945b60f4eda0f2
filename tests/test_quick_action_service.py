from __future__ import annotations

import asyncio
import random

import pytest

from mindmate.clients.llm_providers.base import ProviderError
from mindmate.core.errors import ClientInputError
from mindmate.schemas.quick_action import QuickActionRequest
from mindmate.services.prompts import AFFIRMATION_THEMES
from mindmate.services.quick_action import QUICK_ACTION_FALLBACK, QuickActionService


class CapturingProvider:
    def __init__(self, result: str = "Breathe in for four counts.") -> None:
        self._result = result
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        return self._result


class FailingProvider:
    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        raise ProviderError("quota exceeded")


def _run(service: QuickActionService, **fields: object):
    return asyncio.run(service.handle_quick_action(QuickActionRequest(**fields)))


def test_quick_action_requires_prompt_or_known_action() -> None:
    provider = CapturingProvider()
    service = QuickActionService(provider)

    with pytest.raises(ClientInputError, match="Prompt is required"):
        _run(service, prompt="")
    with pytest.raises(ClientInputError, match="Prompt is required"):
        _run(service, action="juggling")

    assert provider.calls == []


def test_quick_action_passes_prompt_and_language() -> None:
    provider = CapturingProvider()

    response = _run(QuickActionService(provider), prompt="Give me a calming tip", language="hi")

    assert response.response == "Breathe in for four counts."
    assert response.error is None
    system_prompt, user_prompt = provider.calls[0]
    assert "User's language: Hindi." in system_prompt
    assert user_prompt == "Give me a calming tip"


def test_quick_action_builds_prompt_from_action() -> None:
    provider = CapturingProvider()

    _run(QuickActionService(provider), action="breathing")

    assert provider.calls[0][1].startswith("Generate a simple, guided breathing exercise")


def test_quick_action_affirmation_themes_vary() -> None:
    provider = CapturingProvider("You are enough.")
    service = QuickActionService(provider, rng=random.Random(42))

    for _ in range(100):
        _run(service, action="affirmation")

    seen = {
        theme
        for _, prompt in provider.calls
        for theme in AFFIRMATION_THEMES
        if f"focused on {theme}." in prompt
    }
    assert len(seen) >= 2


def test_quick_action_falls_back_on_failure() -> None:
    response = _run(QuickActionService(FailingProvider()), prompt="meditate")

    assert response.response == QUICK_ACTION_FALLBACK
    assert response.error == "fallback"


def test_quick_action_falls_back_without_provider() -> None:
    response = _run(QuickActionService(None), action="meditation")

    assert response.response == QUICK_ACTION_FALLBACK
    assert response.error == "fallback"
