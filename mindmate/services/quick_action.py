from __future__ import annotations

import asyncio
import logging
import random

from mindmate.clients.llm_providers.base import CompletionProvider
from mindmate.core.config import DEFAULT_AI_TIMEOUT_SECONDS
from mindmate.core.errors import ClientInputError
from mindmate.models.emotion import LanguageCode
from mindmate.schemas.quick_action import QuickActionRequest, QuickActionResponse
from mindmate.services.chat import FALLBACK_ERROR
from mindmate.services.prompts import (
    QuickAction,
    build_quick_action_prompt,
    build_quick_action_system_prompt,
)

logger = logging.getLogger(__name__)

QUICK_ACTION_FALLBACK = "I'm here to help with that. Take a deep breath and let's try together."


class QuickActionService:
    def __init__(
        self,
        provider: CompletionProvider | None,
        *,
        timeout_seconds: float = DEFAULT_AI_TIMEOUT_SECONDS,
        rng: random.Random | None = None,
    ) -> None:
        self._logger = logger
        self._provider = provider
        self._timeout_seconds = timeout_seconds
        self._rng = rng

    def resolve_prompt(self, request: QuickActionRequest) -> str:
        """Return the explicit prompt, or the canned template for ``request.action``.

        Raises:
            ClientInputError: If neither yields any text.
        """
        if request.prompt and request.prompt.strip():
            return request.prompt
        action = QuickAction.parse(request.action)
        if action is None:
            raise ClientInputError("Prompt is required")
        return build_quick_action_prompt(action, self._rng)

    async def handle_quick_action(self, request: QuickActionRequest) -> QuickActionResponse:
        prompt = self.resolve_prompt(request)
        if self._provider is None:
            return _fallback()

        system_prompt = build_quick_action_system_prompt(LanguageCode.from_string(request.language))
        try:
            reply = await asyncio.wait_for(
                self._provider.complete(system_prompt, prompt),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            self._logger.warning(
                "Quick action completion timed out after %ss", self._timeout_seconds
            )
            return _fallback()
        except Exception:  # noqa: BLE001
            self._logger.exception("Quick action completion failed")
            return _fallback()

        if not isinstance(reply, str) or not reply.strip():
            self._logger.warning("Quick action completion returned no text")
            return _fallback()
        return QuickActionResponse(response=reply)


def _fallback() -> QuickActionResponse:
    return QuickActionResponse(response=QUICK_ACTION_FALLBACK, error=FALLBACK_ERROR)
