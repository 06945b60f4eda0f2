from __future__ import annotations

import asyncio
import logging

from mindmate.clients.llm_providers.base import CompletionProvider
from mindmate.core.config import DEFAULT_AI_TIMEOUT_SECONDS
from mindmate.core.errors import ClientInputError
from mindmate.models.emotion import Emotion, LanguageCode, mood_display_for
from mindmate.schemas.chat import ChatRequest, ChatResponse, MoodPayload
from mindmate.services.emotion import classify
from mindmate.services.prompts import build_chat_system_prompt, build_chat_user_content

logger = logging.getLogger(__name__)

CHAT_FALLBACK = (
    "I'm here to listen and support you. Could you tell me more about what you're feeling?"
)
FALLBACK_ERROR = "fallback"


class ChatService:
    def __init__(
        self,
        provider: CompletionProvider | None,
        *,
        timeout_seconds: float = DEFAULT_AI_TIMEOUT_SECONDS,
        server_emotion_detection: bool = True,
    ) -> None:
        self._logger = logger
        self._provider = provider
        self._timeout_seconds = timeout_seconds
        self._server_emotion_detection = server_emotion_detection

    async def handle_chat(self, request: ChatRequest) -> ChatResponse:
        """Reply to one user message.

        Provider failures never escape: the reply degrades to CHAT_FALLBACK
        with ``error`` set.

        Raises:
            ClientInputError: If the message is missing or blank.
        """
        message = request.message or ""
        if not message.strip():
            raise ClientInputError("Message is required")

        language = LanguageCode.from_string(request.language)
        emotion = self.resolve_emotion(message, request.emotion, language)

        if self._provider is None:
            return _fallback(emotion)

        system_prompt = build_chat_system_prompt(emotion, language)
        user_content = build_chat_user_content(request.context, message)
        try:
            reply = await asyncio.wait_for(
                self._provider.complete(system_prompt, user_content),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            self._logger.warning("Chat completion timed out after %ss", self._timeout_seconds)
            return _fallback(emotion)
        except Exception:  # noqa: BLE001
            self._logger.exception("Chat completion failed")
            return _fallback(emotion)

        if not isinstance(reply, str) or not reply.strip():
            self._logger.warning("Chat completion returned no text")
            return _fallback(emotion)
        return ChatResponse(response=reply, emotion=emotion.value, mood=_mood(emotion))

    def resolve_emotion(
        self, message: str, supplied: str | None, language: LanguageCode
    ) -> Emotion:
        emotion = Emotion.parse(supplied)
        if emotion is not None:
            return emotion
        if self._server_emotion_detection:
            return classify(message, language)
        return Emotion.NEUTRAL


def _mood(emotion: Emotion) -> MoodPayload:
    display = mood_display_for(emotion)
    return MoodPayload(icon=display.icon, text=display.text)


def _fallback(emotion: Emotion) -> ChatResponse:
    return ChatResponse(
        response=CHAT_FALLBACK,
        emotion=emotion.value,
        mood=_mood(emotion),
        error=FALLBACK_ERROR,
    )
