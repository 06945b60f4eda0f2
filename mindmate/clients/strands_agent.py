from __future__ import annotations

import logging

from strands import Agent

from mindmate.clients.llm_providers.base import ProviderError

logger = logging.getLogger(__name__)


class StrandsCompletionProvider:
    """Completion provider backed by a Strands model (Gemini, OpenAI).

    A fresh Agent is built per call so no conversation state is shared between
    requests; the model object itself is reused.
    """

    def __init__(self, model: object, name: str) -> None:
        self._model = model
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        try:
            agent = Agent(model=self._model, system_prompt=system_prompt, callback_handler=None)
            result = await agent.invoke_async(user_prompt)
        except Exception as exc:  # noqa: BLE001
            raise ProviderError(f"{self._name} completion failed: {exc}") from exc
        text = _result_text(result)
        if not text.strip():
            raise ProviderError(f"{self._name} returned an empty completion")
        return text


def _result_text(result: object) -> str:
    message = getattr(result, "message", None)
    if not isinstance(message, dict):
        return str(result)
    content = message.get("content")
    if not isinstance(content, list):
        return ""
    return "".join(
        str(block["text"]) for block in content if isinstance(block, dict) and "text" in block
    )
