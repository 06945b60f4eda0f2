from __future__ import annotations

import json
import logging
import re

import httpx

from mindmate.clients.llm_providers.base import ModelConfig, ProviderError

_EMBEDDED_JSON = re.compile(r"\{.*\}", re.DOTALL)


class HttpChatCompletionProvider:
    """Calls an OpenAI-compatible chat-completions URL directly, without an SDK."""

    def __init__(
        self,
        config: ModelConfig,
        *,
        timeout_seconds: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._logger = logging.getLogger(__name__)
        self._url = config.base_url.strip()
        self._api_key = config.api_key
        self._model_id = config.model_id
        self._temperature = config.temperature
        self._max_tokens = config.max_tokens
        self._timeout_seconds = timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        if not self._url:
            self._logger.warning("HTTP chat provider configured without a URL")

    @property
    def name(self) -> str:
        return "http"

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        if not self._url:
            raise ProviderError("http chat URL is not configured")
        payload = self._build_payload(system_prompt, user_prompt)
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            response = await self._get_client().post(self._url, json=payload, headers=headers)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            raise ProviderError(
                f"http chat returned status {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise ProviderError(f"http chat request failed: {exc}") from exc

        text = _extract_content(body)
        if text is None:
            raise ProviderError("http chat reply has no message content")
        if not text.strip():
            raise ProviderError("http chat returned an empty completion")
        return unwrap_embedded_response(text)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        # Created lazily so it binds to the running event loop.
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout_seconds, transport=self._transport
            )
        return self._client

    def _build_payload(self, system_prompt: str, user_prompt: str) -> dict[str, object]:
        payload: dict[str, object] = {
            "model": self._model_id,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        if self._max_tokens is not None:
            payload["max_tokens"] = self._max_tokens
        if self._temperature is not None:
            payload["temperature"] = self._temperature
        return payload


def unwrap_embedded_response(text: str) -> str:
    """Return the ``response`` field of a JSON object embedded in ``text``.

    Some backends wrap their answer as ``{"response": "..."}`` inside free
    text. Only that shape is unwrapped; anything else comes back unchanged.
    """
    match = _EMBEDDED_JSON.search(text)
    if match is None:
        return text
    try:
        parsed = json.loads(match.group(0))
    except ValueError:
        return text
    if isinstance(parsed, dict) and isinstance(parsed.get("response"), str):
        return parsed["response"]
    return text


def _extract_content(body: object) -> str | None:
    if not isinstance(body, dict):
        return None
    choices = body.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if isinstance(content, str):
        return content
    return None
