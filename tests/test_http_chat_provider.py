from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from mindmate.clients.http_chat import HttpChatCompletionProvider, unwrap_embedded_response
from mindmate.clients.llm_providers.base import LLMProvider, ModelConfig, ProviderError

_URL = "https://llm.example.test/v1/chat/completions"


def _config(**overrides: object) -> ModelConfig:
    fields: dict[str, object] = {
        "provider": LLMProvider.HTTP,
        "model_id": "demo-model",
        "api_key": "secret-key",
        "max_tokens": 150,
        "base_url": _URL,
    }
    fields.update(overrides)
    return ModelConfig(**fields)  # type: ignore[arg-type]


def _completion(content: object) -> dict[str, object]:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _provider(handler, **overrides: object) -> HttpChatCompletionProvider:  # type: ignore[no-untyped-def]
    return HttpChatCompletionProvider(
        _config(**overrides), transport=httpx.MockTransport(handler)
    )


def test_complete_posts_two_message_chat_body() -> None:
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["auth"] = request.headers.get("authorization")
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json=_completion("You are not alone."))

    text = asyncio.run(_provider(handler).complete("be kind", "hello"))

    assert text == "You are not alone."
    assert captured["url"] == _URL
    assert captured["auth"] == "Bearer secret-key"
    assert captured["body"] == {
        "model": "demo-model",
        "messages": [
            {"role": "system", "content": "be kind"},
            {"role": "user", "content": "hello"},
        ],
        "max_tokens": 150,
    }


def test_complete_sends_temperature_when_configured() -> None:
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json=_completion("ok"))

    asyncio.run(_provider(handler, temperature=0.3).complete("s", "u"))

    body = captured["body"]
    assert isinstance(body, dict)
    assert body["temperature"] == 0.3


def test_complete_unwraps_embedded_json_response() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_completion('foo {"response": "bar"} baz'))

    assert asyncio.run(_provider(handler).complete("s", "u")) == "bar"


def test_complete_raises_provider_error_on_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "overloaded"})

    with pytest.raises(ProviderError, match="503"):
        asyncio.run(_provider(handler).complete("s", "u"))


def test_complete_raises_provider_error_on_malformed_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"unexpected": True})

    with pytest.raises(ProviderError):
        asyncio.run(_provider(handler).complete("s", "u"))


def test_complete_raises_provider_error_on_non_json_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>gateway</html>")

    with pytest.raises(ProviderError):
        asyncio.run(_provider(handler).complete("s", "u"))


def test_complete_raises_provider_error_on_network_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProviderError):
        asyncio.run(_provider(handler).complete("s", "u"))


def test_unwrap_embedded_response_cases() -> None:
    assert unwrap_embedded_response('foo {"response": "bar"} baz') == "bar"
    assert unwrap_embedded_response("plain reply") == "plain reply"
    assert unwrap_embedded_response("set {braces} here") == "set {braces} here"
    assert unwrap_embedded_response('{"answer": "x"}') == '{"answer": "x"}'
    assert unwrap_embedded_response('{"response": 3}') == '{"response": 3}'


def test_provider_reuses_one_client_until_closed() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return httpx.Response(200, json=_completion("ok"))

    provider = _provider(handler)

    async def scenario() -> None:
        await provider.complete("s", "first")
        client = provider._client
        await provider.complete("s", "second")
        assert provider._client is client
        await provider.aclose()
        assert client is not None and client.is_closed
        assert provider._client is None

    asyncio.run(scenario())
    assert len(calls) == 2
