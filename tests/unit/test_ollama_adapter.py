"""Ollama adapter against an in-process httpx transport."""

from __future__ import annotations

import json

import httpx
import pytest

from travel_companion.adapters.resource.ollama import OllamaResource
from travel_companion.domain.enums import AvailabilityReason
from travel_companion.shared.exceptions import (
    ContextTooLargeError,
    GenerationFailedError,
    GenerationTimeoutError,
    ResourceUnavailableError,
)

HOST = "http://ollama.test"
SCHEMA = {"title": "briefing", "type": "object"}


def _tags(*names):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/tags"
        return httpx.Response(200, json={"models": [{"name": name} for name in names]})

    return handler


def _resource(sync_handler=None, async_handler=None) -> OllamaResource:
    return OllamaResource(
        HOST,
        "llama3.2",
        transport=httpx.MockTransport(sync_handler) if sync_handler else None,
        async_transport=httpx.MockTransport(async_handler) if async_handler else None,
    )


class TestStatus:
    def test_available_when_model_pulled(self):
        assert _resource(_tags("llama3.2:latest")).status() == "available"

    def test_model_not_ready_when_missing(self):
        assert _resource(_tags("mistral:latest")).status() == "model_not_ready"

    def test_unreachable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        assert _resource(handler).status() == "service_unreachable"

    def test_http_error(self):
        assert _resource(lambda request: httpx.Response(500)).status() == "http_500"


class TestRespond:
    @pytest.mark.asyncio
    async def test_sends_schema_and_parses_content(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            seen.append(body)
            return httpx.Response(200, json={"message": {"role": "assistant", "content": '{"ok": true}'}})

        session = _resource(async_handler=handler).create_session("Sei un assistente.")
        assert await session.respond("Ciao", SCHEMA) == {"ok": True}
        assert await session.respond("Ancora", SCHEMA) == {"ok": True}

        first, second = seen
        assert first["format"] == SCHEMA
        assert first["stream"] is False
        assert first["messages"][0] == {"role": "system", "content": "Sei un assistente."}
        assert [m["role"] for m in second["messages"]] == ["system", "user", "assistant", "user"]

    @pytest.mark.asyncio
    async def test_malformed_json_is_generation_failure(self):
        handler = lambda request: httpx.Response(200, json={"message": {"content": "{oops"}})  # noqa: E731
        session = _resource(async_handler=handler).create_session("x")
        with pytest.raises(GenerationFailedError):
            await session.respond("p", SCHEMA)
        assert session.transcript == []

    @pytest.mark.asyncio
    async def test_unknown_model_is_not_ready(self):
        handler = lambda request: httpx.Response(404, json={"error": "model 'llama3.2' not found"})  # noqa: E731
        session = _resource(async_handler=handler).create_session("x")
        with pytest.raises(ResourceUnavailableError) as info:
            await session.respond("p", SCHEMA)
        assert info.value.reason is AvailabilityReason.RESOURCE_NOT_READY

    @pytest.mark.asyncio
    async def test_context_overflow(self):
        handler = lambda request: httpx.Response(  # noqa: E731
            400, json={"error": "input length exceeds the context length"}
        )
        session = _resource(async_handler=handler).create_session("x")
        with pytest.raises(ContextTooLargeError):
            await session.respond("p", SCHEMA)

    @pytest.mark.asyncio
    async def test_server_error(self):
        handler = lambda request: httpx.Response(500, json={"error": "llama runner crashed"})  # noqa: E731
        session = _resource(async_handler=handler).create_session("x")
        with pytest.raises(GenerationFailedError):
            await session.respond("p", SCHEMA)

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        session = _resource(async_handler=handler).create_session("x")
        with pytest.raises(GenerationTimeoutError):
            await session.respond("p", SCHEMA)

    @pytest.mark.asyncio
    async def test_prewarm_hits_generate(self):
        paths = []

        def handler(request):
            paths.append(request.url.path)
            return httpx.Response(200, json={"done": True})

        await _resource(async_handler=handler).create_session("x").prewarm("Sei")
        assert paths == ["/api/generate"]
