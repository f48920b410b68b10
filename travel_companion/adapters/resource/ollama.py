"""Local generative resource backed by an Ollama-compatible HTTP server.

Status comes from ``GET /api/tags`` (is the server up, is the model pulled).
Generation uses ``POST /api/chat`` with ``format`` set to the output JSON schema and
``stream`` disabled. Each session keeps its own transcript so follow-up requests
share conversational context until the session is reset.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from travel_companion.adapters.resource.interfaces import ResourceStatus
from travel_companion.domain.enums import AvailabilityReason
from travel_companion.security.redact import redact_sensitive
from travel_companion.shared.exceptions import (
    ContentPolicyViolationError,
    ContextTooLargeError,
    GenerationFailedError,
    GenerationTimeoutError,
    ResourceUnavailableError,
)

_logger = logging.getLogger("travel-companion.resource")

_STATUS_TIMEOUT = 2.0
_CONTEXT_HINTS = ("context length", "context window", "too many tokens", "exceeds the context")
_POLICY_HINTS = ("content policy", "safety", "refused")


def _model_names(payload: dict[str, Any]) -> set[str]:
    names: set[str] = set()
    for item in payload.get("models", []) or []:
        name = str(item.get("name") or item.get("model") or "").strip()
        if name:
            names.add(name)
            if name.endswith(":latest"):
                names.add(name[: -len(":latest")])
    return names


def _error_text(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict):
        return str(body.get("error") or body)
    return str(body)


def _raise_for_response(resp: httpx.Response) -> None:
    if resp.status_code < 400:
        return
    detail = redact_sensitive(_error_text(resp))
    lowered = detail.lower()
    if resp.status_code == 404:
        # Model not pulled yet: the server will accept it once the download finishes.
        raise ResourceUnavailableError(AvailabilityReason.RESOURCE_NOT_READY)
    if any(hint in lowered for hint in _CONTEXT_HINTS):
        raise ContextTooLargeError(detail)
    if resp.status_code in (400, 403) and any(hint in lowered for hint in _POLICY_HINTS):
        raise ContentPolicyViolationError(detail)
    raise GenerationFailedError(f"HTTP {resp.status_code}: {detail}")


class OllamaSession:
    def __init__(self, resource: "OllamaResource", instructions: str):
        self.instructions = instructions
        self.transcript: list[dict[str, str]] = []
        self._resource = resource

    def _messages(self, prompt: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.instructions},
            *self.transcript,
            {"role": "user", "content": prompt},
        ]

    async def respond(self, prompt: str, schema: dict[str, Any]) -> dict[str, Any]:
        payload = {
            "model": self._resource.model,
            "messages": self._messages(prompt),
            "format": schema,
            "stream": False,
            "options": {"temperature": 0},
        }
        data = await self._resource.post_json("/api/chat", payload)
        content = str((data.get("message") or {}).get("content") or "")
        if not content.strip():
            raise GenerationFailedError("resource returned an empty message")
        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as exc:
            _logger.debug("Malformed JSON from model: %s", content[:500])
            raise GenerationFailedError(f"resource returned malformed JSON: {exc.msg}") from exc
        if not isinstance(parsed, dict):
            raise GenerationFailedError("resource returned a non-object JSON value")

        self.transcript.append({"role": "user", "content": prompt})
        self.transcript.append({"role": "assistant", "content": content})
        return parsed

    async def prewarm(self, prompt_prefix: str = "") -> None:
        # An empty generate request makes the server load the model into memory.
        await self._resource.post_json(
            "/api/generate",
            {"model": self._resource.model, "prompt": "", "keep_alive": "10m"},
        )
        _logger.info("Model %s prewarmed (prefix=%r)", self._resource.model, prompt_prefix[:40])


class OllamaResource:
    name = "ollama"

    def __init__(
        self,
        host: str,
        model: str,
        *,
        timeout: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.host = host.rstrip("/")
        self.model = model
        self._timeout = timeout
        self._transport = transport
        self._async_transport = async_transport

    def status(self) -> str:
        try:
            with httpx.Client(base_url=self.host, timeout=_STATUS_TIMEOUT, transport=self._transport) as client:
                resp = client.get("/api/tags")
        except httpx.TransportError as exc:
            _logger.info("Ollama server unreachable: %s", redact_sensitive(str(exc)))
            return ResourceStatus.SERVICE_UNREACHABLE.value
        if resp.status_code >= 400:
            return f"http_{resp.status_code}"
        try:
            names = _model_names(resp.json())
        except ValueError:
            return "malformed_status"
        if self.model in names:
            return ResourceStatus.AVAILABLE.value
        return ResourceStatus.MODEL_NOT_READY.value

    def create_session(self, instructions: str) -> OllamaSession:
        return OllamaSession(self, instructions)

    async def post_json(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                base_url=self.host,
                timeout=self._timeout,
                transport=self._async_transport,
            ) as client:
                resp = await client.post(path, json=payload)
        except httpx.TimeoutException as exc:
            raise GenerationTimeoutError(self._timeout) from exc
        except httpx.TransportError as exc:
            _logger.warning("Ollama request failed: %s", redact_sensitive(str(exc)))
            raise ResourceUnavailableError(AvailabilityReason.RESOURCE_NOT_READY) from exc

        _raise_for_response(resp)
        try:
            data = resp.json()
        except ValueError as exc:
            raise GenerationFailedError("resource returned a non-JSON body") from exc
        if not isinstance(data, dict):
            raise GenerationFailedError("resource returned an unexpected body")
        return data


__all__ = ["OllamaResource", "OllamaSession"]
