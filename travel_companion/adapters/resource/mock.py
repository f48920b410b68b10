"""Scripted in-memory generative resource for tests and offline demos."""

from __future__ import annotations

import asyncio
import copy
import json
from collections import defaultdict, deque
from pathlib import Path
from typing import Any, Optional, Union

from travel_companion.adapters.resource.interfaces import ResourceStatus, schema_name
from travel_companion.shared.exceptions import GenerationFailedError

DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "mock_responses.json"
_cache: Optional[dict[str, Any]] = None

Outcome = Union[dict[str, Any], BaseException]


def load_default_responses() -> dict[str, Any]:
    global _cache
    if _cache is None:
        with open(DATA_FILE, encoding="utf-8") as f:
            _cache = json.load(f)
    return copy.deepcopy(_cache)


class MockSession:
    def __init__(self, resource: "MockResource", instructions: str):
        self.instructions = instructions
        self.transcript: list[dict[str, str]] = []
        self.prewarmed = False
        self._resource = resource

    async def respond(self, prompt: str, schema: dict[str, Any]) -> dict[str, Any]:
        kind = schema_name(schema)
        self._resource.calls.append((kind, prompt))
        if self._resource.latency:
            await asyncio.sleep(self._resource.latency)
        outcome = self._resource.next_outcome(kind)
        if isinstance(outcome, BaseException):
            raise outcome
        self.transcript.append({"role": "user", "content": prompt})
        self.transcript.append({"role": "assistant", "content": json.dumps(outcome, ensure_ascii=False)})
        return outcome

    async def prewarm(self, prompt_prefix: str = "") -> None:
        if self._resource.latency:
            await asyncio.sleep(self._resource.latency)
        self.prewarmed = True


class MockResource:
    """Resource whose status and responses are controlled by the caller.

    Responses are looked up by schema title (the recipe kind). Scripted outcomes are
    consumed first, in order; an outcome that is an exception is raised instead of
    returned. When nothing is scripted the bundled fixture payload is returned.
    """

    name = "mock"

    def __init__(
        self,
        status: str = ResourceStatus.AVAILABLE.value,
        responses: Optional[dict[str, Any]] = None,
        latency: float = 0.0,
    ):
        self.status_value = status
        self.latency = latency
        self.calls: list[tuple[str, str]] = []
        self.sessions: list[MockSession] = []
        self._responses = responses if responses is not None else load_default_responses()
        self._scripted: dict[str, deque[Outcome]] = defaultdict(deque)

    def status(self) -> str:
        return self.status_value

    def set_status(self, status: str) -> None:
        self.status_value = status

    def create_session(self, instructions: str) -> MockSession:
        session = MockSession(self, instructions)
        self.sessions.append(session)
        return session

    def script(self, kind: str, *outcomes: Outcome) -> None:
        self._scripted[kind].extend(outcomes)

    def next_outcome(self, kind: str) -> Outcome:
        queue = self._scripted.get(kind)
        if queue:
            return queue.popleft()
        if kind not in self._responses:
            return GenerationFailedError(f"no mock response for {kind or 'untitled schema'}")
        return copy.deepcopy(self._responses[kind])

    def calls_for(self, kind: str) -> list[str]:
        return [prompt for call_kind, prompt in self.calls if call_kind == kind]


__all__ = ["MockResource", "MockSession", "load_default_responses"]
