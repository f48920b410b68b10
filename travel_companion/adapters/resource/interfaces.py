"""Generative resource protocols.

A resource is a runtime capability object: it reports a low-level status string and,
when usable, creates sessions bound to a fixed system instruction. Sessions return the
raw JSON object produced under a JSON schema; validation happens in the pipeline.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class ResourceStatus(str, Enum):
    """Low-level status values reported by the bundled resources."""

    AVAILABLE = "available"
    NOT_ENABLED = "not_enabled"
    ABSENT = "absent"
    DEVICE_NOT_ELIGIBLE = "device_not_eligible"
    MODEL_NOT_READY = "model_not_ready"
    MODEL_DOWNLOADING = "model_downloading"
    SERVICE_UNREACHABLE = "service_unreachable"


@runtime_checkable
class ResourceSession(Protocol):
    instructions: str

    async def respond(self, prompt: str, schema: dict[str, Any]) -> dict[str, Any]: ...

    async def prewarm(self, prompt_prefix: str = "") -> None: ...


@runtime_checkable
class GenerativeResource(Protocol):
    name: str

    def status(self) -> str: ...

    def create_session(self, instructions: str) -> ResourceSession: ...


def schema_name(schema: dict[str, Any]) -> str:
    return str(schema.get("title") or "")


__all__ = [
    "GenerativeResource",
    "ResourceSession",
    "ResourceStatus",
    "schema_name",
]
