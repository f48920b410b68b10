"""Runtime settings snapshot resolved from environment variables."""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field

_DEFAULT_OLLAMA_HOST = "http://localhost:11434"
_DEFAULT_MODEL = "llama3.2"
_KNOWN_PROVIDERS = {"ollama", "mock", "absent"}


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def _int_env(name: str, default: int, *, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if not _is_configured(raw):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= minimum else default


def _float_env(name: str, default: float, *, minimum: float = 0.0) -> float:
    raw = os.getenv(name)
    if not _is_configured(raw):
        return default
    try:
        value = float(str(raw).strip())
    except ValueError:
        return default
    return value if value >= minimum else default


def resolve_resource_provider() -> str:
    explicit = str(os.getenv("LOCAL_LLM_PROVIDER") or "").strip().lower()
    if explicit in _KNOWN_PROVIDERS:
        return explicit
    if _is_configured(os.getenv("OLLAMA_HOST")):
        return "ollama"
    return "absent"


class AssistantSettings(BaseModel):
    resource_provider: str = Field(default="absent")
    ollama_host: str = Field(default=_DEFAULT_OLLAMA_HOST)
    model: str = Field(default=_DEFAULT_MODEL)
    request_timeout_seconds: float = Field(default=60.0)
    max_attempts: int = Field(default=3, ge=1)
    retry_delay_seconds: float = Field(default=0.5, ge=0.0)
    attempt_timeout_seconds: Optional[float] = Field(default=60.0)
    rate_limit_max: int = Field(default=10, ge=1)
    rate_limit_window_seconds: int = Field(default=60, ge=1)
    input_max_length: int = Field(default=2000, ge=1)


def resolve_settings() -> AssistantSettings:
    attempt_timeout = _float_env("GENERATION_ATTEMPT_TIMEOUT_SECONDS", 60.0)
    return AssistantSettings(
        resource_provider=resolve_resource_provider(),
        ollama_host=(os.getenv("OLLAMA_HOST") or _DEFAULT_OLLAMA_HOST).strip().rstrip("/"),
        model=(os.getenv("LOCAL_LLM_MODEL") or _DEFAULT_MODEL).strip(),
        request_timeout_seconds=_float_env("LOCAL_LLM_TIMEOUT_SECONDS", 60.0, minimum=1.0),
        max_attempts=_int_env("GENERATION_MAX_ATTEMPTS", 3, minimum=1),
        retry_delay_seconds=_int_env("GENERATION_RETRY_DELAY_MS", 500) / 1000.0,
        attempt_timeout_seconds=attempt_timeout or None,
        rate_limit_max=_int_env("AI_RATE_LIMIT_MAX", 10, minimum=1),
        rate_limit_window_seconds=_int_env("AI_RATE_LIMIT_WINDOW", 60, minimum=1),
        input_max_length=_int_env("INPUT_MAX_LENGTH", 2000, minimum=1),
    )


__all__ = [
    "AssistantSettings",
    "resolve_resource_provider",
    "resolve_settings",
]
