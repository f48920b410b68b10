"""Shared (non-domain) exceptions: the generation error taxonomy."""

from __future__ import annotations

import asyncio
import json
from typing import Optional

from pydantic import ValidationError

from travel_companion.domain.enums import AvailabilityReason, ErrorKind


class GenerationError(Exception):
    """Base class for every failure surfaced by the generation core."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    @property
    def retryable(self) -> bool:
        return self.kind in _RETRYABLE_KINDS


class ResourceUnavailableError(GenerationError):
    """The generative resource cannot be used right now."""

    kind = ErrorKind.RESOURCE_UNAVAILABLE

    def __init__(self, reason: AvailabilityReason):
        self.reason = AvailabilityReason(reason)
        super().__init__(f"Generative resource unavailable: {self.reason.value}")

    @property
    def retryable(self) -> bool:
        # Only a resource that is still initializing may recover on its own.
        return self.reason is AvailabilityReason.RESOURCE_NOT_READY


class AlreadyGeneratingError(GenerationError):
    kind = ErrorKind.ALREADY_GENERATING

    def __init__(self, message: str = "A generation is already in progress"):
        super().__init__(message)


class ContextTooLargeError(GenerationError):
    kind = ErrorKind.CONTEXT_TOO_LARGE

    def __init__(self, message: str = "Prompt exceeds the resource input limit"):
        super().__init__(message)


class UnsupportedLanguageError(GenerationError):
    kind = ErrorKind.UNSUPPORTED_LANGUAGE

    def __init__(self, message: str = "Language not supported by the resource"):
        super().__init__(message)


class ContentPolicyViolationError(GenerationError):
    kind = ErrorKind.CONTENT_POLICY_VIOLATION

    def __init__(self, message: str = "Request refused by the resource guardrails"):
        super().__init__(message)


class GenerationFailedError(GenerationError):
    kind = ErrorKind.GENERATION_FAILED

    def __init__(self, message: str = "Generation failed"):
        super().__init__(message)


class ExternalToolFailedError(GenerationError):
    """A tool invoked by the model during generation failed."""

    kind = ErrorKind.EXTERNAL_TOOL_FAILED

    def __init__(self, tool_name: str, cause: str):
        self.tool_name = tool_name
        self.cause = cause
        super().__init__(f"[{tool_name}] {cause}")


class OutputValidationError(GenerationError):
    """Input or output did not satisfy the schema / business rules."""

    kind = ErrorKind.OUTPUT_VALIDATION_FAILED

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Validation failed: {reason}")


class GenerationTimeoutError(GenerationError):
    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout_seconds: Optional[float] = None):
        self.timeout_seconds = timeout_seconds
        detail = f" after {timeout_seconds}s" if timeout_seconds else ""
        super().__init__(f"Generation timed out{detail}")


class SessionNotReadyError(GenerationError):
    kind = ErrorKind.SESSION_NOT_READY

    def __init__(self, message: str = "Session is not ready"):
        super().__init__(message)


class UnknownGenerationError(GenerationError):
    """Unclassified failure, treated as transient."""

    kind = ErrorKind.UNKNOWN

    def __init__(self, cause: BaseException | str):
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)


_RETRYABLE_KINDS = frozenset({
    ErrorKind.GENERATION_FAILED,
    ErrorKind.EXTERNAL_TOOL_FAILED,
    ErrorKind.TIMEOUT,
    ErrorKind.SESSION_NOT_READY,
    ErrorKind.UNKNOWN,
})


def _validation_reason(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "output does not match schema"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def classify_error(exc: BaseException) -> GenerationError:
    """Fold any exception into the generation error taxonomy."""
    if isinstance(exc, GenerationError):
        return exc
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        return GenerationTimeoutError()
    if isinstance(exc, ValidationError):
        return OutputValidationError(_validation_reason(exc))
    if isinstance(exc, json.JSONDecodeError):
        return GenerationFailedError(f"resource returned malformed JSON: {exc.msg}")
    return UnknownGenerationError(exc)


__all__ = [
    "GenerationError",
    "ResourceUnavailableError",
    "AlreadyGeneratingError",
    "ContextTooLargeError",
    "UnsupportedLanguageError",
    "ContentPolicyViolationError",
    "GenerationFailedError",
    "ExternalToolFailedError",
    "OutputValidationError",
    "GenerationTimeoutError",
    "SessionNotReadyError",
    "UnknownGenerationError",
    "classify_error",
]
