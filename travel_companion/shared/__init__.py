"""Shared cross-layer types and exceptions."""

from travel_companion.shared.exceptions import (
    AlreadyGeneratingError,
    ContentPolicyViolationError,
    ContextTooLargeError,
    ExternalToolFailedError,
    GenerationError,
    GenerationFailedError,
    GenerationTimeoutError,
    OutputValidationError,
    ResourceUnavailableError,
    SessionNotReadyError,
    UnknownGenerationError,
    UnsupportedLanguageError,
    classify_error,
)

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
