"""Error taxonomy: classification and retryability."""

from __future__ import annotations

import asyncio
import json

import pytest
from pydantic import BaseModel, ValidationError

from travel_companion.domain.enums import AvailabilityReason, ErrorKind
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


class _Strict(BaseModel):
    count: int


@pytest.mark.parametrize(
    "error, retryable",
    [
        (ResourceUnavailableError(AvailabilityReason.RESOURCE_NOT_READY), True),
        (ResourceUnavailableError(AvailabilityReason.RESOURCE_NOT_ENABLED), False),
        (ResourceUnavailableError(AvailabilityReason.DEVICE_INELIGIBLE), False),
        (ResourceUnavailableError(AvailabilityReason.UNKNOWN), False),
        (AlreadyGeneratingError(), False),
        (ContextTooLargeError(), False),
        (UnsupportedLanguageError(), False),
        (ContentPolicyViolationError(), False),
        (GenerationFailedError(), True),
        (ExternalToolFailedError("trip_data", "db locked"), True),
        (OutputValidationError("bad"), False),
        (GenerationTimeoutError(), True),
        (SessionNotReadyError(), True),
        (UnknownGenerationError("boom"), True),
    ],
)
def test_retryability_table(error, retryable):
    assert error.retryable is retryable


def test_every_kind_has_an_exception_class():
    kinds = {cls.kind for cls in GenerationError.__subclasses__()}
    assert kinds == set(ErrorKind)


def test_classify_passes_generation_errors_through():
    err = OutputValidationError("testo vuoto")
    assert classify_error(err) is err


def test_classify_timeouts():
    assert classify_error(asyncio.TimeoutError()).kind is ErrorKind.TIMEOUT
    assert classify_error(TimeoutError()).kind is ErrorKind.TIMEOUT


def test_classify_validation_error_names_the_field():
    with pytest.raises(ValidationError) as info:
        _Strict.model_validate({"count": "many"})
    classified = classify_error(info.value)
    assert isinstance(classified, OutputValidationError)
    assert classified.reason.startswith("count:")


def test_classify_json_decode_error():
    with pytest.raises(json.JSONDecodeError) as info:
        json.loads("{not json")
    assert classify_error(info.value).kind is ErrorKind.GENERATION_FAILED


def test_classify_unknown_keeps_cause():
    cause = RuntimeError("disk on fire")
    classified = classify_error(cause)
    assert isinstance(classified, UnknownGenerationError)
    assert classified.cause is cause
    assert classified.retryable


def test_tool_error_payload():
    err = ExternalToolFailedError("get_trip_data", "timeout")
    assert err.tool_name == "get_trip_data"
    assert "get_trip_data" in str(err)
