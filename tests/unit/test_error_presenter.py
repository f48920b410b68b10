"""User-facing error mapping."""

from __future__ import annotations

import pytest

from travel_companion.domain.enums import AvailabilityReason, SuggestedAction
from travel_companion.domain.models import AvailabilityState
from travel_companion.services.error_presenter import (
    describe_availability,
    present_error,
    present_exception,
)
from travel_companion.shared.exceptions import (
    AlreadyGeneratingError,
    ContentPolicyViolationError,
    ContextTooLargeError,
    ExternalToolFailedError,
    GenerationFailedError,
    GenerationTimeoutError,
    OutputValidationError,
    ResourceUnavailableError,
    SessionNotReadyError,
    UnknownGenerationError,
    UnsupportedLanguageError,
)

ALL_ERRORS = [
    *(ResourceUnavailableError(reason) for reason in AvailabilityReason),
    AlreadyGeneratingError(),
    ContextTooLargeError(),
    UnsupportedLanguageError(),
    ContentPolicyViolationError(),
    GenerationFailedError(),
    ExternalToolFailedError("tool", "cause"),
    OutputValidationError("reason"),
    GenerationTimeoutError(),
    SessionNotReadyError(),
    UnknownGenerationError("cause"),
]


@pytest.mark.parametrize("error", ALL_ERRORS, ids=lambda e: type(e).__name__)
def test_presentation_is_total_and_mirrors_retryability(error):
    presented = present_error(error)
    assert presented.title
    assert presented.message
    assert presented.can_retry is error.retryable


def test_not_enabled_suggests_settings():
    presented = present_error(ResourceUnavailableError(AvailabilityReason.RESOURCE_NOT_ENABLED))
    assert presented.suggested_action is SuggestedAction.OPEN_SETTINGS
    assert presented.can_retry is False


def test_not_ready_suggests_retry():
    presented = present_error(ResourceUnavailableError(AvailabilityReason.RESOURCE_NOT_READY))
    assert presented.suggested_action is SuggestedAction.RETRY
    assert presented.can_retry is True


def test_session_not_ready_suggests_retry():
    presented = present_error(SessionNotReadyError())
    assert presented.suggested_action is SuggestedAction.RETRY


def test_other_kinds_have_no_action():
    assert present_error(GenerationFailedError()).suggested_action is None
    assert present_error(ResourceUnavailableError(AvailabilityReason.DEVICE_INELIGIBLE)).suggested_action is None


def test_already_generating_message():
    presented = present_error(AlreadyGeneratingError())
    assert presented.title == "Generazione in Corso"
    assert presented.can_retry is False


def test_presented_errors_are_independent_copies():
    first = present_error(GenerationFailedError())
    first.title = "changed"
    assert present_error(GenerationFailedError()).title == "Errore di Generazione"


def test_present_exception_classifies_foreign_errors():
    presented = present_exception(ValueError("boom"))
    assert presented.title == "Errore"
    assert presented.can_retry is True


def test_describe_availability():
    assert describe_availability(AvailabilityState.ready()) is None
    described = describe_availability(AvailabilityState.unavailable(AvailabilityReason.RESOURCE_NOT_READY))
    assert described is not None
    assert described.title == "Modello in Preparazione"
