"""Presentation of generation failures as user-facing (Italian) messages."""

from __future__ import annotations

from typing import Optional

from travel_companion.domain.enums import AvailabilityReason, ErrorKind, SuggestedAction
from travel_companion.domain.models import AvailabilityState, UserFacingError
from travel_companion.shared.exceptions import (
    GenerationError,
    ResourceUnavailableError,
    classify_error,
)

_RETRY_MESSAGE = "Si e verificato un problema. Riprova."

_UNAVAILABLE: dict[AvailabilityReason, UserFacingError] = {
    AvailabilityReason.RESOURCE_NOT_ENABLED: UserFacingError(
        title="Assistente AI Disabilitato",
        message="Attiva il modello AI locale nelle Impostazioni per usare le funzioni AI.",
        can_retry=False,
        suggested_action=SuggestedAction.OPEN_SETTINGS,
    ),
    AvailabilityReason.DEVICE_INELIGIBLE: UserFacingError(
        title="Dispositivo Non Supportato",
        message="Questo dispositivo non soddisfa i requisiti del modello AI locale.",
        can_retry=False,
    ),
    AvailabilityReason.RESOURCE_NOT_READY: UserFacingError(
        title="Modello in Preparazione",
        message="Il modello AI e in fase di download. Riprova tra qualche minuto.",
        can_retry=True,
        suggested_action=SuggestedAction.RETRY,
    ),
    AvailabilityReason.UNKNOWN: UserFacingError(
        title="Funzione Non Disponibile",
        message="L'assistente AI non e attualmente disponibile.",
        can_retry=False,
    ),
}

_BY_KIND: dict[ErrorKind, UserFacingError] = {
    ErrorKind.ALREADY_GENERATING: UserFacingError(
        title="Generazione in Corso",
        message="Attendi il completamento della richiesta precedente.",
        can_retry=False,
    ),
    ErrorKind.CONTEXT_TOO_LARGE: UserFacingError(
        title="Richiesta Troppo Lunga",
        message="Prova con una richiesta piu breve.",
        can_retry=False,
    ),
    ErrorKind.UNSUPPORTED_LANGUAGE: UserFacingError(
        title="Lingua Non Supportata",
        message="L'assistente funziona meglio in italiano o inglese.",
        can_retry=False,
    ),
    ErrorKind.CONTENT_POLICY_VIOLATION: UserFacingError(
        title="Richiesta Non Elaborabile",
        message="Prova a riformulare la richiesta.",
        can_retry=False,
    ),
    ErrorKind.GENERATION_FAILED: UserFacingError(
        title="Errore di Generazione",
        message=_RETRY_MESSAGE,
        can_retry=True,
    ),
    ErrorKind.EXTERNAL_TOOL_FAILED: UserFacingError(
        title="Errore Recupero Dati",
        message="Impossibile accedere ai dati del viaggio.",
        can_retry=True,
    ),
    ErrorKind.OUTPUT_VALIDATION_FAILED: UserFacingError(
        title="Contenuto Non Valido",
        message="Il contenuto inserito o generato non e valido.",
        can_retry=False,
    ),
    ErrorKind.TIMEOUT: UserFacingError(
        title="Tempo Scaduto",
        message="La generazione ha impiegato troppo tempo. Riprova.",
        can_retry=True,
    ),
    ErrorKind.SESSION_NOT_READY: UserFacingError(
        title="Servizio Non Pronto",
        message="Il servizio AI non e ancora pronto. Riprova tra poco.",
        can_retry=True,
        suggested_action=SuggestedAction.RETRY,
    ),
    ErrorKind.UNKNOWN: UserFacingError(
        title="Errore",
        message=_RETRY_MESSAGE,
        can_retry=True,
    ),
}

_missing_kinds = set(ErrorKind) - set(_BY_KIND) - {ErrorKind.RESOURCE_UNAVAILABLE}
_missing_reasons = set(AvailabilityReason) - set(_UNAVAILABLE)
if _missing_kinds or _missing_reasons:
    raise RuntimeError(
        f"error presentation table incomplete: kinds={sorted(k.value for k in _missing_kinds)} "
        f"reasons={sorted(r.value for r in _missing_reasons)}"
    )


def present_error(error: GenerationError) -> UserFacingError:
    """Map a classified error to its user-facing form. Total over ``ErrorKind``."""
    if isinstance(error, ResourceUnavailableError):
        template = _UNAVAILABLE[error.reason]
    else:
        template = _BY_KIND[error.kind]
    return template.model_copy()


def present_exception(exc: BaseException) -> UserFacingError:
    return present_error(classify_error(exc))


def describe_availability(state: AvailabilityState) -> Optional[UserFacingError]:
    """User-facing explanation of an unavailable state; ``None`` when available."""
    if state.available:
        return None
    return _UNAVAILABLE[state.reason or AvailabilityReason.UNKNOWN].model_copy()


__all__ = ["present_error", "present_exception", "describe_availability"]
