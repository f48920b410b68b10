"""Availability probe: maps a resource's raw status onto ``AvailabilityState``."""

from __future__ import annotations

import logging

from travel_companion.adapters.resource.interfaces import GenerativeResource, ResourceStatus
from travel_companion.domain.enums import AvailabilityReason
from travel_companion.domain.models import AvailabilityState
from travel_companion.security.redact import redact_sensitive

_logger = logging.getLogger("travel-companion.availability")

_REASONS: dict[str, AvailabilityReason] = {
    ResourceStatus.NOT_ENABLED.value: AvailabilityReason.RESOURCE_NOT_ENABLED,
    ResourceStatus.ABSENT.value: AvailabilityReason.RESOURCE_NOT_ENABLED,
    ResourceStatus.DEVICE_NOT_ELIGIBLE.value: AvailabilityReason.DEVICE_INELIGIBLE,
    ResourceStatus.MODEL_NOT_READY.value: AvailabilityReason.RESOURCE_NOT_READY,
    ResourceStatus.MODEL_DOWNLOADING.value: AvailabilityReason.RESOURCE_NOT_READY,
    ResourceStatus.SERVICE_UNREACHABLE.value: AvailabilityReason.RESOURCE_NOT_READY,
}


def reason_for_status(raw_status: str) -> AvailabilityReason:
    """Total mapping: any status that is not recognised is ``UNKNOWN``."""
    return _REASONS.get(str(raw_status or "").strip().lower(), AvailabilityReason.UNKNOWN)


class AvailabilityProbe:
    """Queries the resource on every call; results are never cached."""

    def __init__(self, resource: GenerativeResource):
        self._resource = resource

    def check(self) -> AvailabilityState:
        try:
            raw = self._resource.status()
        except Exception as exc:
            _logger.warning("Resource status query failed: %s", redact_sensitive(str(exc)))
            return AvailabilityState.unavailable(AvailabilityReason.UNKNOWN)

        if str(raw or "").strip().lower() == ResourceStatus.AVAILABLE.value:
            return AvailabilityState.ready()
        return AvailabilityState.unavailable(reason_for_status(raw))


__all__ = ["AvailabilityProbe", "reason_for_status"]
