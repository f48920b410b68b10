"""Placeholder resource used when no generative backend is configured."""

from __future__ import annotations

from travel_companion.adapters.resource.interfaces import ResourceSession, ResourceStatus
from travel_companion.domain.enums import AvailabilityReason
from travel_companion.shared.exceptions import ResourceUnavailableError


class AbsentResource:
    name = "absent"

    def status(self) -> str:
        return ResourceStatus.ABSENT.value

    def create_session(self, instructions: str) -> ResourceSession:
        raise ResourceUnavailableError(AvailabilityReason.RESOURCE_NOT_ENABLED)


__all__ = ["AbsentResource"]
