"""Service layer public exports."""

from travel_companion.services.error_presenter import (
    describe_availability,
    present_error,
    present_exception,
)

__all__ = ["describe_availability", "present_error", "present_exception"]
