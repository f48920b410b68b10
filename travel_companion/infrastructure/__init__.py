"""Infrastructure services and cross-cutting utilities."""

from travel_companion.infrastructure.logging import StructuredLogger
from travel_companion.infrastructure.rate_limiter import SlidingWindowRateLimiter
from travel_companion.infrastructure.resource_factory import (
    build_resource,
    get_resource,
    is_resource_configured,
    reset_resource,
)

__all__ = [
    "StructuredLogger",
    "SlidingWindowRateLimiter",
    "build_resource",
    "get_resource",
    "is_resource_configured",
    "reset_resource",
]
