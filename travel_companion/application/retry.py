"""Fixed-delay retry around any async operation, driven by error classification."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from travel_companion.infrastructure.logging import StructuredLogger
from travel_companion.security.redact import redact_sensitive
from travel_companion.shared.exceptions import GenerationError, GenerationTimeoutError, classify_error

T = TypeVar("T")

_logger = logging.getLogger("travel-companion.retry")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_DELAY_SECONDS = 0.5


class RetryExecutor:
    """Runs an operation up to ``max_attempts`` times with a fixed ``delay`` between tries.

    Non-retryable failures are raised after the first attempt. The executor knows
    nothing about what it runs: it only looks at the classified error kind.
    ``asyncio.CancelledError`` is not an ``Exception`` and passes straight through.
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        delay: float = DEFAULT_DELAY_SECONDS,
        attempt_timeout: Optional[float] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        structured_logger: Optional[StructuredLogger] = None,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.max_attempts = int(max_attempts)
        self.delay = float(delay)
        self.attempt_timeout = attempt_timeout or None
        self._sleep = sleep
        self._slog = structured_logger
        self.last_attempts = 0

    async def _attempt(self, operation: Callable[[], Awaitable[T]]) -> T:
        if self.attempt_timeout is None:
            return await operation()
        try:
            return await asyncio.wait_for(operation(), timeout=self.attempt_timeout)
        except asyncio.TimeoutError as exc:
            raise GenerationTimeoutError(self.attempt_timeout) from exc

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        max_attempts: Optional[int] = None,
        delay: Optional[float] = None,
        structured_logger: Optional[StructuredLogger] = None,
    ) -> T:
        attempts = self.max_attempts if max_attempts is None else max(1, int(max_attempts))
        pause = self.delay if delay is None else max(0.0, float(delay))
        last_error: Optional[GenerationError] = None
        slog = structured_logger or self._slog

        for attempt in range(1, attempts + 1):
            self.last_attempts = attempt
            try:
                return await self._attempt(operation)
            except Exception as exc:
                error = classify_error(exc)
                retrying = error.retryable and attempt < attempts
                message = redact_sensitive(str(error))
                _logger.info(
                    "Attempt %d/%d failed (%s, retrying=%s): %s",
                    attempt, attempts, error.kind.value, retrying, message,
                )
                if slog is not None:
                    slog.attempt_failed(attempt, error.kind.value, message, retrying=retrying)

                if error is not exc:
                    error.__cause__ = exc
                last_error = error

                if not error.retryable:
                    raise error
                if attempt < attempts:
                    await self._sleep(pause)

        assert last_error is not None
        raise last_error


__all__ = ["RetryExecutor", "DEFAULT_MAX_ATTEMPTS", "DEFAULT_DELAY_SECONDS"]
