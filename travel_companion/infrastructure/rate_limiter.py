"""Sliding-window request limiter for callers of the generation entry points."""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from typing import Callable

_logger = logging.getLogger("travel-companion.rate-limit")

DEFAULT_MAX_REQUESTS = 10
DEFAULT_WINDOW_SECONDS = 60.0


class SlidingWindowRateLimiter:
    """Thread-safe limiter over the attempts recorded in the last ``window_seconds``."""

    def __init__(
        self,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        window_seconds: float = DEFAULT_WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._max = max(1, int(max_requests))
        self._window = max(0.001, float(window_seconds))
        self._clock = clock
        self._hits: deque[float] = deque()
        self._lock = threading.Lock()

    @property
    def max_requests(self) -> int:
        return self._max

    def _prune(self, now: float) -> None:
        while self._hits and now - self._hits[0] >= self._window:
            self._hits.popleft()

    def can_proceed(self) -> bool:
        with self._lock:
            self._prune(self._clock())
            return len(self._hits) < self._max

    def record_attempt(self) -> None:
        with self._lock:
            now = self._clock()
            self._prune(now)
            self._hits.append(now)

    def allow(self) -> bool:
        """Check and record in one step; returns False without recording when full."""
        with self._lock:
            now = self._clock()
            self._prune(now)
            if len(self._hits) >= self._max:
                _logger.info("Rate limit reached: %d requests in %.0fs", self._max, self._window)
                return False
            self._hits.append(now)
            return True

    def remaining(self) -> int:
        with self._lock:
            self._prune(self._clock())
            return max(0, self._max - len(self._hits))


__all__ = ["SlidingWindowRateLimiter", "DEFAULT_MAX_REQUESTS", "DEFAULT_WINDOW_SECONDS"]
