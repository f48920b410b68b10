"""Ownership of the single shared resource session and its single-flight flag."""

from __future__ import annotations

import asyncio
import logging
import threading
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from travel_companion.adapters.resource.interfaces import GenerativeResource, ResourceSession
from travel_companion.application.availability import AvailabilityProbe
from travel_companion.security.redact import redact_sensitive
from travel_companion.shared.exceptions import AlreadyGeneratingError, ResourceUnavailableError

_logger = logging.getLogger("travel-companion.session")


class SessionManager:
    """Lazily creates one session per manager and guards it against concurrent use.

    The session is bound to ``system_prompt`` for its whole lifetime; a different
    persona needs ``reset()`` first. ``claim()`` is the atomic check-and-set of the
    busy flag: at most one generation may hold the session at a time, and a second
    claimant fails fast instead of queueing.
    """

    def __init__(
        self,
        resource: GenerativeResource,
        system_prompt: str,
        probe: Optional[AvailabilityProbe] = None,
        prewarm_prefix: str = "",
    ):
        self._resource = resource
        self._system_prompt = system_prompt
        self._probe = probe or AvailabilityProbe(resource)
        self._prewarm_prefix = prewarm_prefix
        self._session: Optional[ResourceSession] = None
        self._busy = False
        self._lock = threading.Lock()
        self._background: set[asyncio.Task] = set()

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    @property
    def probe(self) -> AvailabilityProbe:
        return self._probe

    @property
    def has_session(self) -> bool:
        with self._lock:
            return self._session is not None

    # ── single-flight ─────────────────────────────────

    def is_busy(self) -> bool:
        with self._lock:
            return self._busy

    def claim(self) -> None:
        with self._lock:
            if self._busy:
                raise AlreadyGeneratingError()
            self._busy = True

    def release(self) -> None:
        with self._lock:
            self._busy = False

    @asynccontextmanager
    async def generation(self) -> AsyncIterator[None]:
        self.claim()
        try:
            yield
        finally:
            self.release()

    # ── lifecycle ─────────────────────────────────────

    async def ensure_session(self) -> ResourceSession:
        """Return the shared session, creating it if the resource is available.

        The status read can block on I/O, so it runs in a worker thread.
        """
        state = await asyncio.to_thread(self._probe.check)
        if not state.available:
            raise ResourceUnavailableError(state.reason)
        with self._lock:
            if self._session is None:
                self._session = self._resource.create_session(self._system_prompt)
                _logger.info("Created %s session", self._resource.name)
            return self._session

    def reset(self) -> None:
        """Discard the session; refused while a generation holds it."""
        with self._lock:
            if self._busy:
                raise AlreadyGeneratingError("Cannot reset the session while a generation is in progress")
            self._session = None
        _logger.info("Session reset")

    def prewarm(self) -> Optional[asyncio.Task]:
        """Schedule session creation and model warm-up without blocking the caller.

        The warm-up holds the single-flight slot like a generation does; it is
        skipped when a generation already holds it.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            _logger.debug("Prewarm skipped: no running event loop")
            return None
        task = loop.create_task(self._prewarm())
        self._background.add(task)
        task.add_done_callback(self._background.discard)
        return task

    async def _prewarm(self) -> None:
        try:
            async with self.generation():
                session = await self.ensure_session()
                await session.prewarm(self._prewarm_prefix)
        except AlreadyGeneratingError:
            _logger.debug("Prewarm skipped: generation in progress")
        except Exception as exc:
            _logger.info("Prewarm failed: %s", redact_sensitive(str(exc)))


__all__ = ["SessionManager"]
