"""Shared generation algorithm used by every assistant entry point."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from pydantic import BaseModel

from travel_companion.application.recipes import Recipe
from travel_companion.application.retry import RetryExecutor
from travel_companion.application.session_manager import SessionManager
from travel_companion.infrastructure.logging import StructuredLogger
from travel_companion.security.redact import redact_sensitive
from travel_companion.security.sanitize import DEFAULT_MAX_LENGTH, sanitize
from travel_companion.shared.exceptions import OutputValidationError, classify_error

_logger = logging.getLogger("travel-companion.pipeline")


class StructuredGenerationPipeline:
    """Claim, sanitize, probe, build the prompt, call with retry, validate, transcode.

    The single-flight slot is claimed before anything else and released on every
    exit path, cancellation included. Whatever goes wrong surfaces as a
    ``GenerationError``.
    """

    def __init__(
        self,
        sessions: SessionManager,
        retry: RetryExecutor,
        *,
        max_input_length: int = DEFAULT_MAX_LENGTH,
        logger_factory: Callable[[], StructuredLogger] = StructuredLogger,
    ):
        self._sessions = sessions
        self._retry = retry
        self._max_input_length = max_input_length
        self._logger_factory = logger_factory

    @property
    def sessions(self) -> SessionManager:
        return self._sessions

    def prepare(self, recipe: Recipe, params: Mapping[str, Any]) -> dict[str, Any]:
        """Coerce and sanitize the recipe's parameters, then run its precondition."""
        clean = dict(params)
        for name, convert in recipe.coerce.items():
            try:
                clean[name] = convert(clean.get(name))
            except (TypeError, ValueError) as exc:
                raise OutputValidationError(f"{name}: valore non valido") from exc
        for name, empty_reason in recipe.required_text.items():
            value = sanitize(clean.get(name), self._max_input_length)
            if not value:
                raise OutputValidationError(empty_reason)
            clean[name] = value
        for name in recipe.text_lists:
            items = [sanitize(item, self._max_input_length) for item in clean.get(name) or []]
            clean[name] = [item for item in items if item]
        if recipe.check is not None:
            recipe.check(clean)
        return clean

    async def run(self, recipe: Recipe, params: Mapping[str, Any]) -> BaseModel:
        self._sessions.claim()
        try:
            return await self._run_claimed(recipe, params)
        finally:
            self._sessions.release()

    async def _run_claimed(self, recipe: Recipe, params: Mapping[str, Any]) -> BaseModel:
        kind = recipe.kind.value
        slog = self._logger_factory()
        slog.generation_start(kind)
        attempted = False
        try:
            clean = self.prepare(recipe, params)
            session = await self._sessions.ensure_session()
            request = recipe.build_request(clean)

            async def attempt() -> BaseModel:
                raw = await session.respond(request.prompt, request.json_schema)
                _logger.debug("Raw %s response: %s", kind, raw)
                return recipe.output_schema.model_validate(raw)

            attempted = True
            validated = await self._retry.execute(attempt, structured_logger=slog)
            dto = validated.to_dto()
        except Exception as exc:
            error = classify_error(exc)
            attempts = self._retry.last_attempts if attempted else 0
            slog.generation_end(kind, status=error.kind.value, attempts=attempts)
            _logger.info("%s generation failed: %s", kind, redact_sensitive(str(error)))
            if error is exc:
                raise
            raise error from exc

        slog.generation_end(kind, status="ok", attempts=self._retry.last_attempts)
        return dto


__all__ = ["StructuredGenerationPipeline"]
