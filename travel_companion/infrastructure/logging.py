"""Structured logging: JSON lines with secret redaction."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional

from travel_companion.security.redact import redact_sensitive


class StructuredLogger:
    """Emits one JSON object per line for generation lifecycle events."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = redact_sensitive(json.dumps(data, ensure_ascii=False, default=str))
            self._output.write(line + "\n")
            self._output.flush()
        except (OSError, ValueError) as exc:
            # Last-resort fallback so a broken sink never hides the event entirely.
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False) + "\n")

    def generation_start(self, recipe: str, **extra: Any) -> None:
        self._timers[recipe] = time.monotonic()
        self._emit({"event": "generation_start", "recipe": recipe, **extra})

    def generation_end(self, recipe: str, *, status: str, attempts: int = 0, **extra: Any) -> None:
        start = self._timers.pop(recipe, time.monotonic())
        duration_ms = round((time.monotonic() - start) * 1000, 1)
        self._emit({
            "event": "generation_end",
            "recipe": recipe,
            "status": status,
            "attempts": attempts,
            "duration_ms": duration_ms,
            **extra,
        })

    def attempt_failed(self, attempt: int, kind: str, error: str, *, retrying: bool, **extra: Any) -> None:
        self._emit({
            "event": "attempt_failed",
            "attempt": attempt,
            "kind": kind,
            "error": error,
            "retrying": retrying,
            **extra,
        })


__all__ = ["StructuredLogger"]
