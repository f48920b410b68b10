"""Generative resource factory: picks the backend from the environment.

Environment variables:
  LOCAL_LLM_PROVIDER  - "ollama", "mock" or "absent" (explicit choice)
  OLLAMA_HOST         - base URL of an Ollama-compatible server; selects ollama when set
  LOCAL_LLM_MODEL     - model name served by the backend
  LOCAL_LLM_TIMEOUT_SECONDS - per-request HTTP timeout

With nothing configured the factory returns an ``AbsentResource``, so the rest of
the core sees a missing backend as just another unavailable state.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from travel_companion.adapters.resource.absent import AbsentResource
from travel_companion.adapters.resource.interfaces import GenerativeResource
from travel_companion.config.settings import AssistantSettings, resolve_resource_provider, resolve_settings

_logger = logging.getLogger("travel-companion.resource")

_lock = threading.Lock()
_resource_instance: Optional[GenerativeResource] = None


def build_resource(settings: AssistantSettings) -> GenerativeResource:
    provider = settings.resource_provider
    if provider == "ollama":
        from travel_companion.adapters.resource.ollama import OllamaResource

        _logger.info("Generative resource: ollama at %s (model=%s)", settings.ollama_host, settings.model)
        return OllamaResource(
            settings.ollama_host,
            settings.model,
            timeout=settings.request_timeout_seconds,
        )
    if provider == "mock":
        from travel_companion.adapters.resource.mock import MockResource

        _logger.info("Generative resource: mock")
        return MockResource()
    return AbsentResource()


def get_resource(settings: Optional[AssistantSettings] = None) -> GenerativeResource:
    """Return the process-wide resource, building it on first use."""
    global _resource_instance
    with _lock:
        if _resource_instance is None:
            _resource_instance = build_resource(settings or resolve_settings())
        return _resource_instance


def reset_resource() -> None:
    """Drop the cached resource (tests, configuration reloads)."""
    global _resource_instance
    with _lock:
        _resource_instance = None


def is_resource_configured() -> bool:
    return resolve_resource_provider() != "absent"


__all__ = ["build_resource", "get_resource", "reset_resource", "is_resource_configured"]
