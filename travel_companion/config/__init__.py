"""Runtime configuration helpers."""

from travel_companion.config.settings import AssistantSettings, resolve_resource_provider, resolve_settings

__all__ = [
    "AssistantSettings",
    "resolve_resource_provider",
    "resolve_settings",
]
