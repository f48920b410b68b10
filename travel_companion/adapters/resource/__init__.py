"""Generative resource adapters."""

from travel_companion.adapters.resource.absent import AbsentResource
from travel_companion.adapters.resource.interfaces import GenerativeResource, ResourceSession, ResourceStatus
from travel_companion.adapters.resource.mock import MockResource
from travel_companion.adapters.resource.ollama import OllamaResource

__all__ = [
    "AbsentResource",
    "GenerativeResource",
    "MockResource",
    "OllamaResource",
    "ResourceSession",
    "ResourceStatus",
]
