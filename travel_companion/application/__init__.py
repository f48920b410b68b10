"""Application orchestration layer."""

from travel_companion.application.assistant import TravelAssistant
from travel_companion.application.context import AssistantContext, make_assistant_context
from travel_companion.application.contracts import GenerationRequest

__all__ = ["AssistantContext", "GenerationRequest", "TravelAssistant", "make_assistant_context"]
