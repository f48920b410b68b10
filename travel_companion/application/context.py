"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from travel_companion.adapters.resource.interfaces import GenerativeResource
from travel_companion.application.assistant import TravelAssistant
from travel_companion.application.availability import AvailabilityProbe
from travel_companion.application.pipeline import StructuredGenerationPipeline
from travel_companion.application.recipes import PREWARM_PREFIX, SYSTEM_PROMPT
from travel_companion.application.retry import RetryExecutor
from travel_companion.application.session_manager import SessionManager
from travel_companion.config.settings import AssistantSettings, resolve_settings
from travel_companion.infrastructure.rate_limiter import SlidingWindowRateLimiter
from travel_companion.infrastructure.resource_factory import get_resource


@dataclass
class AssistantContext:
    settings: AssistantSettings
    resource: GenerativeResource
    sessions: SessionManager
    retry: RetryExecutor
    pipeline: StructuredGenerationPipeline
    assistant: TravelAssistant
    rate_limiter: SlidingWindowRateLimiter


def make_assistant_context(
    settings: Optional[AssistantSettings] = None,
    resource: Optional[GenerativeResource] = None,
) -> AssistantContext:
    settings = settings or resolve_settings()
    resource = resource or get_resource(settings)
    sessions = SessionManager(
        resource,
        SYSTEM_PROMPT,
        probe=AvailabilityProbe(resource),
        prewarm_prefix=PREWARM_PREFIX,
    )
    retry = RetryExecutor(
        max_attempts=settings.max_attempts,
        delay=settings.retry_delay_seconds,
        attempt_timeout=settings.attempt_timeout_seconds,
    )
    pipeline = StructuredGenerationPipeline(
        sessions,
        retry,
        max_input_length=settings.input_max_length,
    )
    return AssistantContext(
        settings=settings,
        resource=resource,
        sessions=sessions,
        retry=retry,
        pipeline=pipeline,
        assistant=TravelAssistant(pipeline),
        rate_limiter=SlidingWindowRateLimiter(
            max_requests=settings.rate_limit_max,
            window_seconds=settings.rate_limit_window_seconds,
        ),
    )
