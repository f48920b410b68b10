"""FastAPI surface over the travel assistant."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from travel_companion.api.schemas import (
    AvailabilityResponse,
    BriefingRequest,
    ErrorResponse,
    HealthResponse,
    ItineraryRequest,
    JournalRequest,
    NoteRequest,
    PackingListRequest,
    ResetResponse,
    TripSummaryRequest,
)
from travel_companion.application.context import AssistantContext, make_assistant_context
from travel_companion.domain.enums import ErrorKind
from travel_companion.domain.models import (
    Briefing,
    DayStats,
    Itinerary,
    JournalEntry,
    PackingList,
    StructuredNote,
    TripSummary,
)
from travel_companion.infrastructure.rate_limiter import SlidingWindowRateLimiter
from travel_companion.security.redact import redact_sensitive
from travel_companion.services.error_presenter import describe_availability, present_error
from travel_companion.shared.exceptions import GenerationError

_api_logger = logging.getLogger("travel-companion.api")

load_dotenv()

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.ALREADY_GENERATING: 409,
    ErrorKind.OUTPUT_VALIDATION_FAILED: 422,
    ErrorKind.RESOURCE_UNAVAILABLE: 503,
    ErrorKind.SESSION_NOT_READY: 503,
    ErrorKind.TIMEOUT: 504,
}
_GENERATION_PREFIX = "/ai/generate"


# ── middleware ────────────────────────────────────────


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Cache-Control"] = "no-store"
        return response


class GenerationRateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding-window limit on generation requests (single process, in memory)."""

    def __init__(self, app, limiter: SlidingWindowRateLimiter):
        super().__init__(app)
        self._limiter = limiter

    async def dispatch(self, request: Request, call_next):
        if request.method != "POST" or not request.url.path.startswith(_GENERATION_PREFIX):
            return await call_next(request)
        if not self._limiter.allow():
            return JSONResponse(
                status_code=429,
                content={"detail": "Troppe richieste, riprova tra poco."},
            )
        return await call_next(request)


def status_for(error: GenerationError) -> int:
    return _STATUS_BY_KIND.get(error.kind, 502)


# ── application factory ───────────────────────────────


def create_app(context: Optional[AssistantContext] = None) -> FastAPI:
    ctx = context or make_assistant_context()
    assistant = ctx.assistant

    api = FastAPI(
        title="travel-companion",
        version="1.0.0",
        docs_url="/docs" if os.getenv("ENABLE_DOCS", "false").lower() == "true" else None,
        redoc_url=None,
    )
    api.state.context = ctx
    api.add_middleware(SecurityHeadersMiddleware)
    api.add_middleware(GenerationRateLimitMiddleware, limiter=ctx.rate_limiter)

    @api.exception_handler(GenerationError)
    async def _generation_error(request: Request, exc: GenerationError):
        _api_logger.info(
            "%s %s failed: %s", request.method, request.url.path, redact_sensitive(str(exc))
        )
        body = ErrorResponse(kind=exc.kind, error=present_error(exc))
        return JSONResponse(status_code=status_for(exc), content=body.model_dump(mode="json"))

    @api.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="ok", provider=ctx.resource.name)

    @api.get("/ai/availability", response_model=AvailabilityResponse)
    def availability():
        state = assistant.check_availability()
        return AvailabilityResponse(
            state=state,
            error=describe_availability(state),
            generating=assistant.is_generating,
        )

    @api.post("/ai/session/reset", response_model=ResetResponse)
    def reset_session():
        assistant.reset_session()
        return ResetResponse()

    @api.post("/ai/session/prewarm", status_code=202)
    async def prewarm():
        assistant.prewarm()
        return {"status": "scheduled"}

    @api.post("/ai/generate/itinerary", response_model=Itinerary)
    async def itinerary(req: ItineraryRequest):
        return await assistant.generate_itinerary(
            req.destination, req.days, req.trip_type, req.travel_style
        )

    @api.post("/ai/generate/packing-list", response_model=PackingList)
    async def packing_list(req: PackingListRequest):
        return await assistant.generate_packing_list(
            req.destination, req.duration, req.trip_type, req.season
        )

    @api.post("/ai/generate/briefing", response_model=Briefing)
    async def briefing(req: BriefingRequest):
        return await assistant.generate_briefing(req.destination)

    @api.post("/ai/generate/note", response_model=StructuredNote)
    async def structure_note(req: NoteRequest):
        return await assistant.structure_note(req.text)

    @api.post("/ai/generate/journal", response_model=JournalEntry)
    async def journal(req: JournalRequest):
        return await assistant.generate_journal_entry(DayStats(**req.model_dump()))

    @api.post("/ai/generate/trip-summary", response_model=TripSummary)
    async def trip_summary(req: TripSummaryRequest):
        return await assistant.generate_trip_summary(
            req.destination,
            req.duration_days,
            req.photo_count,
            req.note_count,
            req.total_distance_meters,
            req.highlights,
            req.variant,
        )

    return api


app = create_app()
