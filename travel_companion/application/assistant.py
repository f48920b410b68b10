"""Public entry points of the generation core."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from travel_companion.application import recipes
from travel_companion.application.pipeline import StructuredGenerationPipeline
from travel_companion.domain.enums import Season, SummaryVariant, TravelStyle, TripType
from travel_companion.domain.models import (
    AvailabilityState,
    Briefing,
    DayStats,
    Itinerary,
    JournalEntry,
    PackingList,
    StructuredNote,
    TripSummary,
    UserFacingError,
)
from travel_companion.services.error_presenter import present_exception


class TravelAssistant:
    """Facade over the pipeline; one method per generation feature.

    Every generating method is a coroutine that returns a DTO or raises a
    ``GenerationError``. At most one of them runs at a time per assistant.
    """

    def __init__(self, pipeline: StructuredGenerationPipeline):
        self._pipeline = pipeline
        self._sessions = pipeline.sessions

    # ── generation ────────────────────────────────────

    async def generate_itinerary(
        self,
        destination: str,
        days: int,
        trip_type: Union[TripType, str],
        travel_style: Optional[Union[TravelStyle, str]] = None,
    ) -> Itinerary:
        return await self._pipeline.run(recipes.ITINERARY, {
            "destination": destination,
            "days": days,
            "trip_type": trip_type,
            "travel_style": travel_style,
        })

    async def generate_packing_list(
        self,
        destination: str,
        duration: int,
        trip_type: Union[TripType, str],
        season: Union[Season, str],
    ) -> PackingList:
        return await self._pipeline.run(recipes.PACKING_LIST, {
            "destination": destination,
            "duration": duration,
            "trip_type": trip_type,
            "season": season,
        })

    async def generate_briefing(self, destination: str) -> Briefing:
        return await self._pipeline.run(recipes.BRIEFING, {"destination": destination})

    async def structure_note(self, raw_text: str) -> StructuredNote:
        return await self._pipeline.run(recipes.STRUCTURED_NOTE, {"text": raw_text})

    async def generate_journal_entry(self, day_stats: DayStats) -> JournalEntry:
        return await self._pipeline.run(recipes.JOURNAL_ENTRY, day_stats.model_dump())

    async def generate_trip_summary(
        self,
        destination: str,
        duration_days: int,
        photo_count: int,
        note_count: int,
        total_distance_meters: float,
        highlights: Iterable[str] = (),
        variant: Union[SummaryVariant, str] = SummaryVariant.STANDARD,
    ) -> TripSummary:
        return await self._pipeline.run(recipes.TRIP_SUMMARY, {
            "destination": destination,
            "duration_days": duration_days,
            "photo_count": photo_count,
            "note_count": note_count,
            "total_distance_meters": total_distance_meters,
            "highlights": list(highlights),
            "variant": variant,
        })

    # ── session & availability ────────────────────────

    def check_availability(self) -> AvailabilityState:
        return self._sessions.probe.check()

    def reset_session(self) -> None:
        self._sessions.reset()

    def prewarm(self) -> None:
        self._sessions.prewarm()

    @property
    def is_generating(self) -> bool:
        return self._sessions.is_busy()

    @staticmethod
    def present_error(error: BaseException) -> UserFacingError:
        return present_exception(error)


__all__ = ["TravelAssistant"]
