"""Pydantic domain models: availability, generated DTOs and user-facing errors."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from travel_companion.domain.enums import AvailabilityReason, NoteCategory, SuggestedAction


class AvailabilityState(BaseModel):
    available: bool
    reason: Optional[AvailabilityReason] = None

    @classmethod
    def ready(cls) -> "AvailabilityState":
        return cls(available=True)

    @classmethod
    def unavailable(cls, reason: AvailabilityReason) -> "AvailabilityState":
        return cls(available=False, reason=reason)


# ── Generated DTOs ─────────────────────────────────────


class DayPlan(BaseModel):
    day_number: int
    theme: str
    morning_activity: str
    lunch_area: str
    afternoon_activity: str
    dinner_area: str
    evening_activity: Optional[str] = None
    transport_notes: str = ""


class Itinerary(BaseModel):
    destination: str
    total_days: int
    travel_style: str
    daily_plans: list[DayPlan] = Field(default_factory=list)
    general_tips: list[str] = Field(default_factory=list)


class PackingList(BaseModel):
    documents: list[str] = Field(default_factory=list)
    clothing: list[str] = Field(default_factory=list)
    toiletries: list[str] = Field(default_factory=list)
    electronics: list[str] = Field(default_factory=list)
    special_items: list[str] = Field(default_factory=list)
    health_kit: list[str] = Field(default_factory=list)


class QuickFacts(BaseModel):
    language: str
    currency: str
    time_zone: str
    electrical_outlet: str


class LocalPhrase(BaseModel):
    italian: str
    local: str
    pronunciation: str


class Briefing(BaseModel):
    destination: str
    quick_facts: QuickFacts
    cultural_tips: list[str] = Field(default_factory=list)
    useful_phrases: list[LocalPhrase] = Field(default_factory=list)
    climate_info: str = ""
    food_culture: list[str] = Field(default_factory=list)
    safety_notes: list[str] = Field(default_factory=list)


class StructuredNote(BaseModel):
    category: NoteCategory = NoteCategory.OTHER
    place_name: Optional[str] = None
    rating: Optional[int] = None
    cost: Optional[str] = None
    summary: str
    tags: list[str] = Field(default_factory=list)


class JournalEntry(BaseModel):
    title: str
    date: str
    narrative: str
    highlight: str
    stats_narrative: str


class TripSummary(BaseModel):
    title: str
    tagline: str
    narrative: str
    highlights: list[str] = Field(default_factory=list)
    stats_narrative: str
    next_trip_suggestion: str


# ── Inputs passed in by collaborators ──────────────────


class DayStats(BaseModel):
    """Statistics of one trip day, used to write a journal entry."""

    date: dt.date
    photo_count: int = Field(default=0, ge=0)
    note_contents: list[str] = Field(default_factory=list)
    total_distance_meters: float = Field(default=0.0, ge=0.0)
    places_visited: list[str] = Field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return (
            self.photo_count > 0
            or bool(self.note_contents)
            or self.total_distance_meters > 0
            or bool(self.places_visited)
        )


# ── Presentation ───────────────────────────────────────


class UserFacingError(BaseModel):
    title: str
    message: str
    can_retry: bool
    suggested_action: Optional[SuggestedAction] = None
