"""API request/response models."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from travel_companion.domain.enums import ErrorKind, Season, SummaryVariant, TravelStyle, TripType
from travel_companion.domain.models import AvailabilityState, UserFacingError

_TEXT_MAX = 2000


def _parse_trip_type(value):
    return TripType.parse(value) if isinstance(value, str) else value


class ItineraryRequest(BaseModel):
    destination: str = Field(min_length=1, max_length=_TEXT_MAX, description="Destinazione del viaggio")
    days: int = Field(ge=1, description="Durata in giorni (limitata a 30)")
    trip_type: TripType = Field(description="locale / giornaliero / multi-giorno")
    travel_style: Optional[TravelStyle] = Field(default=None, description="Stile preferito")

    @field_validator("trip_type", mode="before")
    @classmethod
    def parse_trip_type(cls, value):
        return _parse_trip_type(value)


class PackingListRequest(BaseModel):
    destination: str = Field(min_length=1, max_length=_TEXT_MAX)
    duration: int = Field(ge=1, le=365)
    trip_type: TripType
    season: Season

    @field_validator("trip_type", mode="before")
    @classmethod
    def parse_trip_type(cls, value):
        return _parse_trip_type(value)


class BriefingRequest(BaseModel):
    destination: str = Field(min_length=1, max_length=_TEXT_MAX)


class NoteRequest(BaseModel):
    text: str = Field(max_length=_TEXT_MAX * 4, description="Testo libero o trascrizione vocale")


class JournalRequest(BaseModel):
    date: dt.date
    photo_count: int = Field(default=0, ge=0)
    note_contents: list[str] = Field(default_factory=list)
    total_distance_meters: float = Field(default=0.0, ge=0.0)
    places_visited: list[str] = Field(default_factory=list)


class TripSummaryRequest(BaseModel):
    destination: str = Field(min_length=1, max_length=_TEXT_MAX)
    duration_days: int = Field(ge=1)
    photo_count: int = Field(default=0, ge=0)
    note_count: int = Field(default=0, ge=0)
    total_distance_meters: float = Field(default=0.0, ge=0.0)
    highlights: list[str] = Field(default_factory=list, max_length=20)
    variant: SummaryVariant = SummaryVariant.STANDARD


class HealthResponse(BaseModel):
    status: str = "ok"
    provider: str = ""


class AvailabilityResponse(BaseModel):
    state: AvailabilityState
    error: Optional[UserFacingError] = None
    generating: bool = False


class ErrorResponse(BaseModel):
    kind: ErrorKind
    error: UserFacingError


class ResetResponse(BaseModel):
    status: str = "reset"
