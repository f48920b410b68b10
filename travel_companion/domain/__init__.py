"""Domain package exports."""

from travel_companion.domain.enums import (
    AvailabilityReason,
    ErrorKind,
    NoteCategory,
    RecipeKind,
    Season,
    SuggestedAction,
    SummaryVariant,
    TravelStyle,
    TripType,
    season_for_month,
)
from travel_companion.domain.models import (
    AvailabilityState,
    Briefing,
    DayPlan,
    DayStats,
    Itinerary,
    JournalEntry,
    LocalPhrase,
    PackingList,
    QuickFacts,
    StructuredNote,
    TripSummary,
    UserFacingError,
)

__all__ = [
    "AvailabilityReason",
    "AvailabilityState",
    "Briefing",
    "DayPlan",
    "DayStats",
    "ErrorKind",
    "Itinerary",
    "JournalEntry",
    "LocalPhrase",
    "NoteCategory",
    "PackingList",
    "QuickFacts",
    "RecipeKind",
    "Season",
    "StructuredNote",
    "SuggestedAction",
    "SummaryVariant",
    "TravelStyle",
    "TripSummary",
    "TripType",
    "UserFacingError",
    "season_for_month",
]
