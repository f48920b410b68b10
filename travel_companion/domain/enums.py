"""Domain enums."""

from __future__ import annotations

from enum import Enum


class AvailabilityReason(str, Enum):
    RESOURCE_NOT_ENABLED = "resource_not_enabled"
    DEVICE_INELIGIBLE = "device_ineligible"
    RESOURCE_NOT_READY = "resource_not_ready"
    UNKNOWN = "unknown"


class ErrorKind(str, Enum):
    RESOURCE_UNAVAILABLE = "resource_unavailable"
    ALREADY_GENERATING = "already_generating"
    CONTEXT_TOO_LARGE = "context_too_large"
    UNSUPPORTED_LANGUAGE = "unsupported_language"
    CONTENT_POLICY_VIOLATION = "content_policy_violation"
    GENERATION_FAILED = "generation_failed"
    EXTERNAL_TOOL_FAILED = "external_tool_failed"
    OUTPUT_VALIDATION_FAILED = "output_validation_failed"
    TIMEOUT = "timeout"
    SESSION_NOT_READY = "session_not_ready"
    UNKNOWN = "unknown"


class SuggestedAction(str, Enum):
    OPEN_SETTINGS = "open_settings"
    RETRY = "retry"


class RecipeKind(str, Enum):
    ITINERARY = "itinerary"
    PACKING_LIST = "packing_list"
    BRIEFING = "briefing"
    STRUCTURED_NOTE = "structured_note"
    JOURNAL_ENTRY = "journal_entry"
    TRIP_SUMMARY = "trip_summary"


class TripType(str, Enum):
    LOCAL = "locale"
    DAY_TRIP = "giornaliero"
    MULTI_DAY = "multi-giorno"

    @classmethod
    def parse(cls, value: "TripType | str") -> "TripType":
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        if key in _TRIP_TYPE_ALIASES:
            return _TRIP_TYPE_ALIASES[key]
        raise ValueError(f"unknown trip type: {value!r}")


_TRIP_TYPE_ALIASES = {
    "local": TripType.LOCAL,
    "daytrip": TripType.DAY_TRIP,
    "day_trip": TripType.DAY_TRIP,
    "multiday": TripType.MULTI_DAY,
    "multi_day": TripType.MULTI_DAY,
}


class TravelStyle(str, Enum):
    CULTURAL = "culturale"
    RELAX = "relax"
    ADVENTURE = "avventura"
    GASTRONOMIC = "gastronomico"


class NoteCategory(str, Enum):
    RESTAURANT = "ristorante"
    ATTRACTION = "attrazione"
    HOTEL = "hotel"
    TRANSPORT = "trasporto"
    SHOPPING = "shopping"
    OTHER = "altro"


class Season(str, Enum):
    SPRING = "primavera"
    SUMMER = "estate"
    AUTUMN = "autunno"
    WINTER = "inverno"


def season_for_month(month: int) -> Season:
    if month in (3, 4, 5):
        return Season.SPRING
    if month in (6, 7, 8):
        return Season.SUMMER
    if month in (9, 10, 11):
        return Season.AUTUMN
    return Season.WINTER


class SummaryVariant(str, Enum):
    STANDARD = "standard"
    SHORT = "breve"
    DETAILED = "dettagliato"
    EMOTIONAL = "emotivo"
    FACTUAL = "fattuale"

    @property
    def prompt_modifier(self) -> str:
        return _VARIANT_MODIFIERS[self]


_VARIANT_MODIFIERS = {
    SummaryVariant.STANDARD: "- Lunghezza media, equilibrio tra racconto e dati",
    SummaryVariant.SHORT: "- Racconto breve, massimo 80 parole",
    SummaryVariant.DETAILED: "- Racconto dettagliato, 250-350 parole, con riferimenti ai momenti salienti",
    SummaryVariant.EMOTIONAL: "- Privilegia emozioni e atmosfere rispetto ai numeri",
    SummaryVariant.FACTUAL: "- Privilegia fatti e statistiche, tono sobrio",
}
