"""Output schemas sent to the generative resource and used to validate its replies.

Each schema mirrors one DTO from ``domain.models``. Cardinality and range contracts
live in the ``Field`` constraints, so they appear in the JSON schema the resource
receives and are checked again on the way back:

- lists longer than ``max_length`` are truncated (blank strings are dropped first);
- lists shorter than ``min_length`` fail validation;
- integers outside ``ge``/``le`` are clamped.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.fields import FieldInfo

from travel_companion.domain.enums import NoteCategory, RecipeKind
from travel_companion.domain.models import (
    Briefing,
    DayPlan,
    Itinerary,
    JournalEntry,
    LocalPhrase,
    PackingList,
    QuickFacts,
    StructuredNote,
    TripSummary,
)


def _constraint(field: FieldInfo, name: str) -> Any:
    for meta in field.metadata:
        value = getattr(meta, name, None)
        if value is not None:
            return value
    return None


def _trim_list(items: list[Any], limit: int) -> list[Any]:
    kept = [item for item in items if not (isinstance(item, str) and not item.strip())]
    return kept[:limit]


def _clamp(value: int, low: Optional[int], high: Optional[int]) -> int:
    if low is not None and value < low:
        return low
    if high is not None and value > high:
        return high
    return value


class OutputSchema(BaseModel):
    """Base for every schema: applies truncation and clamping before validation."""

    dto_type: ClassVar[Optional[type[BaseModel]]] = None

    @model_validator(mode="before")
    @classmethod
    def _enforce_bounds(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name, field in cls.model_fields.items():
            value = data.get(name)
            if isinstance(value, list):
                limit = _constraint(field, "max_length")
                if limit is not None:
                    data[name] = _trim_list(value, limit)
            elif isinstance(value, int) and not isinstance(value, bool):
                low, high = _constraint(field, "ge"), _constraint(field, "le")
                if low is not None or high is not None:
                    data[name] = _clamp(value, low, high)
        return data

    def to_dto(self) -> BaseModel:
        if self.dto_type is None:
            raise TypeError(f"{type(self).__name__} has no DTO")
        return self.dto_type.model_validate(self.model_dump())


# ── Itinerary ─────────────────────────────────────────


class DayPlanSchema(OutputSchema):
    model_config = ConfigDict(title="day_plan")
    dto_type = DayPlan

    day_number: int = Field(ge=1, le=30, description="Numero del giorno")
    theme: str = Field(description="Tema della giornata")
    morning_activity: str = Field(description="Attivita della mattina")
    lunch_area: str = Field(description="Zona consigliata per il pranzo")
    afternoon_activity: str = Field(description="Attivita del pomeriggio")
    dinner_area: str = Field(description="Zona consigliata per la cena")
    evening_activity: Optional[str] = Field(default=None, description="Attivita serale opzionale")
    transport_notes: str = Field(description="Note sui trasporti tra le attivita")


class ItinerarySchema(OutputSchema):
    model_config = ConfigDict(title=RecipeKind.ITINERARY.value)
    dto_type = Itinerary

    destination: str = Field(description="Nome della destinazione")
    total_days: int = Field(ge=1, le=30, description="Numero totale di giorni")
    travel_style: str = Field(description="Stile del viaggio: culturale, relax, avventura, gastronomico")
    daily_plans: list[DayPlanSchema] = Field(min_length=1, max_length=30, description="Piano per ogni giorno")
    general_tips: list[str] = Field(
        min_length=1, max_length=5, description="Consigli generali per il viaggio, massimo 5"
    )


# ── Packing list ──────────────────────────────────────


class PackingListSchema(OutputSchema):
    model_config = ConfigDict(title=RecipeKind.PACKING_LIST.value)
    dto_type = PackingList

    documents: list[str] = Field(min_length=2, max_length=5, description="Documenti e carte necessari")
    clothing: list[str] = Field(min_length=5, max_length=10, description="Abbigliamento consigliato")
    toiletries: list[str] = Field(min_length=3, max_length=8, description="Articoli per igiene personale")
    electronics: list[str] = Field(min_length=2, max_length=5, description="Elettronica e accessori")
    special_items: list[str] = Field(
        min_length=2, max_length=5, description="Articoli specifici per il tipo di viaggio"
    )
    health_kit: list[str] = Field(min_length=3, max_length=6, description="Kit medico base")


# ── Briefing ──────────────────────────────────────────


class QuickFactsSchema(OutputSchema):
    model_config = ConfigDict(title="quick_facts")
    dto_type = QuickFacts

    language: str = Field(description="Lingua principale parlata")
    currency: str = Field(description="Valuta locale")
    time_zone: str = Field(description="Fuso orario rispetto all'Italia")
    electrical_outlet: str = Field(description="Tipo di presa elettrica")


class LocalPhraseSchema(OutputSchema):
    model_config = ConfigDict(title="local_phrase")
    dto_type = LocalPhrase

    italian: str = Field(description="Frase in italiano")
    local: str = Field(description="Traduzione nella lingua locale")
    pronunciation: str = Field(description="Guida alla pronuncia")


class BriefingSchema(OutputSchema):
    model_config = ConfigDict(title=RecipeKind.BRIEFING.value)
    dto_type = Briefing

    destination: str = Field(description="Destinazione")
    quick_facts: QuickFactsSchema = Field(description="Fatti rapidi: lingua, valuta, fuso orario")
    cultural_tips: list[str] = Field(
        min_length=3, max_length=5, description="Consigli culturali e comportamentali"
    )
    useful_phrases: list[LocalPhraseSchema] = Field(
        min_length=5, max_length=8, description="Frasi utili nella lingua locale con pronuncia"
    )
    climate_info: str = Field(description="Informazioni sul clima tipico")
    food_culture: list[str] = Field(min_length=3, max_length=5, description="Consigli sulla cucina locale")
    safety_notes: list[str] = Field(min_length=2, max_length=4, description="Note generali sulla sicurezza")


# ── Structured note ───────────────────────────────────


class StructuredNoteSchema(OutputSchema):
    model_config = ConfigDict(title=RecipeKind.STRUCTURED_NOTE.value)
    dto_type = StructuredNote

    category: NoteCategory = Field(default=NoteCategory.OTHER, description="Categoria")
    place_name: Optional[str] = Field(default=None, description="Nome del luogo se menzionato")
    rating: Optional[int] = Field(
        default=None, ge=1, le=5, description="Valutazione da 1 a 5 se deducibile dal tono"
    )
    cost: Optional[str] = Field(default=None, description="Costo menzionato")
    summary: str = Field(description="Riassunto pulito e strutturato della nota originale")
    tags: list[str] = Field(min_length=1, max_length=5, description="Tag estratti dal contenuto, massimo 5")

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, value: Any) -> Any:
        key = str(value or "").strip().lower()
        known = {member.value for member in NoteCategory}
        return key if key in known else NoteCategory.OTHER.value


# ── Journal entry / trip summary ──────────────────────


class JournalEntrySchema(OutputSchema):
    model_config = ConfigDict(title=RecipeKind.JOURNAL_ENTRY.value)
    dto_type = JournalEntry

    title: str = Field(description="Titolo evocativo della giornata")
    date: str = Field(description="Data della giornata nel formato gg/mm/aaaa")
    narrative: str = Field(description="Racconto della giornata in terza persona, 150-250 parole")
    highlight: str = Field(description="Il momento piu significativo della giornata")
    stats_narrative: str = Field(description="Sintesi discorsiva di foto, note e distanza percorsa")


class TripSummarySchema(OutputSchema):
    model_config = ConfigDict(title=RecipeKind.TRIP_SUMMARY.value)
    dto_type = TripSummary

    title: str = Field(description="Titolo del viaggio")
    tagline: str = Field(description="Frase breve che riassume il viaggio")
    narrative: str = Field(description="Racconto del viaggio in terza persona")
    highlights: list[str] = Field(min_length=1, max_length=5, description="Momenti salienti, massimo 5")
    stats_narrative: str = Field(description="Sintesi discorsiva delle statistiche del viaggio")
    next_trip_suggestion: str = Field(description="Suggerimento per il prossimo viaggio")


__all__ = [
    "OutputSchema",
    "DayPlanSchema",
    "ItinerarySchema",
    "PackingListSchema",
    "QuickFactsSchema",
    "LocalPhraseSchema",
    "BriefingSchema",
    "StructuredNoteSchema",
    "JournalEntrySchema",
    "TripSummarySchema",
]
