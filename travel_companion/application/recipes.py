"""Generation recipes: one fixed prompt template and output schema per feature.

Templates only substitute parameters and add conditional clauses; all free text has
already been sanitized by the pipeline when a template runs.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional

from travel_companion.application.contracts import GenerationRequest
from travel_companion.application.schemas import (
    BriefingSchema,
    ItinerarySchema,
    JournalEntrySchema,
    OutputSchema,
    PackingListSchema,
    StructuredNoteSchema,
    TripSummarySchema,
)
from travel_companion.domain.enums import RecipeKind, Season, SummaryVariant, TravelStyle, TripType
from travel_companion.domain.models import DayStats
from travel_companion.shared.exceptions import OutputValidationError

SYSTEM_PROMPT = """Sei Travel Companion, un assistente di viaggio intelligente.

REGOLE FONDAMENTALI:
- Rispondi SEMPRE in italiano
- Usa la TERZA PERSONA per narrativa e journal
- Sii conciso ma informativo
- Non inventare informazioni specifiche (prezzi, orari esatti)
- Suggerisci sempre di verificare informazioni pratiche

TONO:
- Professionale ma amichevole
- Bilanciato tra fatti ed emozioni
- Mai eccessivamente entusiasta o freddo"""

PREWARM_PREFIX = "Sei Travel Companion"

MIN_DAYS = 1
MAX_DAYS = 30
LONG_TRIP_DAYS = 7

EMPTY_DESTINATION = "destinazione vuota"
EMPTY_TEXT = "testo vuoto"
EMPTY_DAY = "Nessun dato disponibile per questa giornata"


def clamp_days(days: int) -> int:
    return max(MIN_DAYS, min(MAX_DAYS, int(days)))


def _lines(*parts: str) -> str:
    return "\n".join(part for part in parts if part is not None)


def _km(meters: float) -> str:
    return f"{float(meters) / 1000:.1f}"


def _value(raw: Any) -> str:
    return str(getattr(raw, "value", raw))


def _choice(enum_cls: type[Enum]) -> Callable[[Any], Any]:
    def convert(raw: Any) -> Any:
        if isinstance(raw, enum_cls):
            return raw
        return enum_cls(str(raw).strip().lower())

    return convert


def _optional(convert: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def wrapped(raw: Any) -> Any:
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return None
        return convert(raw)

    return wrapped


# ── Templates ─────────────────────────────────────────


def itinerary_prompt(params: Mapping[str, Any]) -> str:
    days = clamp_days(params["days"])
    style = params.get("travel_style")
    style_clause = f"Stile preferito: {_value(style)}." if style else ""
    long_trip_clause = (
        "Genera un overview sintetico per aree/zone invece di dettagli giornalieri completi."
        if days > LONG_TRIP_DAYS
        else ""
    )
    return _lines(
        "Genera un itinerario di viaggio per:",
        f"- Destinazione: {params['destination']}",
        f"- Durata: {days} giorni",
        f"- Tipo viaggio: {_value(params['trip_type'])}",
        style_clause,
        long_trip_clause,
        "",
        "Considera: logistica spostamenti, attivita appropriate per il tipo di viaggio.",
    )


def packing_list_prompt(params: Mapping[str, Any]) -> str:
    return _lines(
        "Genera una lista di oggetti da mettere in valigia per:",
        f"- Destinazione: {params['destination']}",
        f"- Durata: {int(params['duration'])} giorni",
        f"- Tipo viaggio: {_value(params['trip_type'])}",
        f"- Stagione: {_value(params['season'])}",
        "",
        "Includi solo articoli essenziali e pertinenti.",
    )


def briefing_prompt(params: Mapping[str, Any]) -> str:
    return _lines(
        f"Genera un briefing informativo per un viaggio a: {params['destination']}",
        "",
        "INCLUDI SOLO informazioni stabili e generali:",
        "- Usi e costumi culturali",
        "- Frasi utili nella lingua locale",
        "- Clima tipico per stagione",
        "- Consigli generali di sicurezza",
        "- Usanze per le mance",
        "- Cucina tipica",
        "",
        "ESCLUDI informazioni che possono cambiare (visti, prezzi, restrizioni sanitarie).",
    )


def structured_note_prompt(params: Mapping[str, Any]) -> str:
    return _lines(
        "Analizza e struttura la seguente nota di viaggio:",
        "",
        f"\"{params['text']}\"",
        "",
        "Estrai: categoria, nome luogo (se presente), valutazione implicita (1-5), "
        "costo (se menzionato), riassunto pulito, tag pertinenti.",
    )


def journal_entry_prompt(params: Mapping[str, Any]) -> str:
    date = params["date"]
    if isinstance(date, str):
        date = dt.date.fromisoformat(date)
    notes = params.get("note_contents") or []
    places = params.get("places_visited") or []
    return _lines(
        f"Genera un'entry di diario di viaggio per la giornata del {date.strftime('%d/%m/%Y')}.",
        "",
        "DATI DELLA GIORNATA:",
        f"- Foto scattate: {int(params.get('photo_count') or 0)}",
        f"- Note registrate: {'; '.join(notes) if notes else 'Nessuna nota'}",
        f"- Distanza percorsa: {_km(params.get('total_distance_meters') or 0)} km",
        f"- Luoghi visitati: {', '.join(places) if places else 'Non specificati'}",
        "",
        "STILE:",
        "- Scrivi in TERZA PERSONA",
        "- Tono bilanciato tra fatti ed emozioni",
        "- 150-250 parole per il racconto",
    )


def trip_summary_prompt(params: Mapping[str, Any]) -> str:
    highlights = params.get("highlights") or []
    variant = SummaryVariant(params.get("variant") or SummaryVariant.STANDARD)
    return _lines(
        "Genera un riassunto narrativo completo per il viaggio completato.",
        "",
        "DATI DEL VIAGGIO:",
        f"- Destinazione: {params['destination']}",
        f"- Durata: {int(params['duration_days'])} giorni",
        f"- Foto scattate: {int(params.get('photo_count') or 0)}",
        f"- Note registrate: {int(params.get('note_count') or 0)}",
        f"- Distanza totale: {_km(params.get('total_distance_meters') or 0)} km",
        f"- Momenti salienti: {'; '.join(highlights) if highlights else 'Non specificati'}",
        "",
        "STILE:",
        "- Scrivi in TERZA PERSONA",
        "- Tono evocativo ma non eccessivo",
        variant.prompt_modifier,
    )


def _require_day_data(params: Mapping[str, Any]) -> None:
    if not DayStats.model_validate(params).has_data:
        raise OutputValidationError(EMPTY_DAY)


# ── Recipe ────────────────────────────────────────────


@dataclass(frozen=True)
class Recipe:
    """Everything the pipeline needs to run one kind of generation.

    ``coerce`` maps a parameter name to a converter; a converter that raises
    ``ValueError`` or ``TypeError`` rejects the request before the resource is used.
    ``required_text`` maps a parameter name to the validation reason raised when it
    sanitizes to an empty string. ``text_lists`` are sanitized item by item and
    empty items dropped. ``check`` runs on the sanitized parameters before the
    resource is touched.
    """

    kind: RecipeKind
    output_schema: type[OutputSchema]
    template: Callable[[Mapping[str, Any]], str]
    coerce: Mapping[str, Callable[[Any], Any]] = field(default_factory=dict)
    required_text: Mapping[str, str] = field(default_factory=dict)
    text_lists: tuple[str, ...] = ()
    check: Optional[Callable[[Mapping[str, Any]], None]] = None

    def json_schema(self) -> dict[str, Any]:
        return self.output_schema.model_json_schema()

    def build_request(self, params: Mapping[str, Any]) -> GenerationRequest:
        return GenerationRequest(
            kind=self.kind,
            prompt=self.template(params),
            json_schema=self.json_schema(),
            parameters=dict(params),
        )


ITINERARY = Recipe(
    kind=RecipeKind.ITINERARY,
    output_schema=ItinerarySchema,
    template=itinerary_prompt,
    coerce={
        "days": clamp_days,
        "trip_type": TripType.parse,
        "travel_style": _optional(_choice(TravelStyle)),
    },
    required_text={"destination": EMPTY_DESTINATION},
)

PACKING_LIST = Recipe(
    kind=RecipeKind.PACKING_LIST,
    output_schema=PackingListSchema,
    template=packing_list_prompt,
    coerce={"duration": int, "trip_type": TripType.parse, "season": _choice(Season)},
    required_text={"destination": EMPTY_DESTINATION},
)

BRIEFING = Recipe(
    kind=RecipeKind.BRIEFING,
    output_schema=BriefingSchema,
    template=briefing_prompt,
    required_text={"destination": EMPTY_DESTINATION},
)

STRUCTURED_NOTE = Recipe(
    kind=RecipeKind.STRUCTURED_NOTE,
    output_schema=StructuredNoteSchema,
    template=structured_note_prompt,
    required_text={"text": EMPTY_TEXT},
)

JOURNAL_ENTRY = Recipe(
    kind=RecipeKind.JOURNAL_ENTRY,
    output_schema=JournalEntrySchema,
    template=journal_entry_prompt,
    text_lists=("note_contents", "places_visited"),
    check=_require_day_data,
)

TRIP_SUMMARY = Recipe(
    kind=RecipeKind.TRIP_SUMMARY,
    output_schema=TripSummarySchema,
    template=trip_summary_prompt,
    coerce={
        "duration_days": int,
        "photo_count": int,
        "note_count": int,
        "total_distance_meters": float,
        "variant": _choice(SummaryVariant),
    },
    required_text={"destination": EMPTY_DESTINATION},
    text_lists=("highlights",),
)

RECIPES: dict[RecipeKind, Recipe] = {
    recipe.kind: recipe
    for recipe in (ITINERARY, PACKING_LIST, BRIEFING, STRUCTURED_NOTE, JOURNAL_ENTRY, TRIP_SUMMARY)
}


__all__ = [
    "SYSTEM_PROMPT",
    "PREWARM_PREFIX",
    "Recipe",
    "RECIPES",
    "ITINERARY",
    "PACKING_LIST",
    "BRIEFING",
    "STRUCTURED_NOTE",
    "JOURNAL_ENTRY",
    "TRIP_SUMMARY",
    "clamp_days",
    "itinerary_prompt",
    "packing_list_prompt",
    "briefing_prompt",
    "structured_note_prompt",
    "journal_entry_prompt",
    "trip_summary_prompt",
]
