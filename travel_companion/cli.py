"""travel-companion CLI entry point."""

from __future__ import annotations

import argparse
import asyncio
import datetime as dt
import json
import sys
from typing import Any, Optional, Sequence

from dotenv import load_dotenv
from pydantic import BaseModel

from travel_companion.application.context import make_assistant_context
from travel_companion.domain.enums import Season, SummaryVariant, TravelStyle, TripType, season_for_month
from travel_companion.domain.models import DayStats
from travel_companion.services.error_presenter import describe_availability
from travel_companion.shared.exceptions import GenerationError


def _print_json(payload: Any) -> None:
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json")
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="travel-companion", description="Assistente di viaggio AI locale")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("availability", help="Verifica la disponibilita del modello")

    itinerary = sub.add_parser("itinerary", help="Genera un itinerario")
    itinerary.add_argument("destination")
    itinerary.add_argument("--days", type=int, default=3)
    itinerary.add_argument("--trip-type", type=TripType.parse, default=TripType.MULTI_DAY)
    itinerary.add_argument("--style", type=TravelStyle, choices=list(TravelStyle), default=None)

    packing = sub.add_parser("packing", help="Genera una packing list")
    packing.add_argument("destination")
    packing.add_argument("--duration", type=int, default=3)
    packing.add_argument("--trip-type", type=TripType.parse, default=TripType.MULTI_DAY)
    packing.add_argument("--season", type=Season, choices=list(Season), default=None)

    briefing = sub.add_parser("briefing", help="Genera un briefing sulla destinazione")
    briefing.add_argument("destination")

    note = sub.add_parser("note", help="Struttura una nota di viaggio")
    note.add_argument("text", nargs="?", default=None, help="Testo della nota (default: stdin)")

    journal = sub.add_parser("journal", help="Genera l'entry di diario di una giornata")
    journal.add_argument("--date", type=dt.date.fromisoformat, default=None)
    journal.add_argument("--photos", type=int, default=0)
    journal.add_argument("--note", action="append", default=[], dest="notes")
    journal.add_argument("--distance-m", type=float, default=0.0)
    journal.add_argument("--place", action="append", default=[], dest="places")

    summary = sub.add_parser("summary", help="Genera il riassunto di un viaggio")
    summary.add_argument("destination")
    summary.add_argument("--days", type=int, default=3)
    summary.add_argument("--photos", type=int, default=0)
    summary.add_argument("--notes", type=int, default=0)
    summary.add_argument("--distance-m", type=float, default=0.0)
    summary.add_argument("--highlight", action="append", default=[], dest="highlights")
    summary.add_argument(
        "--variant", type=SummaryVariant, choices=list(SummaryVariant), default=SummaryVariant.STANDARD
    )

    return parser


async def _generate(assistant, args: argparse.Namespace) -> BaseModel:
    if args.command == "itinerary":
        return await assistant.generate_itinerary(args.destination, args.days, args.trip_type, args.style)
    if args.command == "packing":
        season = args.season or _current_season()
        return await assistant.generate_packing_list(args.destination, args.duration, args.trip_type, season)
    if args.command == "briefing":
        return await assistant.generate_briefing(args.destination)
    if args.command == "note":
        text = args.text if args.text is not None else sys.stdin.read()
        return await assistant.structure_note(text)
    if args.command == "journal":
        stats = DayStats(
            date=args.date or dt.date.today(),
            photo_count=args.photos,
            note_contents=args.notes,
            total_distance_meters=args.distance_m,
            places_visited=args.places,
        )
        return await assistant.generate_journal_entry(stats)
    return await assistant.generate_trip_summary(
        args.destination,
        args.days,
        args.photos,
        args.notes,
        args.distance_m,
        args.highlights,
        args.variant,
    )


def _current_season() -> Season:
    return season_for_month(dt.date.today().month)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    context = make_assistant_context()
    assistant = context.assistant

    if args.command == "availability":
        state = assistant.check_availability()
        explanation = describe_availability(state)
        _print_json({
            "provider": context.resource.name,
            "state": state.model_dump(mode="json"),
            "error": explanation.model_dump(mode="json") if explanation else None,
        })
        return 0 if state.available else 1

    try:
        result = asyncio.run(_generate(assistant, args))
    except GenerationError as exc:
        _print_json({"kind": exc.kind.value, "error": assistant.present_error(exc).model_dump(mode="json")})
        return 1
    _print_json(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
