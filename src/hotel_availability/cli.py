"""Entry point for interactive availability sessions."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from hotel_availability.availability import AvailabilityEngine
from hotel_availability.config.settings import Settings
from hotel_availability.core.logging import configure_logging
from hotel_availability.hotels import InputDecodeError, load_bookings, load_hotels
from hotel_availability.shell import AvailabilityShell

USAGE = "Usage: hotel-availability --hotels hotels.json --bookings bookings.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hotel-availability",
        description="Answer room availability queries for hotels and bookings loaded from JSON.",
    )
    parser.add_argument("--hotels", type=Path, default=None, help="Path to the hotels JSON file")
    parser.add_argument("--bookings", type=Path, default=None, help="Path to the bookings JSON file")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...); overrides AVAIL_LOG_LEVEL",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write logs to availability.log under the configured log directory",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, *, settings: Optional[Settings] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = settings or Settings()

    try:
        if args.hotels is not None:
            settings.hotels_path = args.hotels
        if args.bookings is not None:
            settings.bookings_path = args.bookings
        if args.log_level:
            settings.log_level = args.log_level
        if args.log_file:
            settings.file_logging = True
    except ValidationError as exc:
        print(f"Invalid option: {exc.errors()[0]['msg']}")
        return 1

    hotels_path = settings.hotels_path
    bookings_path = settings.bookings_path
    if hotels_path is None and bookings_path is None:
        print(USAGE)
        return 0
    if hotels_path is None or bookings_path is None:
        print("Both --hotels and --bookings arguments are required.")
        return 1
    if not hotels_path.exists():
        print(f"Hotels file not found: {hotels_path}")
        return 1
    if not bookings_path.exists():
        print(f"Bookings file not found: {bookings_path}")
        return 1

    configure_logging(settings.log_level, settings.log_directory())
    logger = logging.getLogger(__name__)

    try:
        hotels = load_hotels(hotels_path)
        bookings = load_bookings(bookings_path)
    except (InputDecodeError, OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to load input files: %s", exc)
        print(f"Error reading JSON files: {exc}")
        return 1

    engine = AvailabilityEngine.from_records(hotels, bookings)
    logger.info(
        "Ready: %d hotels, %d bookings accepted, %d skipped",
        len(engine.inventory),
        engine.calendar.accepted,
        engine.calendar.skipped,
    )
    AvailabilityShell(engine, prompt=settings.prompt).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
