"""Utility CLI for inspecting hotel inventory and booking load results."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from hotel_availability.availability import BookingCalendar, InventoryIndex
from hotel_availability.config.settings import Settings
from hotel_availability.hotels import load_bookings, load_hotels


def _format_row(hotel_id: str, room_type: str, units: int, booked_nights: int) -> str:
    return f"{hotel_id:15} | {room_type:10} | {units:5} | {booked_nights:8}"


def summarize(index: InventoryIndex, calendar: BookingCalendar) -> list[str]:
    rows: list[str] = []
    for hotel_id in sorted(index.hotel_ids(), key=str.lower):
        room_types = index.room_types(hotel_id)
        if not room_types:
            rows.append(_format_row(hotel_id, "-", 0, 0))
            continue
        for room_type in sorted(room_types, key=str.lower):
            booked_nights = sum(calendar.nights(hotel_id, room_type).values())
            rows.append(_format_row(hotel_id, room_type, room_types[room_type], booked_nights))
    return rows


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Summarise room inventory and booked nights per hotel.")
    parser.add_argument("--hotels", type=Path, default=None, help="Path to the hotels JSON file")
    parser.add_argument("--bookings", type=Path, default=None, help="Path to the bookings JSON file")
    args = parser.parse_args(argv)

    settings = Settings()
    hotels_path = args.hotels or settings.hotels_path
    bookings_path = args.bookings or settings.bookings_path
    if hotels_path is None or bookings_path is None:
        parser.error("--hotels and --bookings are required (or set AVAIL_HOTELS_PATH / AVAIL_BOOKINGS_PATH)")

    index = InventoryIndex.build(load_hotels(hotels_path))
    calendar = BookingCalendar.build(load_bookings(bookings_path))

    print(f"Hotels source: {hotels_path}")
    print(f"Bookings source: {bookings_path} ({calendar.accepted} used, {calendar.skipped} skipped)")
    print(f"{'Hotel':15} | {'Room type':10} | {'Units':5} | {'Booked':8}")
    for row in summarize(index, calendar):
        print(row)


if __name__ == "__main__":
    main()
