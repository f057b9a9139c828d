"""Parse operator command lines into typed commands."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple, Union

from hotel_availability.availability.dates import parse_stay_date

_CALL = re.compile(r"^[^(]+\((?P<args>.*)\)\s*$")
_DASHED_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_NUMERIC_RANGE = re.compile(
    r"^(?P<start>\d{8}|\d{4}-\d{2}-\d{2})\s*-\s*(?P<end>\d{8}|\d{4}-\d{2}-\d{2})$"
)
_INTEGER = re.compile(r"^[+-]?\d+$")

AVAILABILITY_USAGE = "Availability expects 3 arguments."
SEARCH_USAGE = "Search expects 3 arguments: Search(H1, daysAhead, roomType)"
UNKNOWN_COMMAND = "Unknown command. Use Availability(...) or Search(...)."


class CommandError(ValueError):
    """Raised for command lines that cannot be turned into a command.

    ``hotel_id`` holds the hotel argument when the failure came after it was read.
    """

    def __init__(self, message: str, *, hotel_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.hotel_id = hotel_id


@dataclass(frozen=True)
class AvailabilityCommand:
    """Rooms free on every night from ``first_night`` to ``last_night`` inclusive."""

    hotel_id: str
    room_type: str
    first_night: date
    last_night: date


@dataclass(frozen=True)
class SearchCommand:
    """Windows of free rooms over the next ``horizon_nights`` nights."""

    hotel_id: str
    room_type: str
    horizon_nights: int


Command = Union[AvailabilityCommand, SearchCommand]


def extract_args(line: str) -> Optional[List[str]]:
    """Split ``Name(a, b, c)`` into its arguments.

    Commas inside nested parentheses do not split. Returns ``None`` when the line is
    not shaped like a call.
    """
    match = _CALL.match(line)
    if not match:
        return None
    parts: List[str] = []
    depth = 0
    token = ""
    for char in match.group("args"):
        if char == "," and depth == 0:
            parts.append(token.strip())
            token = ""
            continue
        token += char
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
    if token.strip():
        parts.append(token.strip())
    return parts


def parse_night_range(text: str) -> Tuple[date, date]:
    """Read a single night or an inclusive ``start-end`` range of nights."""
    text = text.strip()
    if "-" not in text or _DASHED_DATE.match(text):
        night = parse_stay_date(text)
        if night is None:
            raise CommandError("Invalid date. Use YYYYMMDD.")
        return night, night

    match = _NUMERIC_RANGE.match(text)
    if match:
        bounds = [match.group("start"), match.group("end")]
    else:
        bounds = [part.strip() for part in text.split("-") if part.strip()]
    if len(bounds) != 2:
        raise CommandError("Invalid date range. Use YYYYMMDD-YYYYMMDD.")
    start = parse_stay_date(bounds[0])
    end = parse_stay_date(bounds[1])
    if start is None or end is None:
        raise CommandError("Invalid date range. Use YYYYMMDD-YYYYMMDD.")
    return start, end


def _parse_availability(line: str) -> AvailabilityCommand:
    args = extract_args(line)
    if args is None:
        raise CommandError("Invalid command format.")
    if len(args) != 3:
        raise CommandError(AVAILABILITY_USAGE)
    hotel_id, date_arg, room_type = args
    try:
        first_night, last_night = parse_night_range(date_arg)
    except CommandError as exc:
        raise CommandError(str(exc), hotel_id=hotel_id) from exc
    return AvailabilityCommand(
        hotel_id=hotel_id,
        room_type=room_type,
        first_night=first_night,
        last_night=last_night,
    )


def _parse_search(line: str) -> SearchCommand:
    args = extract_args(line)
    if args is None or len(args) != 3:
        raise CommandError(SEARCH_USAGE)
    hotel_id, horizon_arg, room_type = args
    if not _INTEGER.match(horizon_arg):
        raise CommandError("Invalid daysAhead integer.")
    return SearchCommand(hotel_id=hotel_id, room_type=room_type, horizon_nights=int(horizon_arg))


def parse_command(line: str) -> Command:
    text = line.strip()
    lowered = text.lower()
    if lowered.startswith("availability"):
        return _parse_availability(text)
    if lowered.startswith("search"):
        return _parse_search(text)
    raise CommandError(UNKNOWN_COMMAND)
