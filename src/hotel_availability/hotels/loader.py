"""Load hotel and booking records from JSON files on disk."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from .models import Booking, Hotel
from .normalizer import RecordFormatError, build_booking_records, build_hotel_records

logger = logging.getLogger(__name__)


class InputDecodeError(ValueError):
    """Raised when an input file cannot be decoded into records."""


def _strip_comments(text: str) -> str:
    out: list[str] = []
    index = 0
    length = len(text)
    in_string = False
    while index < length:
        char = text[index]
        if in_string:
            out.append(char)
            if char == "\\" and index + 1 < length:
                out.append(text[index + 1])
                index += 2
                continue
            if char == '"':
                in_string = False
            index += 1
            continue
        if char == '"':
            in_string = True
        elif text.startswith("//", index):
            end = text.find("\n", index)
            index = length if end == -1 else end
            continue
        elif text.startswith("/*", index):
            end = text.find("*/", index + 2)
            if end == -1:
                raise InputDecodeError("Unterminated block comment")
            index = end + 2
            continue
        out.append(char)
        index += 1
    return "".join(out)


def _strip_trailing_commas(text: str) -> str:
    out: list[str] = []
    index = 0
    length = len(text)
    in_string = False
    while index < length:
        char = text[index]
        if in_string:
            out.append(char)
            if char == "\\" and index + 1 < length:
                out.append(text[index + 1])
                index += 2
                continue
            if char == '"':
                in_string = False
            index += 1
            continue
        if char == '"':
            in_string = True
        elif char == ",":
            lookahead = index + 1
            while lookahead < length and text[lookahead].isspace():
                lookahead += 1
            if lookahead < length and text[lookahead] in "]}":
                index += 1
                continue
        out.append(char)
        index += 1
    return "".join(out)


def decode_records(text: str) -> List[Any]:
    """Decode a JSON array, tolerating comments and trailing commas.

    A ``null`` document decodes to an empty list.
    """
    cleaned = _strip_trailing_commas(_strip_comments(text))
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise InputDecodeError(str(exc)) from exc
    if data is None:
        return []
    if not isinstance(data, list):
        raise InputDecodeError(f"Expected a JSON array of records, got {type(data).__name__}")
    return data


def _read_records(path: Path) -> List[Any]:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found at {path}")
    return decode_records(path.read_text(encoding="utf-8-sig"))


def load_hotels(path: Path) -> List[Hotel]:
    try:
        hotels = build_hotel_records(_read_records(path))
    except RecordFormatError as exc:
        raise InputDecodeError(f"{path}: {exc}") from exc
    logger.info("Loaded %d hotels from %s", len(hotels), path)
    return hotels


def load_bookings(path: Path) -> List[Booking]:
    try:
        bookings = build_booking_records(_read_records(path))
    except RecordFormatError as exc:
        raise InputDecodeError(f"{path}: {exc}") from exc
    logger.info("Loaded %d bookings from %s", len(bookings), path)
    return bookings
