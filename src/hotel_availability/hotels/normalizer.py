"""Utilities to transform raw hotel and booking payloads into record dataclasses."""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from .models import Booking, Hotel, Room, RoomType

logger = logging.getLogger(__name__)


class RecordFormatError(ValueError):
    """Raised when a payload entry does not have the shape of a record."""


def _fold(name: str) -> str:
    return name.replace("_", "").lower()


def _folded(entry: Mapping[str, Any]) -> dict[str, Any]:
    # Property names are matched without regard to case or underscores, so
    # ``hotelId``, ``HotelId`` and ``hotel_id`` all address the same field.
    return {_fold(str(key)): value for key, value in entry.items()}


def _text(fields: Mapping[str, Any], name: str) -> Optional[str]:
    value = fields.get(_fold(name))
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise RecordFormatError(f"Field '{name}' must be a string, got {type(value).__name__}")


def _text_list(fields: Mapping[str, Any], name: str) -> List[str]:
    value = fields.get(_fold(name))
    if value in (None, ""):
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise RecordFormatError(f"Field '{name}' must be a list of strings")
    return [str(item) for item in value if item is not None]


def _entries(fields: Mapping[str, Any], name: str) -> List[Mapping[str, Any]]:
    value = fields.get(_fold(name))
    if value is None:
        return []
    if not isinstance(value, list):
        raise RecordFormatError(f"Field '{name}' must be a list")
    return [_require_mapping(item, name) for item in value if item is not None]


def _require_mapping(entry: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(entry, Mapping):
        raise RecordFormatError(f"Expected an object in '{context}', got {type(entry).__name__}")
    return entry


def build_room_type(entry: Mapping[str, Any]) -> RoomType:
    fields = _folded(entry)
    return RoomType(
        code=_text(fields, "code") or "",
        description=_text(fields, "description"),
        amenities=_text_list(fields, "amenities"),
        features=_text_list(fields, "features"),
    )


def build_room(entry: Mapping[str, Any]) -> Room:
    fields = _folded(entry)
    return Room(
        room_type=_text(fields, "roomType") or "",
        room_id=_text(fields, "roomId"),
    )


def build_hotel_record(entry: Mapping[str, Any]) -> Hotel:
    fields = _folded(_require_mapping(entry, "hotels"))
    return Hotel(
        id=_text(fields, "id") or "",
        name=_text(fields, "name"),
        room_types=[build_room_type(item) for item in _entries(fields, "roomTypes")],
        rooms=[build_room(item) for item in _entries(fields, "rooms")],
    )


def build_hotel_records(entries: Iterable[Any]) -> List[Hotel]:
    hotels: List[Hotel] = []
    for entry in entries:
        if entry is None:
            continue
        hotel = build_hotel_record(entry)
        if not hotel.id.strip():
            logger.warning("Skipping hotel record without an id (name=%r)", hotel.name)
            continue
        hotels.append(hotel)
    return hotels


def build_booking_record(entry: Mapping[str, Any]) -> Booking:
    fields = _folded(_require_mapping(entry, "bookings"))
    return Booking(
        hotel_id=_text(fields, "hotelId"),
        arrival=_text(fields, "arrival"),
        departure=_text(fields, "departure"),
        room_type=_text(fields, "roomType"),
        room_rate=_text(fields, "roomRate"),
    )


def build_booking_records(entries: Iterable[Any]) -> List[Booking]:
    return [build_booking_record(entry) for entry in entries if entry is not None]
