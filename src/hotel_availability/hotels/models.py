"""Dataclasses for decoded hotel inventory and booking records."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class RoomType:
    """Descriptive metadata for a room category."""

    code: str
    description: Optional[str] = None
    amenities: List[str] = field(default_factory=list)
    features: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Room:
    """A concrete, bookable unit of a given room type."""

    room_type: str
    room_id: Optional[str] = None


@dataclass(slots=True)
class Hotel:
    """A property with its room-type catalogue and physical rooms."""

    id: str
    name: Optional[str] = None
    room_types: List[RoomType] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)


@dataclass(slots=True)
class Booking:
    """A reservation as supplied by the booking feed.

    Dates are kept as the raw strings from the feed; they are only interpreted when
    the booking calendar is built, and bookings whose dates cannot be read are
    dropped there.
    """

    hotel_id: Optional[str]
    arrival: Optional[str]
    departure: Optional[str]
    room_type: Optional[str]
    room_rate: Optional[str] = None
