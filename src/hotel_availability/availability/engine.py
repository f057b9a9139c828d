"""Facade that owns both indexes and answers availability questions."""
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Callable, Iterable, List, Optional

from hotel_availability.hotels.models import Booking, Hotel

from .calendar import BookingCalendar
from .inventory import InventoryIndex
from .queries import AvailabilityWindow, availability, search

logger = logging.getLogger(__name__)


class HotelNotFoundError(LookupError):
    """Raised when a query names a hotel that is not in the inventory."""

    def __init__(self, hotel_id: str) -> None:
        super().__init__(f"Hotel not found: {hotel_id}")
        self.hotel_id = hotel_id


class AvailabilityEngine:
    """Answers availability queries against indexes built once at startup."""

    def __init__(
        self,
        inventory: InventoryIndex,
        calendar: BookingCalendar,
        *,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._inventory = inventory
        self._calendar = calendar
        self._clock = clock

    @classmethod
    def from_records(
        cls,
        hotels: Iterable[Hotel],
        bookings: Iterable[Booking],
        *,
        clock: Callable[[], date] = date.today,
    ) -> "AvailabilityEngine":
        return cls(InventoryIndex.build(hotels), BookingCalendar.build(bookings), clock=clock)

    @property
    def inventory(self) -> InventoryIndex:
        return self._inventory

    @property
    def calendar(self) -> BookingCalendar:
        return self._calendar

    def knows_hotel(self, hotel_id: str) -> bool:
        return hotel_id in self._inventory

    def _require_hotel(self, hotel_id: str) -> None:
        if not self.knows_hotel(hotel_id):
            raise HotelNotFoundError(hotel_id)

    def availability_on(self, hotel_id: str, room_type: str, night: date) -> int:
        return self.availability_between(hotel_id, room_type, night, night)

    def availability_between(self, hotel_id: str, room_type: str, first_night: date, last_night: date) -> int:
        """Availability over the inclusive night range ``first_night..last_night``."""
        self._require_hotel(hotel_id)
        result = availability(
            self._inventory,
            self._calendar,
            hotel_id,
            room_type,
            first_night,
            last_night + timedelta(days=1),
        )
        logger.debug(
            "Availability %s/%s %s..%s -> %d", hotel_id, room_type, first_night, last_night, result
        )
        return result

    def search(
        self,
        hotel_id: str,
        room_type: str,
        horizon_nights: int,
        *,
        today: Optional[date] = None,
    ) -> List[AvailabilityWindow]:
        self._require_hotel(hotel_id)
        start = today or self._clock()
        windows = search(self._inventory, self._calendar, hotel_id, room_type, horizon_nights, start)
        logger.debug(
            "Search %s/%s from %s over %d nights -> %d windows",
            hotel_id,
            room_type,
            start,
            horizon_nights,
            len(windows),
        )
        return windows
