"""Per-night booked-unit counts derived from booking records."""
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping, Optional

from hotel_availability.hotels.models import Booking

from .dates import iter_nights, parse_stay_date
from .keys import CaseInsensitiveDict

logger = logging.getLogger(__name__)

NightCounts = dict[date, int]


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class BookingCalendar:
    """Maps hotel id -> room-type code -> night -> number of units booked.

    Each booking occupies every night from arrival up to, but not including,
    departure. Overlapping bookings are summed, so a night can carry more bookings
    than the hotel has rooms.
    """

    def __init__(
        self,
        booked: CaseInsensitiveDict[CaseInsensitiveDict[NightCounts]],
        *,
        accepted: int = 0,
        skipped: int = 0,
    ) -> None:
        self._booked = booked
        self._accepted = accepted
        self._skipped = skipped

    @classmethod
    def build(cls, bookings: Iterable[Booking]) -> "BookingCalendar":
        booked: CaseInsensitiveDict[CaseInsensitiveDict[NightCounts]] = CaseInsensitiveDict()
        accepted = 0
        skipped = 0
        for booking in bookings:
            if (
                _blank(booking.hotel_id)
                or _blank(booking.room_type)
                or _blank(booking.arrival)
                or _blank(booking.departure)
            ):
                logger.debug("Skipping booking with missing fields: %s", booking)
                skipped += 1
                continue

            arrival = parse_stay_date(booking.arrival)
            departure = parse_stay_date(booking.departure)
            if arrival is None or departure is None:
                logger.debug(
                    "Skipping booking with unreadable dates (arrival=%r, departure=%r)",
                    booking.arrival,
                    booking.departure,
                )
                skipped += 1
                continue

            accepted += 1
            for night in iter_nights(arrival, departure):
                per_type = booked.setdefault(booking.hotel_id, CaseInsensitiveDict())
                per_night = per_type.setdefault(booking.room_type, {})
                per_night[night] = per_night.get(night, 0) + 1

        if skipped:
            logger.info("Ignored %d malformed bookings", skipped)
        logger.info("Booking calendar built from %d bookings", accepted)
        return cls(booked, accepted=accepted, skipped=skipped)

    @property
    def accepted(self) -> int:
        return self._accepted

    @property
    def skipped(self) -> int:
        """Number of bookings dropped for missing fields or unreadable dates."""
        return self._skipped

    def booked(self, hotel_id: str, room_type: str, night: date) -> int:
        per_type = self._booked.get(hotel_id)
        if per_type is None:
            return 0
        per_night = per_type.get(room_type)
        if per_night is None:
            return 0
        return per_night.get(night, 0)

    def nights(self, hotel_id: str, room_type: str) -> Mapping[date, int]:
        per_type = self._booked.get(hotel_id) or {}
        return dict(per_type.get(room_type) or {})

    def as_dict(self) -> dict[str, dict[str, NightCounts]]:
        return {
            hotel_id: {room_type: dict(per_night) for room_type, per_night in per_type.items()}
            for hotel_id, per_type in self._booked.items()
        }
