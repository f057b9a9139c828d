"""Availability lookups over the inventory index and booking calendar."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, List, Tuple

from .calendar import BookingCalendar
from .dates import iter_nights
from .inventory import InventoryIndex


@dataclass(frozen=True)
class AvailabilityWindow:
    """A maximal run of consecutive nights that all have rooms left."""

    start: date
    end: date
    min_available: int

    @property
    def nights(self) -> int:
        return (self.end - self.start).days + 1


def nightly_availability(
    index: InventoryIndex,
    calendar: BookingCalendar,
    hotel_id: str,
    room_type: str,
    start: date,
    end_exclusive: date,
) -> Iterator[Tuple[date, int]]:
    """Yield capacity minus bookings for each night in ``[start, end_exclusive)``, unclamped."""
    total = index.count(hotel_id, room_type)
    for night in iter_nights(start, end_exclusive):
        yield night, total - calendar.booked(hotel_id, room_type, night)


def availability(
    index: InventoryIndex,
    calendar: BookingCalendar,
    hotel_id: str,
    room_type: str,
    start: date,
    end_exclusive: date,
) -> int:
    """Rooms available for every night of the stay.

    The tightest night governs the whole range. An empty range reports the full
    inventory count.
    """
    nightly = nightly_availability(index, calendar, hotel_id, room_type, start, end_exclusive)
    lowest = min((available for _, available in nightly), default=None)
    if lowest is None:
        return index.count(hotel_id, room_type)
    return lowest


def search(
    index: InventoryIndex,
    calendar: BookingCalendar,
    hotel_id: str,
    room_type: str,
    horizon_nights: int,
    today: date,
) -> List[AvailabilityWindow]:
    """Windows of positive availability within ``[today, today + horizon_nights)``.

    Nights with no rooms left (or overbooked) split the horizon; each window reports
    the lowest availability among its own nights.
    """
    horizon_end = today + timedelta(days=max(horizon_nights, 0))
    windows: List[AvailabilityWindow] = []
    run_start: date | None = None
    run_end = today
    run_min = 0
    for night, available in nightly_availability(index, calendar, hotel_id, room_type, today, horizon_end):
        if available > 0:
            if run_start is None:
                run_start = night
                run_min = available
            else:
                run_min = min(run_min, available)
            run_end = night
        elif run_start is not None:
            windows.append(AvailabilityWindow(run_start, run_end, run_min))
            run_start = None
    if run_start is not None:
        windows.append(AvailabilityWindow(run_start, run_end, run_min))
    return windows
