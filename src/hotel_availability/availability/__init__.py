"""Availability engine: inventory and booking indexes plus the queries over them."""

from .calendar import BookingCalendar
from .dates import format_compact, iter_nights, parse_stay_date
from .engine import AvailabilityEngine, HotelNotFoundError
from .inventory import InventoryIndex
from .keys import CaseInsensitiveDict
from .queries import AvailabilityWindow, availability, nightly_availability, search

__all__ = [
    "AvailabilityEngine",
    "AvailabilityWindow",
    "BookingCalendar",
    "CaseInsensitiveDict",
    "HotelNotFoundError",
    "InventoryIndex",
    "availability",
    "format_compact",
    "iter_nights",
    "nightly_availability",
    "parse_stay_date",
    "search",
]
