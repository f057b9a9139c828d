"""Calendar-date helpers shared by the booking calendar and the queries."""
from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from dateutil import parser as date_parser

_COMPACT = re.compile(r"^(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})$")
_DASHED = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})$")

COMPACT_FORMAT = "%Y%m%d"

# Fills differing in year, month and day; text that parses to the same date under
# both names a full calendar date.
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _from_match(match: Optional[re.Match[str]]) -> Optional[date]:
    if match is None:
        return None
    try:
        return date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError:
        return None


def parse_stay_date(value: Optional[str]) -> Optional[date]:
    """Read a calendar date from a booking or command argument.

    ``YYYYMMDD`` is tried first, then ``YYYY-MM-DD``, then a permissive parse via
    dateutil. The permissive parse must find a year, month and day in the text;
    any time-of-day component is discarded. Returns ``None`` when the text cannot
    be read as a complete date.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None

    compact = _COMPACT.match(text)
    if compact:
        return _from_match(compact)
    dashed = _DASHED.match(text)
    if dashed:
        return _from_match(dashed)

    try:
        first, second = (date_parser.parse(text, default=fill).date() for fill in _FILL_DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if first != second:
        return None
    return first


def iter_nights(start: date, end_exclusive: date) -> Iterator[date]:
    """Yield each night in ``[start, end_exclusive)``; nothing when the range is empty."""
    night = start
    while night < end_exclusive:
        yield night
        night += timedelta(days=1)


def format_compact(night: date) -> str:
    return night.strftime(COMPACT_FORMAT)
