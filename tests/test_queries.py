from __future__ import annotations

from datetime import date, timedelta

import pytest

from hotel_availability.availability import (
    AvailabilityEngine,
    AvailabilityWindow,
    BookingCalendar,
    HotelNotFoundError,
    InventoryIndex,
    availability,
    nightly_availability,
    search,
)
from hotel_availability.hotels import Booking, Hotel, Room


def _hotel(hotel_id: str, room_type: str, units: int) -> Hotel:
    return Hotel(id=hotel_id, rooms=[Room(room_type=room_type, room_id=str(i)) for i in range(units)])


def _booking(arrival: str, departure: str, *, hotel_id: str = "H1", room_type: str = "DBL") -> Booking:
    return Booking(hotel_id=hotel_id, arrival=arrival, departure=departure, room_type=room_type)


def _indexes(units: int, *bookings: Booking) -> tuple[InventoryIndex, BookingCalendar]:
    return InventoryIndex.build([_hotel("H1", "DBL", units)]), BookingCalendar.build(bookings)


def test_without_bookings_availability_equals_inventory():
    index, calendar = _indexes(3)
    for start, end in [
        (date(2024, 1, 1), date(2024, 1, 2)),
        (date(2024, 1, 1), date(2024, 3, 1)),
        (date(2030, 12, 31), date(2031, 1, 5)),
    ]:
        assert availability(index, calendar, "H1", "DBL", start, end) == 3


def test_scenario_two_rooms_one_three_night_booking():
    index, calendar = _indexes(2, _booking("20240101", "20240104"))

    assert availability(index, calendar, "H1", "DBL", date(2024, 1, 2), date(2024, 1, 3)) == 1
    assert availability(index, calendar, "H1", "DBL", date(2024, 1, 4), date(2024, 1, 5)) == 2
    assert availability(index, calendar, "H1", "DBL", date(2024, 1, 1), date(2024, 1, 6)) == 1
    assert search(index, calendar, "H1", "DBL", 5, date(2024, 1, 1)) == [
        AvailabilityWindow(date(2024, 1, 1), date(2024, 1, 5), 1)
    ]


def test_range_uses_tightest_night_not_sum_or_average():
    index, calendar = _indexes(
        4,
        _booking("20240102", "20240103"),
        _booking("20240102", "20240103"),
        _booking("20240102", "20240103"),
        _booking("20240104", "20240105"),
    )
    assert availability(index, calendar, "H1", "DBL", date(2024, 1, 1), date(2024, 1, 6)) == 1


def test_degenerate_range_reports_inventory_even_when_fully_booked_nearby():
    index, calendar = _indexes(1, _booking("20240101", "20240110"))

    assert availability(index, calendar, "H1", "DBL", date(2024, 1, 5), date(2024, 1, 5)) == 1
    assert availability(index, calendar, "H1", "DBL", date(2024, 1, 6), date(2024, 1, 5)) == 1


def test_overbooking_is_not_clamped():
    index, calendar = _indexes(
        1,
        _booking("20240101", "20240102"),
        _booking("20240101", "20240102"),
        _booking("20240101", "20240102"),
    )
    assert availability(index, calendar, "H1", "DBL", date(2024, 1, 1), date(2024, 1, 2)) == -2


def test_unknown_room_type_has_zero_availability():
    index, calendar = _indexes(2)
    assert availability(index, calendar, "H1", "STE", date(2024, 1, 1), date(2024, 1, 3)) == 0
    assert search(index, calendar, "H1", "STE", 10, date(2024, 1, 1)) == []


def test_search_splits_on_exactly_zero_availability():
    index, calendar = _indexes(1, _booking("20240102", "20240104"))

    windows = search(index, calendar, "H1", "DBL", 5, date(2024, 1, 1))

    assert windows == [
        AvailabilityWindow(date(2024, 1, 1), date(2024, 1, 1), 1),
        AvailabilityWindow(date(2024, 1, 4), date(2024, 1, 5), 1),
    ]
    assert [window.nights for window in windows] == [1, 2]


def test_search_reports_minimum_within_each_window():
    index = InventoryIndex.build([_hotel("H1", "DBL", 3)])
    calendar = BookingCalendar.build(
        [
            _booking("20240102", "20240103"),
            _booking("20240103", "20240104"),
            _booking("20240103", "20240104"),
            _booking("20240104", "20240105"),
            _booking("20240104", "20240105"),
            _booking("20240104", "20240105"),
            _booking("20240104", "20240105"),
        ]
    )

    windows = search(index, calendar, "H1", "DBL", 6, date(2024, 1, 1))

    # nightly: 3, 2, 1, -1, 3, 3
    assert windows == [
        AvailabilityWindow(date(2024, 1, 1), date(2024, 1, 3), 1),
        AvailabilityWindow(date(2024, 1, 5), date(2024, 1, 6), 3),
    ]


def test_search_crosses_month_and_year_boundaries():
    index, calendar = _indexes(1, _booking("20250101", "20250102"))

    windows = search(index, calendar, "H1", "DBL", 5, date(2024, 12, 30))

    assert windows == [
        AvailabilityWindow(date(2024, 12, 30), date(2024, 12, 31), 1),
        AvailabilityWindow(date(2025, 1, 2), date(2025, 1, 3), 1),
    ]


def test_search_with_empty_horizon_returns_nothing():
    index, calendar = _indexes(2)
    assert search(index, calendar, "H1", "DBL", 0, date(2024, 1, 1)) == []
    assert search(index, calendar, "H1", "DBL", -3, date(2024, 1, 1)) == []


def test_search_without_any_free_night_returns_nothing():
    index, calendar = _indexes(1, _booking("20240101", "20240201"))
    assert search(index, calendar, "H1", "DBL", 10, date(2024, 1, 1)) == []


def test_search_windows_never_touch_and_never_hold_full_nights():
    index, calendar = _indexes(
        1,
        _booking("20240103", "20240104"),
        _booking("20240107", "20240109"),
        _booking("20240112", "20240113"),
    )

    windows = search(index, calendar, "H1", "DBL", 15, date(2024, 1, 1))

    for window in windows:
        assert availability(index, calendar, "H1", "DBL", window.start, window.end + timedelta(days=1)) > 0
    for earlier, later in zip(windows, windows[1:]):
        assert (later.start - earlier.end).days >= 2


def test_engine_checks_hotel_and_uses_inclusive_ranges():
    engine = AvailabilityEngine.from_records(
        [_hotel("H1", "DBL", 2)],
        [_booking("20240101", "20240104")],
        clock=lambda: date(2024, 1, 3),
    )

    assert engine.availability_on("h1", "dbl", date(2024, 1, 3)) == 1
    assert engine.availability_on("H1", "DBL", date(2024, 1, 4)) == 2
    assert engine.availability_between("H1", "DBL", date(2024, 1, 3), date(2024, 1, 4)) == 1
    assert engine.search("H1", "DBL", 3) == [AvailabilityWindow(date(2024, 1, 3), date(2024, 1, 5), 1)]
    assert engine.search("H1", "DBL", 2, today=date(2024, 1, 10)) == [
        AvailabilityWindow(date(2024, 1, 10), date(2024, 1, 11), 2)
    ]

    with pytest.raises(HotelNotFoundError, match="Hotel not found: H9"):
        engine.availability_on("H9", "DBL", date(2024, 1, 3))
    with pytest.raises(HotelNotFoundError):
        engine.search("H9", "DBL", 3)


def test_nightly_availability_is_produced_lazily():
    index, calendar = _indexes(2, _booking("20240101", "20240102"))

    nightly = nightly_availability(index, calendar, "H1", "DBL", date(2024, 1, 1), date(9999, 12, 31))

    assert next(nightly) == (date(2024, 1, 1), 1)
    assert next(nightly) == (date(2024, 1, 2), 2)


def test_search_over_a_long_horizon():
    index, calendar = _indexes(1, _booking("20240301", "20240302"))

    windows = search(index, calendar, "H1", "DBL", 3650, date(2024, 1, 1))

    assert windows == [
        AvailabilityWindow(date(2024, 1, 1), date(2024, 2, 29), 1),
        AvailabilityWindow(date(2024, 3, 2), date(2024, 1, 1) + timedelta(days=3649), 1),
    ]
