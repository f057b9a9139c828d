"""Hotel and booking record models plus decoding helpers."""

from .loader import InputDecodeError, decode_records, load_bookings, load_hotels
from .models import Booking, Hotel, Room, RoomType
from .normalizer import (
    RecordFormatError,
    build_booking_record,
    build_booking_records,
    build_hotel_record,
    build_hotel_records,
)

__all__ = [
    "Booking",
    "Hotel",
    "InputDecodeError",
    "RecordFormatError",
    "Room",
    "RoomType",
    "build_booking_record",
    "build_booking_records",
    "build_hotel_record",
    "build_hotel_records",
    "decode_records",
    "load_bookings",
    "load_hotels",
]
