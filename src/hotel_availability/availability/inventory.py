"""Per-hotel room-type capacity index."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping

from hotel_availability.hotels.models import Hotel

from .keys import CaseInsensitiveDict

logger = logging.getLogger(__name__)


class InventoryIndex:
    """Maps hotel id -> room-type code -> number of rooms of that type.

    Hotel ids and room-type codes are matched case-insensitively. A hotel without
    rooms is still a known hotel; every room type simply has zero capacity there.
    """

    def __init__(self, counts: CaseInsensitiveDict[CaseInsensitiveDict[int]]) -> None:
        self._counts = counts

    @classmethod
    def build(cls, hotels: Iterable[Hotel]) -> "InventoryIndex":
        counts: CaseInsensitiveDict[CaseInsensitiveDict[int]] = CaseInsensitiveDict()
        for hotel in hotels:
            per_type: CaseInsensitiveDict[int] = CaseInsensitiveDict()
            for room in hotel.rooms or ():
                if not room.room_type:
                    logger.debug("Hotel %s: ignoring room %s without a room type", hotel.id, room.room_id)
                    continue
                per_type[room.room_type] = per_type.get(room.room_type, 0) + 1
            if hotel.id in counts:
                logger.warning("Hotel %s appears more than once; keeping the last definition", hotel.id)
            counts[hotel.id] = per_type
        logger.info(
            "Inventory index built for %d hotels (%d rooms)",
            len(counts),
            sum(sum(per_type.values()) for per_type in counts.values()),
        )
        return cls(counts)

    def __contains__(self, hotel_id: object) -> bool:
        return hotel_id in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def hotel_ids(self) -> Iterator[str]:
        return iter(self._counts)

    def count(self, hotel_id: str, room_type: str) -> int:
        """Unit capacity for the pair; 0 when either key is unknown."""
        per_type = self._counts.get(hotel_id)
        if per_type is None:
            return 0
        return per_type.get(room_type, 0)

    def room_types(self, hotel_id: str) -> Mapping[str, int]:
        return dict(self._counts.get(hotel_id) or {})

    def as_dict(self) -> dict[str, dict[str, int]]:
        return {hotel_id: dict(per_type) for hotel_id, per_type in self._counts.items()}
