"""Building - top-level container holding a stack of floors."""

import logging
from typing import override

from core.errors import DuplicateFloorError, FireDrillError, FloorTooSmallError, NoFloorBelowError
from core.models import RoomType
from core.zones.base import FireDrill
from core.zones.floor import Floor

logger = logging.getLogger(__name__)


class Building(FireDrill):
    """A named building whose floors form a supporting stack.

    Floor ``n > 1`` can only be added on top of floor ``n - 1``, and may not
    be wider or longer than it.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._floors: list[Floor] = []

    @property
    def floors(self) -> list[Floor]:
        return list(self._floors)

    def add_floor(self, floor: Floor) -> None:
        if floor.floor_number <= 0 or floor.width < Floor.MIN_WIDTH or floor.length < Floor.MIN_LENGTH:
            raise ValueError(
                f"invalid floor {floor.floor_number}: {floor.width}x{floor.length}m "
                f"(minimum {Floor.MIN_WIDTH}x{Floor.MIN_LENGTH}m)"
            )
        if self.get_floor_by_number(floor.floor_number) is not None:
            raise DuplicateFloorError(f"floor {floor.floor_number} already exists in {self.name!r}")

        if floor.floor_number > 1:
            below = self.get_floor_by_number(floor.floor_number - 1)
            if below is None:
                raise NoFloorBelowError(f"floor {floor.floor_number} has no floor below it in {self.name!r}")
            if floor.width > below.width or floor.length > below.length:
                raise FloorTooSmallError(
                    f"floor {below.floor_number} ({below.width}x{below.length}m) cannot support "
                    f"floor {floor.floor_number} ({floor.width}x{floor.length}m)"
                )

        self._floors.append(floor)
        logger.debug("%s: added floor %d", self.name, floor.floor_number)

    def get_floor_by_number(self, floor_number: int) -> Floor | None:
        for floor in self._floors:
            if floor.floor_number == floor_number:
                return floor
        return None

    @override
    def fire_drill(self, room_type: RoomType | None = None) -> None:
        if not any(floor.rooms for floor in self._floors):
            raise FireDrillError(f"{self.name!r} has no rooms to evacuate")

        for floor in self._floors:
            floor.fire_drill(room_type)
        logger.info("%s: fire drill started (%s)", self.name, room_type or "all rooms")

    @override
    def cancel_fire_drill(self) -> None:
        for floor in self._floors:
            floor.cancel_fire_drill()
        logger.info("%s: fire drill cancelled", self.name)

    def __str__(self) -> str:
        return f'Building: name="{self.name}", floors={len(self._floors)}'
