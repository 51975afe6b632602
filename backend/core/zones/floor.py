"""Floor - a storey of the building holding rooms within an area budget."""

import logging
from typing import override

from core.errors import DuplicateRoomError, InsufficientSpaceError
from core.models import FloorStatus, RoomType
from core.zones.base import FireDrill
from core.zones.room import Room

logger = logging.getLogger(__name__)


class Floor(FireDrill):
    """A floor numbered from 1 (ground floor) upwards.

    The sum of room areas can never exceed ``width * length``.
    """

    MIN_WIDTH = 5
    MIN_LENGTH = 5

    def __init__(self, floor_number: int, width: float, length: float) -> None:
        self.floor_number = floor_number
        self.width = width
        self.length = length
        self._rooms: list[Room] = []
        self.available_area = width * length

    @property
    def rooms(self) -> list[Room]:
        return list(self._rooms)

    def calculate_area(self) -> float:
        return self.width * self.length

    def occupied_area(self) -> float:
        return self.calculate_area() - self.available_area

    def add_room(self, room: Room) -> None:
        if room.area < Room.MIN_AREA:
            raise ValueError(f"room area must be at least {Room.MIN_AREA}m^2, got {room.area}")
        if self.get_room_by_number(room.room_number) is not None:
            raise DuplicateRoomError(f"room {room.room_number} already exists on floor {self.floor_number}")
        if room.area > self.available_area:
            raise InsufficientSpaceError(
                f"floor {self.floor_number} has {self.available_area:.2f}m^2 free, "
                f"room {room.room_number} needs {room.area:.2f}m^2"
            )

        self._rooms.append(room)
        self.available_area -= room.area
        logger.debug("Floor %d: added room %d (%.2fm^2 left)", self.floor_number, room.room_number, self.available_area)

    def get_room_by_number(self, room_number: int) -> Room | None:
        for room in self._rooms:
            if room.room_number == room_number:
                return room
        return None

    @override
    def fire_drill(self, room_type: RoomType | None = None) -> None:
        for room in self._rooms:
            if room_type is None or room.type == room_type:
                room.set_fire_drill(True)

    @override
    def cancel_fire_drill(self) -> None:
        for room in self._rooms:
            room.set_fire_drill(False)

    def status(self) -> FloorStatus:
        return FloorStatus(
            floor_number=self.floor_number,
            width=self.width,
            length=self.length,
            available_area=self.available_area,
            rooms=[room.status() for room in self._rooms],
        )

    def __str__(self) -> str:
        return f"Floor #{self.floor_number}: width={self.width:.2f}m, length={self.length:.2f}m, rooms={len(self._rooms)}"
