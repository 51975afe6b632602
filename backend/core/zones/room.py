"""Room - a single space on a floor and the sensors installed in it."""

import logging

from core.errors import DuplicateSensorError
from core.models import RoomStatus, RoomType
from core.sensors import Sensor, SensorKind, hazard_level

logger = logging.getLogger(__name__)


class Room:
    """A room with a number unique on its floor, a type and an area in m^2.

    At most one sensor of each kind can be installed. Sensors are kept in
    alphabetical order of their kind name.
    """

    MIN_AREA = 5

    def __init__(self, room_number: int, room_type: RoomType, area: float) -> None:
        self.room_number = room_number
        self.type = room_type
        self.area = area
        self._fire_drill = False
        self._sensors: list[Sensor] = []

    @property
    def sensors(self) -> list[Sensor]:
        return list(self._sensors)

    def fire_drill_ongoing(self) -> bool:
        return self._fire_drill

    def set_fire_drill(self, fire_drill: bool) -> None:
        self._fire_drill = fire_drill

    def get_sensor(self, kind: SensorKind | str) -> Sensor | None:
        for sensor in self._sensors:
            if sensor.kind == kind:
                return sensor
        return None

    def add_sensor(self, sensor: Sensor) -> None:
        if self.get_sensor(sensor.kind) is not None:
            raise DuplicateSensorError(f"room {self.room_number} already has a {sensor.kind}")
        self._sensors.append(sensor)
        self._sensors.sort(key=lambda s: s.kind.value)
        logger.debug("Room %d: installed %s", self.room_number, sensor.kind)

    def hazard_levels(self) -> dict[SensorKind, int]:
        return {sensor.kind: hazard_level(sensor) for sensor in self._sensors}

    def status(self) -> RoomStatus:
        return RoomStatus(
            room_number=self.room_number,
            type=self.type,
            area=self.area,
            fire_drill=self._fire_drill,
            hazard_levels={str(kind): level for kind, level in self.hazard_levels().items()},
        )

    def __str__(self) -> str:
        return f"Room #{self.room_number}: type={self.type.name}, area={self.area:.2f}m^2, sensors={len(self._sensors)}"
