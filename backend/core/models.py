"""Core data models for the facility simulation."""

from dataclasses import dataclass, field
from enum import StrEnum


class RoomType(StrEnum):
    STUDY = "study"
    OFFICE = "office"
    LABORATORY = "laboratory"


@dataclass
class RoomStatus:
    """Read-only view of a single room - sent via WebSocket."""

    room_number: int
    type: RoomType
    area: float
    fire_drill: bool
    hazard_levels: dict[str, int] = field(default_factory=dict)  # sensor kind -> level

    @property
    def max_hazard(self) -> int:
        return max(self.hazard_levels.values(), default=0)


@dataclass
class FloorStatus:
    floor_number: int
    width: float
    length: float
    available_area: float
    rooms: list[RoomStatus] = field(default_factory=list)


@dataclass
class SensorAlarm:
    """A sensor whose hazard level reached the alarm threshold."""

    floor_number: int
    room_number: int
    kind: str
    level: int


@dataclass
class FacilitySnapshot:
    tick: int
    building: str
    floors: list[FloorStatus] = field(default_factory=list)
    alarms: list[SensorAlarm] = field(default_factory=list)
    simulated_time: str = ""  # ISO format timestamp representing simulation time
