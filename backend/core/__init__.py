"""Core domain models, sensors and the simulated clock."""

from core.clock import DEFAULT_CLOCK, ClockRegistry, TimedItem
from core.errors import (
    DuplicateFloorError,
    DuplicateRoomError,
    DuplicateSensorError,
    FacilityError,
    FireDrillError,
    FloorTooSmallError,
    InsufficientSpaceError,
    NoFloorBelowError,
)
from core.models import FacilitySnapshot, FloorStatus, RoomStatus, RoomType, SensorAlarm
from core.readings import ReadingSeries
from core.sensors import (
    CarbonDioxideSensor,
    NoiseSensor,
    OccupancySensor,
    Sensor,
    SensorKind,
    TemperatureSensor,
    hazard_level,
    relative_loudness,
)

__all__ = [
    "DEFAULT_CLOCK",
    "CarbonDioxideSensor",
    "ClockRegistry",
    "DuplicateFloorError",
    "DuplicateRoomError",
    "DuplicateSensorError",
    "FacilityError",
    "FacilitySnapshot",
    "FireDrillError",
    "FloorStatus",
    "FloorTooSmallError",
    "InsufficientSpaceError",
    "NoFloorBelowError",
    "NoiseSensor",
    "OccupancySensor",
    "ReadingSeries",
    "RoomStatus",
    "RoomType",
    "Sensor",
    "SensorAlarm",
    "SensorKind",
    "TemperatureSensor",
    "TimedItem",
    "hazard_level",
    "relative_loudness",
]
