"""Sample building for the demo API and tests."""

from core.clock import ClockRegistry
from core.models import RoomType
from core.sensors import CarbonDioxideSensor, NoiseSensor, OccupancySensor, Sensor, TemperatureSensor
from core.zones import Building, Floor, Room


def create_sample_building(clock: ClockRegistry) -> Building:
    """Create a hardcoded three-storey teaching building.

    Every sensor is registered with ``clock``.
    """
    building = Building("General Purpose South")
    building.add_floor(_ground_floor(clock))
    building.add_floor(_first_floor(clock))
    building.add_floor(_second_floor(clock))
    return building


def _room(number: int, room_type: RoomType, area: float, *sensors: Sensor) -> Room:
    room = Room(number, room_type, area)
    for sensor in sensors:
        room.add_sensor(sensor)
    return room


def _ground_floor(clock: ClockRegistry) -> Floor:
    """Ground floor: two labs and a large office."""
    floor = Floor(1, 30.0, 18.0)
    floor.add_room(
        _room(
            101,
            RoomType.LABORATORY,
            120.0,
            TemperatureSensor([60, 64, 68, 72, 66], clock=clock),
            CarbonDioxideSensor([690, 740, 1120, 1480, 2100], 2, 700, 300, clock=clock),
        )
    )
    floor.add_room(
        _room(
            102,
            RoomType.LABORATORY,
            90.0,
            TemperatureSensor([58, 59, 61], clock=clock),
            NoiseSensor([55, 62, 67, 82], 3, clock=clock),
        )
    )
    floor.add_room(
        _room(
            103,
            RoomType.OFFICE,
            150.0,
            OccupancySensor([4, 8, 9, 21, 12], 2, 21, clock=clock),
            NoiseSensor([48, 52, 60], 1, clock=clock),
        )
    )
    return floor


def _first_floor(clock: ClockRegistry) -> Floor:
    """First floor: study rooms and an office."""
    floor = Floor(2, 30.0, 18.0)
    floor.add_room(
        _room(
            201,
            RoomType.STUDY,
            80.0,
            OccupancySensor([8, 9, 42], 3, 21, clock=clock),
            CarbonDioxideSensor([800, 950, 1010], 5, 600, 200, clock=clock),
        )
    )
    floor.add_room(
        _room(
            202,
            RoomType.STUDY,
            60.0,
            OccupancySensor([2, 5, 6], 4, 12, clock=clock),
        )
    )
    floor.add_room(_room(203, RoomType.OFFICE, 45.5))
    return floor


def _second_floor(clock: ClockRegistry) -> Floor:
    """Second floor: a single quiet study area."""
    floor = Floor(3, 20.0, 18.0)
    floor.add_room(
        _room(
            301,
            RoomType.STUDY,
            200.0,
            NoiseSensor([40, 45, 70], 5, clock=clock),
            TemperatureSensor([62, 63], clock=clock),
            OccupancySensor([0, 10, 30], 2, 40, clock=clock),
        )
    )
    return floor
