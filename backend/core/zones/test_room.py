"""Tests for rooms and their sensors."""

import pytest

from core.clock import ClockRegistry
from core.errors import DuplicateSensorError
from core.models import RoomType
from core.sensors import CarbonDioxideSensor, NoiseSensor, OccupancySensor, SensorKind, TemperatureSensor
from core.zones import Room


@pytest.fixture
def clock() -> ClockRegistry:
    return ClockRegistry()


def test_new_room_has_no_sensors_and_no_drill() -> None:
    room = Room(1, RoomType.OFFICE, 6)

    assert room.sensors == []
    assert not room.fire_drill_ongoing()
    assert str(room) == "Room #1: type=OFFICE, area=6.00m^2, sensors=0"


def test_sensors_sorted_alphabetically_by_kind(clock: ClockRegistry) -> None:
    room = Room(1, RoomType.LABORATORY, 20)
    room.add_sensor(TemperatureSensor([20], clock=clock))
    room.add_sensor(OccupancySensor([2], 1, 10, clock=clock))
    room.add_sensor(CarbonDioxideSensor([800], 1, 600, 100, clock=clock))
    room.add_sensor(NoiseSensor([50], 1, clock=clock))

    assert [s.kind for s in room.sensors] == [
        SensorKind.CO2,
        SensorKind.NOISE,
        SensorKind.OCCUPANCY,
        SensorKind.TEMPERATURE,
    ]
    assert str(room) == "Room #1: type=LABORATORY, area=20.00m^2, sensors=4"


def test_duplicate_sensor_kind_rejected(clock: ClockRegistry) -> None:
    room = Room(1, RoomType.STUDY, 10)
    room.add_sensor(OccupancySensor([8, 9, 42], 3, 21, clock=clock))

    with pytest.raises(DuplicateSensorError):
        room.add_sensor(OccupancySensor([1], 1, 5, clock=clock))
    assert len(room.sensors) == 1


def test_get_sensor_by_kind_name(clock: ClockRegistry) -> None:
    room = Room(1, RoomType.STUDY, 10)
    noise = NoiseSensor([50], 1, clock=clock)
    room.add_sensor(noise)

    assert room.get_sensor("NoiseSensor") is noise
    assert room.get_sensor(SensorKind.NOISE) is noise
    assert room.get_sensor("TemperatureSensor") is None
    assert room.get_sensor("NotASensor") is None


def test_sensor_list_is_a_copy(clock: ClockRegistry) -> None:
    room = Room(1, RoomType.STUDY, 10)
    room.add_sensor(NoiseSensor([50], 1, clock=clock))

    room.sensors.clear()

    assert len(room.sensors) == 1


def test_fire_drill_flag() -> None:
    room = Room(3, RoomType.STUDY, 10)

    room.set_fire_drill(True)
    assert room.fire_drill_ongoing()
    room.set_fire_drill(False)
    assert not room.fire_drill_ongoing()


def test_hazard_levels_track_the_clock(clock: ClockRegistry) -> None:
    room = Room(1, RoomType.LABORATORY, 20)
    room.add_sensor(TemperatureSensor([67, 68], clock=clock))
    room.add_sensor(OccupancySensor([8, 9, 42], 3, 21, clock=clock))

    assert room.hazard_levels() == {SensorKind.OCCUPANCY: 38, SensorKind.TEMPERATURE: 0}

    clock.advance_one_unit()

    assert room.hazard_levels() == {SensorKind.OCCUPANCY: 38, SensorKind.TEMPERATURE: 100}
    status = room.status()
    assert status.hazard_levels == {"OccupancySensor": 38, "TemperatureSensor": 100}
    assert status.max_hazard == 100
