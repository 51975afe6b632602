"""Tests for floors: area budget, lookups and fire drills."""

import pytest

from core.errors import DuplicateRoomError, InsufficientSpaceError
from core.models import RoomType
from core.zones import Floor, Room


def test_new_floor_is_empty() -> None:
    floor = Floor(1, 20.5, 35.2)

    assert floor.rooms == []
    assert floor.calculate_area() == pytest.approx(721.6)
    assert floor.available_area == pytest.approx(721.6)
    assert floor.occupied_area() == 0
    assert str(floor) == "Floor #1: width=20.50m, length=35.20m, rooms=0"


def test_add_room_consumes_area() -> None:
    floor = Floor(1, 20, 25)
    floor.add_room(Room(1, RoomType.OFFICE, 60))
    floor.add_room(Room(2, RoomType.STUDY, 50))

    assert floor.occupied_area() == 110
    assert floor.available_area == 390
    assert [room.room_number for room in floor.rooms] == [1, 2]


def test_room_larger_than_remaining_area_rejected() -> None:
    floor = Floor(1, 20, 25)
    floor.add_room(Room(1, RoomType.OFFICE, 110))

    with pytest.raises(InsufficientSpaceError):
        floor.add_room(Room(2, RoomType.STUDY, 400))
    assert floor.available_area == 390
    assert len(floor.rooms) == 1


def test_oversized_room_rejected_on_empty_floor() -> None:
    floor = Floor(1, 10, 10)

    with pytest.raises(InsufficientSpaceError):
        floor.add_room(Room(1, RoomType.LABORATORY, 101))
    assert floor.rooms == []


def test_room_filling_the_floor_exactly_fits() -> None:
    floor = Floor(1, 10, 10)
    floor.add_room(Room(1, RoomType.LABORATORY, 100))

    assert floor.available_area == 0


def test_room_below_minimum_area_rejected() -> None:
    floor = Floor(1, 10, 10)

    with pytest.raises(ValueError):
        floor.add_room(Room(1, RoomType.OFFICE, 4.99))


def test_duplicate_room_number_rejected() -> None:
    floor = Floor(1, 10, 10)
    floor.add_room(Room(1, RoomType.OFFICE, 10))

    with pytest.raises(DuplicateRoomError):
        floor.add_room(Room(1, RoomType.STUDY, 10))
    assert floor.available_area == 90


def test_get_room_by_number() -> None:
    floor = Floor(1, 10, 10)
    room = Room(7, RoomType.OFFICE, 10)
    floor.add_room(room)

    assert floor.get_room_by_number(7) is room
    assert floor.get_room_by_number(8) is None


def test_room_list_is_a_copy() -> None:
    floor = Floor(1, 10, 10)
    floor.add_room(Room(1, RoomType.OFFICE, 10))

    floor.rooms.append(Room(2, RoomType.OFFICE, 10))

    assert len(floor.rooms) == 1


def test_fire_drill_by_type_and_cancel() -> None:
    floor = Floor(1, 10, 10)
    study = Room(1, RoomType.STUDY, 10)
    office = Room(2, RoomType.OFFICE, 10)
    floor.add_room(study)
    floor.add_room(office)

    floor.fire_drill(RoomType.STUDY)
    assert study.fire_drill_ongoing()
    assert not office.fire_drill_ongoing()

    floor.fire_drill(None)
    assert office.fire_drill_ongoing()

    floor.cancel_fire_drill()
    assert not study.fire_drill_ongoing()
    assert not office.fire_drill_ongoing()


def test_status_lists_rooms() -> None:
    floor = Floor(2, 10, 10)
    floor.add_room(Room(1, RoomType.OFFICE, 10))

    status = floor.status()

    assert status.floor_number == 2
    assert status.available_area == 90
    assert [room.room_number for room in status.rooms] == [1]
