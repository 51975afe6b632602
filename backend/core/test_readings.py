"""Tests for the circular reading series."""

import pytest

from core.readings import ReadingSeries


def test_starts_at_first_reading() -> None:
    series = ReadingSeries([8, 9, 42], 3)

    assert series.current_reading == 8
    assert series.time_elapsed == 0


def test_index_changes_only_on_update_boundaries_and_wraps() -> None:
    series = ReadingSeries([10, 20, 30], 2)

    seen: list[int] = []
    for _ in range(8):
        seen.append(series.current_reading)
        series.advance_one_unit()

    assert seen == [10, 10, 20, 20, 30, 30, 10, 10]
    assert series.time_elapsed == 8


def test_single_reading_never_changes() -> None:
    series = ReadingSeries([5], 1)
    for _ in range(4):
        series.advance_one_unit()

    assert series.current_reading == 5


def test_readings_are_not_aliased() -> None:
    raw = [1, 2, 3]
    series = ReadingSeries(raw, 1)
    raw[0] = 99

    assert series.readings == (1, 2, 3)


@pytest.mark.parametrize(
    ("readings", "frequency"),
    [
        (None, 1),
        ([], 1),
        ([1, -1, 2], 1),
        ([1, 2], 0),
        ([1, 2], 6),
    ],
)
def test_rejects_invalid_arguments(readings: list[int] | None, frequency: int) -> None:
    with pytest.raises(ValueError):
        ReadingSeries(readings, frequency)


def test_str_lists_frequency_and_readings() -> None:
    assert str(ReadingSeries([8, 9, 42], 3)) == "freq=3, readings=8,9,42"
