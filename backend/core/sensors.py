"""Sensor variants and their hazard levels."""

import math
from collections.abc import Sequence
from enum import StrEnum
from typing import ClassVar

from core.clock import DEFAULT_CLOCK, ClockRegistry
from core.readings import ReadingSeries

# Hazard thresholds
_CO2_THRESHOLDS_PPM = ((1000, 0), (2000, 25), (5000, 50))
_NOISE_REFERENCE_DB = 70.0
_TEMPERATURE_ALARM = 68
_MAX_HAZARD = 100


class SensorKind(StrEnum):
    """Sensor variant names, which also define the canonical sort order."""

    CO2 = "CarbonDioxideSensor"
    NOISE = "NoiseSensor"
    OCCUPANCY = "OccupancySensor"
    TEMPERATURE = "TemperatureSensor"


class TimedSensor:
    """Shared behaviour of every sensor: a reading series driven by a clock.

    The sensor is registered with ``clock`` (or the process-wide default clock)
    once all arguments have been validated.
    """

    kind: ClassVar[SensorKind]

    def __init__(
        self,
        readings: Sequence[int] | None,
        update_frequency: int,
        *,
        clock: ClockRegistry | None = None,
    ) -> None:
        self.series = ReadingSeries(readings, update_frequency)
        (clock if clock is not None else DEFAULT_CLOCK).register(self)

    @property
    def readings(self) -> tuple[int, ...]:
        return self.series.readings

    @property
    def update_frequency(self) -> int:
        return self.series.update_frequency

    @property
    def time_elapsed(self) -> int:
        return self.series.time_elapsed

    @property
    def current_reading(self) -> int:
        return self.series.current_reading

    def advance_one_unit(self) -> None:
        self.series.advance_one_unit()

    def _extra_summary(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"TimedSensor: {self.series}, type={self.kind}{self._extra_summary()}"


class CarbonDioxideSensor(TimedSensor):
    """CO2 concentration in parts per million.

    ``ideal_value`` and ``variation_limit`` describe the acceptable operating
    range of the room; they do not affect the hazard level.
    """

    kind = SensorKind.CO2

    def __init__(
        self,
        readings: Sequence[int] | None,
        update_frequency: int,
        ideal_value: int,
        variation_limit: int,
        *,
        clock: ClockRegistry | None = None,
    ) -> None:
        if ideal_value <= 0 or variation_limit <= 0 or ideal_value - variation_limit < 0:
            raise ValueError(
                f"invalid CO2 range: ideal={ideal_value}, variation limit={variation_limit}"
            )
        self._ideal_value = ideal_value
        self._variation_limit = variation_limit
        super().__init__(readings, update_frequency, clock=clock)

    @property
    def ideal_value(self) -> int:
        return self._ideal_value

    @property
    def variation_limit(self) -> int:
        return self._variation_limit

    def _extra_summary(self) -> str:
        return f", idealPPM={self._ideal_value}, varLimit={self._variation_limit}"


class NoiseSensor(TimedSensor):
    """Noise level in decibels."""

    kind = SensorKind.NOISE

    def relative_loudness(self) -> float:
        return relative_loudness(self.current_reading)


class OccupancySensor(TimedSensor):
    """Number of people in the room."""

    kind = SensorKind.OCCUPANCY

    def __init__(
        self,
        readings: Sequence[int] | None,
        update_frequency: int,
        capacity: int,
        *,
        clock: ClockRegistry | None = None,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        super().__init__(readings, update_frequency, clock=clock)

    @property
    def capacity(self) -> int:
        return self._capacity

    def _extra_summary(self) -> str:
        return f", capacity={self._capacity}"


class TemperatureSensor(TimedSensor):
    """Ambient temperature. Always updates every time unit."""

    kind = SensorKind.TEMPERATURE

    def __init__(self, readings: Sequence[int] | None, *, clock: ClockRegistry | None = None) -> None:
        super().__init__(readings, 1, clock=clock)


type Sensor = CarbonDioxideSensor | NoiseSensor | OccupancySensor | TemperatureSensor


def relative_loudness(reading: float) -> float:
    """Loudness relative to a 70 dB reference, e.g. 67 dB -> 0.8123."""
    return 2 ** ((reading - _NOISE_REFERENCE_DB) / 10.0)


def hazard_level(sensor: Sensor) -> int:
    """Hazard level in [0, 100] derived from the sensor's current reading."""
    reading = sensor.current_reading
    match sensor:
        case CarbonDioxideSensor():
            for upper, level in _CO2_THRESHOLDS_PPM:
                if reading < upper:
                    return level
            return _MAX_HAZARD
        case NoiseSensor():
            hazard = relative_loudness(reading) * 100
            return _MAX_HAZARD if hazard > _MAX_HAZARD else math.floor(hazard)
        case OccupancySensor(capacity=capacity):
            if capacity == 0:
                # Nobody allowed in: any occupant is a full hazard, an empty room none.
                return _MAX_HAZARD if reading > 0 else 0
            hazard = reading / capacity * 100
            return _MAX_HAZARD if hazard >= _MAX_HAZARD else math.floor(hazard + 0.5)
        case TemperatureSensor():
            return _MAX_HAZARD if reading >= _TEMPERATURE_ALARM else 0
