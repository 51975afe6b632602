"""Raw sensor readings that advance on a fixed cadence."""

from collections.abc import Sequence

MIN_UPDATE_FREQUENCY = 1
MAX_UPDATE_FREQUENCY = 5


class ReadingSeries:
    """A fixed, circular sequence of raw readings.

    The current reading only changes on update boundaries, i.e. when the
    elapsed time is a multiple of ``update_frequency``. Between boundaries the
    previous value is held.
    """

    def __init__(self, readings: Sequence[int] | None, update_frequency: int) -> None:
        if not readings:
            raise ValueError("sensor readings must be a non-empty sequence")
        if any(r < 0 for r in readings):
            raise ValueError(f"sensor readings must be non-negative, got {list(readings)}")
        if not MIN_UPDATE_FREQUENCY <= update_frequency <= MAX_UPDATE_FREQUENCY:
            raise ValueError(
                f"update frequency must be between {MIN_UPDATE_FREQUENCY} and "
                f"{MAX_UPDATE_FREQUENCY}, got {update_frequency}"
            )

        self._readings: tuple[int, ...] = tuple(readings)
        self._update_frequency = update_frequency
        self._time_elapsed = 0
        self._index = 0

    @property
    def readings(self) -> tuple[int, ...]:
        return self._readings

    @property
    def update_frequency(self) -> int:
        return self._update_frequency

    @property
    def time_elapsed(self) -> int:
        return self._time_elapsed

    @property
    def current_reading(self) -> int:
        return self._readings[self._index]

    def advance_one_unit(self) -> None:
        self._time_elapsed += 1
        if self._time_elapsed % self._update_frequency == 0:
            self._index = (self._time_elapsed // self._update_frequency) % len(self._readings)

    def __str__(self) -> str:
        return f"freq={self._update_frequency}, readings={','.join(str(r) for r in self._readings)}"
