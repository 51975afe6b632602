"""FacilitySimulation - drives the clock and reports building state."""

import logging
from datetime import timedelta

from core.clock import ClockRegistry
from core.models import FacilitySnapshot, SensorAlarm
from core.zones import Building
from simulation.config import DEFAULT, SimConfig

logger = logging.getLogger(__name__)


class FacilitySimulation:
    """Discrete time simulation over a single building.

    The clock is injected so that independent simulations never share sensor
    state. Every sensor of the building should be registered with it.
    """

    def __init__(self, building: Building, clock: ClockRegistry, config: SimConfig = DEFAULT) -> None:
        self.building = building
        self.clock = clock
        self.config = config
        self.tick = 0

    def simulated_time(self) -> str:
        elapsed = timedelta(seconds=self.tick * self.config.tick_duration_s)
        return (self.config.base_time + elapsed).isoformat()

    def alarms(self) -> list[SensorAlarm]:
        """Sensors whose hazard level is at or above the alarm threshold."""
        alarms: list[SensorAlarm] = []
        for floor in self.building.floors:
            for room in floor.rooms:
                for kind, level in room.hazard_levels().items():
                    if level >= self.config.alarm_hazard_level:
                        alarms.append(
                            SensorAlarm(
                                floor_number=floor.floor_number,
                                room_number=room.room_number,
                                kind=str(kind),
                                level=level,
                            )
                        )
        return alarms

    def snapshot(self) -> FacilitySnapshot:
        return FacilitySnapshot(
            tick=self.tick,
            building=self.building.name,
            floors=[floor.status() for floor in self.building.floors],
            alarms=self.alarms(),
            simulated_time=self.simulated_time(),
        )

    def step(self) -> FacilitySnapshot:
        """Advance every registered sensor by one unit."""
        self.clock.advance_one_unit()
        self.tick += 1
        snapshot = self.snapshot()
        for alarm in snapshot.alarms:
            logger.warning(
                "tick %d: floor %d room %d %s hazard at %d",
                self.tick,
                alarm.floor_number,
                alarm.room_number,
                alarm.kind,
                alarm.level,
            )
        return snapshot

    def advance(self, units: int) -> FacilitySnapshot:
        if not 1 <= units <= self.config.max_advance_units:
            raise ValueError(f"units must be between 1 and {self.config.max_advance_units}, got {units}")

        for _ in range(units - 1):
            self.clock.advance_one_unit()
            self.tick += 1
        snapshot = self.step()
        logger.debug("Advanced %d units to tick %d", units, self.tick)
        return snapshot
