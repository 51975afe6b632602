"""Centralised simulation tunables.

Create a custom ``SimConfig`` to tweak values for testing::

    cfg = SimConfig(max_advance_units=10)
    sim = FacilitySimulation(building, clock, config=cfg)
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SimConfig:
    """All simulation tunables, grouped by category."""

    # --- Tick timing ---
    tick_duration_s: float = 60.0  # one simulated minute per clock unit
    base_time: datetime = field(default_factory=lambda: datetime(2025, 1, 15, 6, 0, 0))

    # --- Request limits ---
    max_advance_units: int = 1440  # one simulated day

    # --- Alarms ---
    alarm_hazard_level: int = 100

    # --- WebSocket stream ---
    stream_interval_s: float = 2.0


DEFAULT = SimConfig()
