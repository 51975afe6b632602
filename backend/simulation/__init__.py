"""Simulation module - configuration and the facility time driver."""

from simulation.config import DEFAULT as DEFAULT_SIM_CONFIG
from simulation.config import SimConfig
from simulation.facility import FacilitySimulation

__all__ = [
    "DEFAULT_SIM_CONFIG",
    "FacilitySimulation",
    "SimConfig",
]
