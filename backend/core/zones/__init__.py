"""Containment hierarchy: building -> floors -> rooms."""

from core.zones.base import FireDrill
from core.zones.building import Building
from core.zones.floor import Floor
from core.zones.room import Room

__all__ = [
    "Building",
    "FireDrill",
    "Floor",
    "Room",
]
