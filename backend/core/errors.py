"""Facility error types.

Malformed construction arguments raise the built-in ``ValueError``. Every
structural constraint of the containment tree has its own exception so that
callers can tell them apart.
"""


class FacilityError(Exception):
    """Base exception for constraint violations in the facility model."""


class DuplicateFloorError(FacilityError):
    """A floor with the same number already exists in the building."""


class DuplicateRoomError(FacilityError):
    """A room with the same number already exists on the floor."""


class DuplicateSensorError(FacilityError):
    """A sensor of the same kind is already installed in the room."""


class NoFloorBelowError(FacilityError):
    """The floor directly below does not exist yet."""


class FloorTooSmallError(FacilityError):
    """The floor directly below is too small to support the new floor."""


class InsufficientSpaceError(FacilityError):
    """Not enough free area on the floor for the room."""


class FireDrillError(FacilityError):
    """There are no rooms to evacuate."""
