"""FireDrill abstract base class shared by the containment levels."""

from abc import ABC, abstractmethod

from core.models import RoomType


class FireDrill(ABC):
    """Every level above a room can start and cancel fire drills."""

    @abstractmethod
    def fire_drill(self, room_type: RoomType | None = None) -> None:
        """Start a fire drill in rooms of ``room_type``, or in every room if None."""

    @abstractmethod
    def cancel_fire_drill(self) -> None:
        """Cancel any ongoing fire drill, regardless of room type."""
