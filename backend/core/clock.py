"""Simulated clock that advances every registered timed item in lockstep."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class TimedItem(Protocol):
    """Anything whose state evolves with simulated time."""

    def advance_one_unit(self) -> None: ...


class ClockRegistry:
    """Ordered collection of timed items.

    Items are registered once and never removed. ``advance_one_unit`` ticks
    them in registration order.
    """

    def __init__(self) -> None:
        self._items: list[TimedItem] = []

    @property
    def items(self) -> tuple[TimedItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def register(self, item: TimedItem) -> None:
        self._items.append(item)
        logger.debug("Registered %s (%d timed items)", type(item).__name__, len(self._items))

    def advance_one_unit(self) -> None:
        for item in self._items:
            item.advance_one_unit()


# Shared by callers that do not inject their own registry.
DEFAULT_CLOCK = ClockRegistry()
