"""Level sequencing for hosts that offer more than one level."""
from __future__ import annotations

from typing import Sequence

from quadtiles.components.level import Level
from quadtiles.events.bus import EVENT_LEVEL_SELECTED, EventBus


class LevelFlowSystem:
    """Tracks which level is current; wraps back to the first after the last."""

    def __init__(self, event_bus: EventBus, levels: Sequence[Level], *, start_index: int = 0) -> None:
        if not levels:
            raise ValueError("LevelFlowSystem needs at least one level")
        self.event_bus = event_bus
        self._levels: tuple[Level, ...] = tuple(levels)
        self._index = 0
        self.select(start_index)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Level:
        return self._levels[self._index]

    @property
    def levels(self) -> tuple[Level, ...]:
        return self._levels

    def select(self, index: int) -> Level:
        if not 0 <= index < len(self._levels):
            raise IndexError(f"Level index {index} out of range for {len(self._levels)} levels")
        self._index = index
        self.event_bus.emit(EVENT_LEVEL_SELECTED, index=index, level=self.current)
        return self.current

    def next_level(self) -> Level:
        return self.select((self._index + 1) % len(self._levels))

    def home(self) -> Level:
        return self.select(0)
