from __future__ import annotations

from typing import Iterable, Mapping, Sequence, Tuple

from esper import World

from quadtiles.components.level import Level
from quadtiles.engine import GridEngine
from quadtiles.events.bus import EventBus
from quadtiles.systems.board import BoardSystem
from quadtiles.world import create_world

Position = Tuple[int, int]


class SequenceRng:
    """Stands in for random.Random where only randrange is used."""

    def __init__(self, picks: Sequence[int]):
        self._picks = list(picks)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = self._picks.pop(0)
        assert 0 <= value < stop, f"pick {value} outside range({stop})"
        return value


def make_board_world(dimension: int = 4, obstacles: Iterable[Position] = ()) -> tuple[World, EventBus, BoardSystem]:
    bus = EventBus()
    world = create_world(bus)
    board = BoardSystem(world, bus, Level(dimension=dimension, positions=tuple(obstacles)))
    return world, bus, board


def make_engine(
    dimension: int = 4,
    obstacles: Iterable[Position] = (),
    tiles: Mapping[Position, int] | None = None,
    **kwargs,
) -> GridEngine:
    """Build an engine already in PLAYING with a fixed tile layout."""
    engine = GridEngine(Level(dimension=dimension, positions=tuple(obstacles)), **kwargs)
    engine.setup(tiles if tiles is not None else {})
    return engine


def capture(bus: EventBus, name: str) -> list[dict]:
    received: list[dict] = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received
