import random

import pytest

from quadtiles.components.direction import Direction
from quadtiles.components.game_state import SessionMode
from quadtiles.components.level import Level
from quadtiles.engine import GridEngine
from quadtiles.events.bus import (
    EVENT_SESSION_RESET,
    EVENT_SESSION_RESET_REQUEST,
    EVENT_SWIPE,
    EVENT_TILES_MOVED,
)
from quadtiles.systems.board_ops import Displacement
from quadtiles.utils.game_state import get_game_state
from tests.helpers import capture, make_engine


def test_setup_spawns_four_tiles_and_starts_playing():
    engine = GridEngine(Level(dimension=4, positions=((1, 1), (2, 2))), rng=random.Random(5))

    tiles = engine.setup()

    assert engine.mode == SessionMode.PLAYING
    assert sorted(tiles.values()) == [1, 2, 3, 4]
    assert not set(tiles) & engine.obstacles()
    assert engine.obstacles() == {(1, 1), (2, 2)}
    with pytest.raises(RuntimeError):
        engine.setup()


def test_swipe_event_resolves_and_reports_displacements():
    engine = make_engine(4, tiles={(0, 0): 1, (0, 1): 2})
    moved = capture(engine.event_bus, EVENT_TILES_MOVED)

    engine.event_bus.emit(EVENT_SWIPE, direction=Direction.UP)
    engine.event_bus.emit(EVENT_SWIPE, direction="up")

    assert engine.tiles() == {(0, 1): 1, (0, 2): 2}
    assert moved == [
        {
            "direction": Direction.UP,
            "moved": True,
            "displacements": [
                Displacement(number=2, source=(0, 1), target=(0, 2)),
                Displacement(number=1, source=(0, 0), target=(0, 1)),
            ],
        }
    ]


def test_reset_rebuilds_same_level_after_loss():
    level = Level(dimension=4, positions=((3, 3),))
    engine = GridEngine(level, rng=random.Random(11))
    engine.setup()
    engine.tick(engine.remaining_time + 1.0)
    assert engine.mode == SessionMode.LOST
    resets = capture(engine.event_bus, EVENT_SESSION_RESET)

    tiles = engine.reset()

    assert engine.mode == SessionMode.PLAYING
    assert engine.remaining_time == get_game_state(engine.world).time_budget
    assert engine.obstacles() == {(3, 3)}
    assert sorted(tiles.values()) == [1, 2, 3, 4]
    assert engine.win_anchor is None
    assert resets == [{"level": level}]


def test_reset_request_event_restarts_won_session():
    engine = make_engine(4, tiles={(0, 0): 1, (1, 0): 2, (0, 1): 3, (2, 1): 4})
    engine.resolve(Direction.LEFT)
    assert engine.mode == SessionMode.WON

    engine.event_bus.emit(EVENT_SESSION_RESET_REQUEST)

    assert engine.mode == SessionMode.PLAYING
    assert engine.win_anchor is None
    assert len(engine.tiles()) == 4


def test_load_level_switches_board():
    engine = make_engine(4, tiles={(0, 0): 1})
    next_level = Level(dimension=3, positions=((1, 1),))

    engine.load_level(next_level, tiles={(0, 0): 4, (2, 2): 3})

    assert engine.level is next_level
    assert engine.dimension == 3
    assert engine.obstacles() == {(1, 1)}
    assert engine.tiles() == {(0, 0): 4, (2, 2): 3}
    assert engine.mode == SessionMode.PLAYING


def test_step_without_direction_only_ticks():
    engine = make_engine(4, tiles={(0, 0): 1}, time_budget=10.0)

    assert engine.step(2.0) is None
    assert engine.remaining_time == pytest.approx(8.0)
    assert engine.tiles() == {(0, 0): 1}
