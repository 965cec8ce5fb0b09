"""Facade a host drives: one object per play session of a level.

The host owns the loop. It feeds swipes to ``resolve`` (or ``step``) and
frame time to ``tick``, and reads the board back for drawing.
"""
from __future__ import annotations

import random
from typing import Dict, Mapping, Set

from quadtiles.components.direction import Direction
from quadtiles.components.game_state import SessionMode
from quadtiles.components.level import Level
from quadtiles.constants import SESSION_TIME_BUDGET
from quadtiles.events.bus import EVENT_SESSION_RESET, EVENT_SESSION_RESET_REQUEST, EventBus
from quadtiles.systems.board import BoardSystem
from quadtiles.systems.board_ops import (
    MoveResult,
    Position,
    obstacle_positions,
    place_tile,
    remove_tile,
    tile_number_map,
)
from quadtiles.errors import InvalidMove
from quadtiles.systems.move import MoveSystem
from quadtiles.systems.spawn import TileSpawnSystem
from quadtiles.systems.timer import TimerSystem
from quadtiles.systems.win import WinSystem
from quadtiles.utils.game_state import get_game_state, set_session_mode
from quadtiles.world import create_world


class GridEngine:
    def __init__(
        self,
        level: Level,
        *,
        event_bus: EventBus | None = None,
        rng: random.Random | None = None,
        time_budget: float = SESSION_TIME_BUDGET,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world = create_world(self.event_bus, time_budget=time_budget, rng=rng)
        self.board_system = BoardSystem(self.world, self.event_bus, level)
        self.spawn_system = TileSpawnSystem(self.world, self.event_bus, rng=rng)
        self.move_system = MoveSystem(self.world, self.event_bus)
        self.win_system = WinSystem(self.world, self.event_bus)
        self.timer_system = TimerSystem(self.world, self.event_bus)
        self.event_bus.subscribe(EVENT_SESSION_RESET_REQUEST, self._on_reset_request)

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    @property
    def level(self) -> Level:
        return self.board_system.level

    @property
    def mode(self) -> SessionMode:
        return get_game_state(self.world).mode

    @property
    def remaining_time(self) -> float:
        return self.timer_system.remaining

    def setup(self, tiles: Mapping[Position, int] | None = None) -> Dict[Position, int]:
        """Place the tiles and start the clock.

        ``tiles`` fixes the layout instead of spawning at random. Raises
        InsufficientSpawnCells when the level leaves too few free cells, or
        InvalidMove when a fixed layout does not fit the board; either way
        no tiles are left behind and the session stays in SETUP.
        """
        if self.mode != SessionMode.SETUP:
            raise RuntimeError(f"Session already set up (mode {self.mode.name})")
        if tiles is None:
            self.spawn_system.spawn()
        else:
            self._place_layout(tiles)
        self.win_system.clear()
        self.timer_system.restart()
        set_session_mode(self.world, self.event_bus, SessionMode.PLAYING)
        return self.tiles()

    def _place_layout(self, tiles: Mapping[Position, int]) -> None:
        placed: list[Position] = []
        try:
            for position, number in tiles.items():
                place_tile(self.world, position, number)
                placed.append(position)
        except InvalidMove:
            for position in placed:
                remove_tile(self.world, position)
            raise

    def reset(self, tiles: Mapping[Position, int] | None = None) -> Dict[Position, int]:
        """Rebuild the board from the current level and set up again."""
        return self.load_level(self.level, tiles=tiles)

    def load_level(self, level: Level, tiles: Mapping[Position, int] | None = None) -> Dict[Position, int]:
        self.board_system.build(level)
        set_session_mode(self.world, self.event_bus, SessionMode.SETUP)
        layout = self.setup(tiles)
        self.event_bus.emit(EVENT_SESSION_RESET, level=level)
        return layout

    def _on_reset_request(self, sender, **payload) -> None:
        self.reset()

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def resolve(self, direction: Direction) -> MoveResult:
        return self.move_system.resolve(direction)

    def tick(self, dt: float) -> float:
        return self.timer_system.tick(dt)

    def step(self, dt: float, direction: Direction | None = None) -> MoveResult | None:
        """Run one host update: the swipe (if any) first, then the clock.

        A win reached by the swipe therefore beats an expiry in the same step.
        """
        result = self.resolve(direction) if direction is not None else None
        self.tick(dt)
        return result

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_win(self) -> Position | None:
        return self.win_system.find_win()

    @property
    def win_anchor(self) -> Position | None:
        return self.win_system.anchor

    @property
    def dimension(self) -> int:
        return self.board_system.board.dimension

    def tiles(self) -> Dict[Position, int]:
        return tile_number_map(self.world)

    def obstacles(self) -> Set[Position]:
        return obstacle_positions(self.world)
