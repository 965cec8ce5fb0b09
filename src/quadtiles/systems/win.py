from __future__ import annotations

from esper import World

from quadtiles.components.game_state import SessionMode
from quadtiles.events.bus import EventBus, EVENT_SESSION_WON, EVENT_TILES_MOVED
from quadtiles.systems.board_ops import Position, board_dimension, find_win_anchor, tile_number_map
from quadtiles.utils.game_state import get_game_state, set_session_mode


class WinSystem:
    """Ends the session as won once tiles 1-4 form the 2x2 block."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.anchor: Position | None = None
        self.event_bus.subscribe(EVENT_TILES_MOVED, self._on_tiles_moved)

    def _on_tiles_moved(self, sender, **payload) -> None:
        if not payload.get("moved"):
            return
        self.check()

    def find_win(self) -> Position | None:
        return find_win_anchor(tile_number_map(self.world), board_dimension(self.world))

    def check(self) -> Position | None:
        if get_game_state(self.world).mode != SessionMode.PLAYING:
            return None
        anchor = self.find_win()
        if anchor is None:
            return None
        self.anchor = anchor
        set_session_mode(self.world, self.event_bus, SessionMode.WON)
        self.event_bus.emit(EVENT_SESSION_WON, anchor=anchor)
        return anchor

    def clear(self) -> None:
        self.anchor = None
