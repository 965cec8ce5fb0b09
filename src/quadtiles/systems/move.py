from __future__ import annotations

from esper import World

from quadtiles.components.direction import Direction
from quadtiles.components.game_state import SessionMode
from quadtiles.events.bus import EventBus, EVENT_SWIPE, EVENT_TILES_MOVED
from quadtiles.systems.board_ops import (
    MoveResult,
    apply_displacements,
    board_dimension,
    compute_slide_moves,
    obstacle_positions,
    tile_number_map,
)
from quadtiles.utils.game_state import get_game_state


class MoveSystem:
    """Resolves swipes into one-cell shifts of every tile that can move."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SWIPE, self.on_swipe)

    def on_swipe(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if not isinstance(direction, Direction):
            return
        self.resolve(direction)

    def resolve(self, direction: Direction) -> MoveResult:
        tiles = tile_number_map(self.world)
        if get_game_state(self.world).mode != SessionMode.PLAYING:
            return MoveResult(moved=False, displacements=[], tiles=tiles)
        moves, layout = compute_slide_moves(
            board_dimension(self.world),
            obstacle_positions(self.world),
            tiles,
            direction,
        )
        # The layout is computed in full before any entity is touched.
        apply_displacements(self.world, moves)
        result = MoveResult(moved=bool(moves), displacements=moves, tiles=layout)
        self.event_bus.emit(
            EVENT_TILES_MOVED,
            direction=direction,
            moved=result.moved,
            displacements=list(moves),
        )
        return result
