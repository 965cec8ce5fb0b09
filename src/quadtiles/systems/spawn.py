import random
from typing import List, Tuple

from esper import World

from quadtiles.constants import TILE_NUMBERS
from quadtiles.errors import InsufficientSpawnCells, InvalidMove
from quadtiles.events.bus import EventBus, EVENT_SPAWN_FAILED, EVENT_TILES_SPAWNED
from quadtiles.systems.board_ops import (
    Position,
    board_dimension,
    choose_spawn_cells,
    eligible_spawn_cells,
    obstacle_positions,
    place_tile,
    tile_number_map,
)


class TileSpawnSystem:
    """Places the numbered tiles on empty cells at session setup."""

    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()

    def spawn(self) -> List[Tuple[int, Position]]:
        """Place tiles 1..4 on distinct random cells, in draw order.

        Nothing is placed unless every tile fits.
        """
        tiles = tile_number_map(self.world)
        if tiles:
            raise InvalidMove("Tiles can only be spawned on a board without tiles")
        cells = eligible_spawn_cells(board_dimension(self.world), obstacle_positions(self.world), tiles)
        required = len(TILE_NUMBERS)
        if len(cells) < required:
            self.event_bus.emit(EVENT_SPAWN_FAILED, eligible=len(cells), required=required)
            raise InsufficientSpawnCells(len(cells), required)
        chosen = choose_spawn_cells(cells, self._rng, required)
        spawned = list(zip(TILE_NUMBERS, chosen))
        for number, position in spawned:
            place_tile(self.world, position, number)
        self.event_bus.emit(EVENT_TILES_SPAWNED, tiles=spawned)
        return spawned
