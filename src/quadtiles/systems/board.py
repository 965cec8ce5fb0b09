from typing import List

from esper import World

from quadtiles.components.board import Board
from quadtiles.components.level import Level
from quadtiles.errors import InvalidLevelPosition, InvalidMove
from quadtiles.events.bus import EventBus, EVENT_OBSTACLE_SKIPPED
from quadtiles.systems.board_ops import (
    Position,
    clear_board_pieces,
    place_obstacle,
    validate_position,
)


class BoardSystem:
    """Owns the Board entity and lays out a level's obstacles on it."""

    def __init__(self, world: World, event_bus: EventBus, level: Level):
        self.world = world
        self.event_bus = event_bus
        self.board_entity = self.world.create_entity(Board(dimension=level.dimension))
        self.level = level
        self.build(level)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def build(self, level: Level) -> List[Position]:
        """Discard tiles and obstacles, then place the level's obstacles.

        Out-of-range and repeated positions are skipped. Returns the
        obstacle positions actually placed.
        """
        clear_board_pieces(self.world)
        self.level = level
        self.board.dimension = level.dimension
        placed: List[Position] = []
        for position in level.positions:
            try:
                validate_position(position, level.dimension)
            except InvalidLevelPosition:
                self.event_bus.emit(EVENT_OBSTACLE_SKIPPED, position=position, reason="out_of_bounds")
                continue
            try:
                place_obstacle(self.world, position)
            except InvalidMove:
                self.event_bus.emit(EVENT_OBSTACLE_SKIPPED, position=position, reason="duplicate")
                continue
            placed.append(position)
        return placed
