from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from esper import World

from quadtiles.components.board import Board
from quadtiles.components.board_position import BoardPosition
from quadtiles.components.direction import Direction
from quadtiles.components.obstacle import Obstacle
from quadtiles.components.tile import Tile
from quadtiles.constants import TILE_NUMBERS
from quadtiles.errors import InvalidLevelPosition, InvalidMove

Position = Tuple[int, int]


@dataclass(slots=True)
class Displacement:
    number: int
    source: Position
    target: Position


@dataclass(slots=True)
class MoveResult:
    moved: bool
    displacements: List[Displacement]
    tiles: Dict[Position, int]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def board_dimension(world: World) -> int:
    return get_board(world).dimension


def in_bounds(dimension: int, position: Position) -> bool:
    x, y = position
    return 0 <= x < dimension and 0 <= y < dimension


def validate_position(position: Position, dimension: int) -> Position:
    if not in_bounds(dimension, position):
        raise InvalidLevelPosition(position, dimension)
    return position


def get_entity_at(world: World, position: Position) -> int | None:
    x, y = position
    for entity, pos in world.get_component(BoardPosition):
        if pos.x == x and pos.y == y:
            return entity
    return None


def is_obstacle(world: World, position: Position) -> bool:
    entity = get_entity_at(world, position)
    return entity is not None and world.has_component(entity, Obstacle)


def tile_at(world: World, position: Position) -> int | None:
    entity = get_entity_at(world, position)
    if entity is None:
        return None
    try:
        return world.component_for_entity(entity, Tile).number
    except KeyError:
        return None


def obstacle_positions(world: World) -> Set[Position]:
    return {pos.as_tuple() for _, (pos, _) in world.get_components(BoardPosition, Obstacle)}


def tile_number_map(world: World) -> Dict[Position, int]:
    """Return mapping of occupied positions to tile numbers."""
    return {pos.as_tuple(): tile.number for _, (pos, tile) in world.get_components(BoardPosition, Tile)}


def place_obstacle(world: World, position: Position) -> int:
    dimension = board_dimension(world)
    if not in_bounds(dimension, position):
        raise InvalidMove(f"Obstacle position {position} is out of bounds")
    if get_entity_at(world, position) is not None:
        raise InvalidMove(f"Cell {position} is already occupied")
    return world.create_entity(BoardPosition(*position), Obstacle())


def place_tile(world: World, position: Position, number: int) -> int:
    dimension = board_dimension(world)
    if number not in TILE_NUMBERS:
        raise InvalidMove(f"Tile number must be one of {TILE_NUMBERS}, got {number}")
    if not in_bounds(dimension, position):
        raise InvalidMove(f"Tile position {position} is out of bounds")
    if is_obstacle(world, position):
        raise InvalidMove(f"Cell {position} holds an obstacle")
    if get_entity_at(world, position) is not None:
        raise InvalidMove(f"Cell {position} already holds a tile")
    if number in tile_number_map(world).values():
        raise InvalidMove(f"Tile {number} is already on the board")
    return world.create_entity(BoardPosition(*position), Tile(number))


def remove_tile(world: World, position: Position) -> int:
    entity = get_entity_at(world, position)
    if entity is None or not world.has_component(entity, Tile):
        raise InvalidMove(f"No tile at {position}")
    number = world.component_for_entity(entity, Tile).number
    world.delete_entity(entity, immediate=True)
    return number


def move_tile(world: World, source: Position, target: Position) -> None:
    entity = get_entity_at(world, source)
    if entity is None or not world.has_component(entity, Tile):
        raise InvalidMove(f"No tile at {source}")
    if not in_bounds(board_dimension(world), target):
        raise InvalidMove(f"Target {target} is out of bounds")
    occupant = get_entity_at(world, target)
    if occupant is not None:
        if world.has_component(occupant, Obstacle):
            raise InvalidMove(f"Target {target} holds an obstacle")
        raise InvalidMove(f"Target {target} already holds a tile")
    position = world.component_for_entity(entity, BoardPosition)
    position.x, position.y = target


def clear_board_pieces(world: World) -> None:
    """Delete every tile and obstacle entity, leaving the Board itself."""
    for entity, _ in list(world.get_component(BoardPosition)):
        world.delete_entity(entity, immediate=True)


def _axis_order(dimension: int, delta: int) -> range:
    # Cells nearest the edge being moved toward go first.
    if delta > 0:
        return range(dimension - 1, -1, -1)
    return range(dimension)


def compute_slide_moves(
    dimension: int,
    obstacles: Set[Position],
    tiles: Dict[Position, int],
    direction: Direction,
) -> Tuple[List[Displacement], Dict[Position, int]]:
    """Shift every tile at most one cell toward direction.

    Leading tiles are processed first so a trailing tile can step into a cell
    vacated earlier in the same pass. Returns the displacements in processing
    order and the resulting layout; the input mapping is not modified.
    """
    layout = dict(tiles)
    moves: List[Displacement] = []
    for x in _axis_order(dimension, direction.dx):
        for y in _axis_order(dimension, direction.dy):
            number = layout.get((x, y))
            if number is None:
                continue
            target = direction.step((x, y))
            if not in_bounds(dimension, target) or target in obstacles or target in layout:
                continue
            del layout[(x, y)]
            layout[target] = number
            moves.append(Displacement(number=number, source=(x, y), target=target))
    return moves, layout


def apply_displacements(world: World, moves: Iterable[Displacement]) -> None:
    for move in moves:
        move_tile(world, move.source, move.target)


def find_win_anchor(tiles: Dict[Position, int], dimension: int) -> Position | None:
    """Return the anchor of the first block reading 1,2 on row y and 3,4 on row y+1.

    Anchors are scanned x ascending, then y ascending within each column.
    """
    for x in range(dimension - 1):
        for y in range(dimension - 1):
            if (
                tiles.get((x, y)) == 1
                and tiles.get((x + 1, y)) == 2
                and tiles.get((x, y + 1)) == 3
                and tiles.get((x + 1, y + 1)) == 4
            ):
                return x, y
    return None


def eligible_spawn_cells(dimension: int, obstacles: Set[Position], tiles: Dict[Position, int]) -> List[Position]:
    return [
        (x, y)
        for x in range(dimension)
        for y in range(dimension)
        if (x, y) not in obstacles and (x, y) not in tiles
    ]


def choose_spawn_cells(cells: Sequence[Position], rng: random.Random, count: int) -> List[Position]:
    """Draw count distinct cells; anything with randrange(n) works as rng."""
    pool = list(cells)
    chosen: List[Position] = []
    for _ in range(min(count, len(pool))):
        chosen.append(pool.pop(rng.randrange(len(pool))))
    return chosen
