"""Error kinds raised by the board and spawner."""
from __future__ import annotations

from typing import Tuple


class InvalidMove(ValueError):
    """A board primitive was asked for a mutation the board cannot hold."""


class InsufficientSpawnCells(RuntimeError):
    def __init__(self, eligible: int, required: int):
        super().__init__(f"Need {required} empty cells to spawn tiles, found {eligible}")
        self.eligible = eligible
        self.required = required


class InvalidLevelPosition(ValueError):
    def __init__(self, position: Tuple[int, int], dimension: int):
        super().__init__(f"Position {position} is outside a {dimension}x{dimension} board")
        self.position = position
        self.dimension = dimension
