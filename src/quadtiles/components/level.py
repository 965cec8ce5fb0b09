"""Level descriptor handed to the engine by whatever loads levels."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Tuple

from quadtiles.constants import MAX_DIMENSION, MIN_DIMENSION

Position = Tuple[int, int]


@dataclass(frozen=True)
class Level:
    """Board size plus obstacle coordinates.

    Positions are kept as given; out-of-range entries are dropped later when
    the board is built, not here.
    """
    dimension: int
    positions: Tuple[Position, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not MIN_DIMENSION <= int(self.dimension) <= MAX_DIMENSION:
            raise ValueError(
                f"Level dimension must be between {MIN_DIMENSION} and {MAX_DIMENSION}, got {self.dimension}"
            )
        object.__setattr__(self, "dimension", int(self.dimension))
        object.__setattr__(self, "positions", _normalize_positions(self.positions))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Level":
        if "dimension" not in data:
            raise ValueError("Level definition is missing 'dimension'")
        positions = data.get("obstaclePositions", data.get("positions", ()))
        return cls(dimension=data["dimension"], positions=positions or ())


def _normalize_positions(raw: Iterable[Any]) -> Tuple[Position, ...]:
    normalized = []
    for entry in raw:
        if isinstance(entry, Mapping):
            x, y = entry.get("x"), entry.get("y")
        else:
            x, y = entry
        normalized.append((int(x), int(y)))
    return tuple(normalized)
