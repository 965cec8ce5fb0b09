from dataclasses import dataclass

@dataclass(slots=True)
class Tile:
    """Movable numbered tile. Numbers are unique across the board."""
    number: int
