from dataclasses import dataclass

@dataclass(slots=True)
class Board:
    """Square grid; cells are addressed (x, y) with 0 <= x, y < dimension."""
    dimension: int
