from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Swipe directions as unit vectors; y grows upward."""
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    def step(self, position: Tuple[int, int]) -> Tuple[int, int]:
        return position[0] + self.dx, position[1] + self.dy
