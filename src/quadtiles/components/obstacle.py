from dataclasses import dataclass

@dataclass(slots=True)
class Obstacle:
    """Marker for a fixed cell no tile may enter."""
