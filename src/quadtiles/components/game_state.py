"""Session state resource describing where a play-through stands."""
from dataclasses import dataclass
from enum import Enum, auto

from quadtiles.constants import SESSION_TIME_BUDGET


class SessionMode(Enum):
    SETUP = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def terminal(self) -> bool:
        return self in (SessionMode.WON, SessionMode.LOST)


@dataclass
class GameState:
    """Singleton component storing the session mode and its clock."""
    mode: SessionMode = SessionMode.SETUP
    time_budget: float = SESSION_TIME_BUDGET
    remaining_time: float = SESSION_TIME_BUDGET
