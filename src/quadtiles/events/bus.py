from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float
EVENT_TIMER_CHANGED = "timer_changed"              # payload: remaining=float, budget=float


# ============================================================================
# INPUT
# ============================================================================
EVENT_SWIPE = "swipe"                              # payload: direction=Direction


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_OBSTACLE_SKIPPED = "obstacle_skipped"        # payload: position=(x,y), reason=str
EVENT_TILES_SPAWNED = "tiles_spawned"              # payload: tiles=[(number, (x,y)), ...]
EVENT_SPAWN_FAILED = "spawn_failed"                # payload: eligible=int, required=int
EVENT_TILES_MOVED = "tiles_moved"                  # payload: direction=Direction, moved=bool, displacements=list[Displacement]


# ============================================================================
# SESSION FLOW
# ============================================================================
EVENT_SESSION_MODE_CHANGED = "session_mode_changed"  # payload: previous_mode=SessionMode|None, new_mode=SessionMode
EVENT_SESSION_WON = "session_won"                    # payload: anchor=(x,y)
EVENT_SESSION_LOST = "session_lost"                  # payload: remaining=float
EVENT_SESSION_RESET_REQUEST = "session_reset_request"  # payload: None
EVENT_SESSION_RESET = "session_reset"                # payload: level=Level
EVENT_LEVEL_SELECTED = "level_selected"              # payload: index=int, level=Level
