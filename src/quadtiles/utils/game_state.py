from __future__ import annotations

from esper import World

from quadtiles.components.game_state import GameState, SessionMode
from quadtiles.events.bus import EVENT_SESSION_MODE_CHANGED, EventBus


def get_game_state(world: World) -> GameState:
    """Return the shared GameState component, creating it if absent."""
    for _, state in world.get_component(GameState):
        return state
    world.create_entity(GameState())
    return next(state for _, state in world.get_component(GameState))


def set_session_mode(world: World, event_bus: EventBus, mode: SessionMode) -> bool:
    """Update the session mode and emit a change event when it differs.

    Terminal modes are sticky; only SETUP may leave them (a reset).
    Returns True when the mode changed.
    """

    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return False
    if previous_mode.terminal and mode != SessionMode.SETUP:
        return False
    state.mode = mode
    event_bus.emit(
        EVENT_SESSION_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
    return True
