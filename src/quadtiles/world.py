import random

from esper import World
from .events.bus import EventBus
from quadtiles.components.game_state import GameState, SessionMode
from quadtiles.constants import SESSION_TIME_BUDGET


def create_world(
    event_bus: EventBus,
    *,
    time_budget: float = SESSION_TIME_BUDGET,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the session state resource; systems look it up by component.
    world.create_entity(
        GameState(
            mode=SessionMode.SETUP,
            time_budget=float(time_budget),
            remaining_time=float(time_budget),
        )
    )
    return world
