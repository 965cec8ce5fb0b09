from __future__ import annotations

from esper import World

from quadtiles.components.game_state import SessionMode
from quadtiles.events.bus import EventBus, EVENT_SESSION_LOST, EVENT_TICK, EVENT_TIMER_CHANGED
from quadtiles.utils.game_state import get_game_state, set_session_mode


class TimerSystem:
    """Counts the session clock down and ends a still-running session as lost."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            return
        self.tick(dt)

    @property
    def remaining(self) -> float:
        return get_game_state(self.world).remaining_time

    def tick(self, dt: float) -> float:
        state = get_game_state(self.world)
        if state.mode != SessionMode.PLAYING:
            return state.remaining_time
        state.remaining_time -= dt
        self.event_bus.emit(EVENT_TIMER_CHANGED, remaining=state.remaining_time, budget=state.time_budget)
        if state.remaining_time < 0:
            if set_session_mode(self.world, self.event_bus, SessionMode.LOST):
                self.event_bus.emit(EVENT_SESSION_LOST, remaining=state.remaining_time)
        return state.remaining_time

    def restart(self, time_budget: float | None = None) -> None:
        state = get_game_state(self.world)
        if time_budget is not None:
            state.time_budget = float(time_budget)
        state.remaining_time = state.time_budget
        self.event_bus.emit(EVENT_TIMER_CHANGED, remaining=state.remaining_time, budget=state.time_budget)
