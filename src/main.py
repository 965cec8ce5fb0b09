"""Entry point for the Quadtiles sliding puzzle.

Sets up the grid engine, level sequence, and Arcade window.
"""
import arcade
from arcade import Window, run, set_background_color, color
from quadtiles.components.direction import Direction
from quadtiles.components.game_state import SessionMode
from quadtiles.components.level import Level
from quadtiles.constants import (
    CELL_SPACING, GRID_PADDING, GRID_SIZE, SLIDE_DURATION,
    WIN_CELEBRATION_DURATION, WINDOW_HEIGHT, WINDOW_WIDTH,
)
from quadtiles.engine import GridEngine
from quadtiles.events.bus import EventBus, EVENT_SESSION_WON, EVENT_TILES_MOVED
from quadtiles.systems.level_flow import LevelFlowSystem
from quadtiles.utils.input_throttle import SwipeThrottle, classify_swipe

LEVELS = [
    Level(dimension=4),
    Level(dimension=4, positions=((1, 1), (2, 2))),
    Level(dimension=5, positions=((0, 2), (2, 0), (2, 4), (4, 2))),
    Level(dimension=6, positions=((1, 1), (1, 4), (4, 1), (4, 4), (2, 3))),
]

TILE_COLORS = {
    1: (214, 92, 92),
    2: (92, 160, 214),
    3: (120, 190, 96),
    4: (226, 180, 70),
}

KEY_DIRECTIONS = {
    arcade.key.UP: Direction.UP,
    arcade.key.DOWN: Direction.DOWN,
    arcade.key.LEFT: Direction.LEFT,
    arcade.key.RIGHT: Direction.RIGHT,
}


class QuadtilesWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Quadtiles")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.level_flow = LevelFlowSystem(self.event_bus, LEVELS)
        self.engine = GridEngine(self.level_flow.current, event_bus=self.event_bus)
        self.throttle = SwipeThrottle()
        self._drag_start: tuple[float, float] | None = None
        self._pending: Direction | None = None
        self.event_bus.subscribe(EVENT_TILES_MOVED, self._on_tiles_moved)
        self.event_bus.subscribe(EVENT_SESSION_WON, self._on_session_won)
        self.engine.setup()
        set_background_color(color.BLACK)

    def _on_tiles_moved(self, sender, **kwargs):
        if kwargs.get('moved'):
            self.throttle.block(SLIDE_DURATION)

    def _on_session_won(self, sender, **kwargs):
        self.throttle.block(WIN_CELEBRATION_DURATION)

    def _board_origin(self) -> tuple[float, float]:
        return (self.width - GRID_SIZE) / 2, (self.height - GRID_SIZE) / 2

    def _cell_size(self) -> float:
        dimension = self.engine.dimension
        inner = GRID_SIZE - 2 * GRID_PADDING
        return (inner - (dimension - 1) * CELL_SPACING) / dimension

    def _cell_origin(self, x: int, y: int) -> tuple[float, float]:
        left, bottom = self._board_origin()
        step = self._cell_size() + CELL_SPACING
        return left + GRID_PADDING + x * step, bottom + GRID_PADDING + y * step

    def on_draw(self):
        self.clear()
        left, bottom = self._board_origin()
        arcade.draw_lbwh_rectangle_filled(left, bottom, GRID_SIZE, GRID_SIZE, (40, 40, 48))
        size = self._cell_size()
        obstacles = self.engine.obstacles()
        tiles = self.engine.tiles()
        for x in range(self.engine.dimension):
            for y in range(self.engine.dimension):
                cx, cy = self._cell_origin(x, y)
                fill = (20, 20, 24) if (x, y) in obstacles else (70, 70, 80)
                arcade.draw_lbwh_rectangle_filled(cx, cy, size, size, fill)
                number = tiles.get((x, y))
                if number is None:
                    continue
                arcade.draw_lbwh_rectangle_filled(cx + 4, cy + 4, size - 8, size - 8, TILE_COLORS[number])
                arcade.draw_text(
                    str(number), cx + size / 2, cy + size / 2, color.WHITE,
                    font_size=size / 3, anchor_x="center", anchor_y="center",
                )
        mode = self.engine.mode
        if mode == SessionMode.PLAYING:
            arcade.draw_text(
                str(int(self.engine.remaining_time)), self.width / 2, self.height - 40,
                color.WHITE, font_size=24, anchor_x="center",
            )
        elif mode in (SessionMode.WON, SessionMode.LOST):
            message = "Solved! N for next level" if mode == SessionMode.WON else "Time's up! R to retry"
            arcade.draw_text(
                message, self.width / 2, self.height - 40,
                color.WHITE, font_size=24, anchor_x="center",
            )

    def on_update(self, delta_time: float):
        direction = self._pending
        self._pending = None
        self.engine.step(delta_time, direction)

    def _queue(self, direction: Direction | None):
        if direction is None or self._pending is not None:
            return
        if not self.throttle.allow():
            return
        self._pending = direction

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in KEY_DIRECTIONS:
            self._queue(KEY_DIRECTIONS[symbol])
        elif symbol == arcade.key.R:
            self._restart(self.level_flow.current)
        elif symbol == arcade.key.N:
            self._restart(self.level_flow.next_level())
        elif symbol == arcade.key.ESCAPE:
            self._restart(self.level_flow.home())

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self._drag_start = (x, y)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        start = self._drag_start
        self._drag_start = None
        if start is None:
            return
        self._queue(classify_swipe(start, (x, y)))

    def _restart(self, level: Level):
        self.throttle.reset()
        self._pending = None
        self.engine.load_level(level)


def main():
    window = QuadtilesWindow()
    run()

if __name__ == "__main__":
    main()
