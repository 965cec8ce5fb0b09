MIN_DIMENSION = 2
MAX_DIMENSION = 8
TILE_NUMBERS = (1, 2, 3, 4)

# Seconds a session may run before it is lost.
SESSION_TIME_BUDGET = 45.0

# Drags shorter than this (in window pixels) are not swipes.
MIN_SWIPE_DISTANCE = 50.0
# Input stays blocked this long after a move so the host can present it.
SLIDE_DURATION = 0.15
WIN_CELEBRATION_DURATION = 1.5

# Host window geometry. The grid is square and sized independently of dimension.
GRID_SIZE = 480
CELL_SPACING = 5
GRID_PADDING = 10
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
