DEFAULT_BOARD_SIZE = 5
BOARD_SIZE_CHOICES = (4, 5, 6, 7, 8, 9, 10)

# Inter-step delay in milliseconds. 0 runs as fast as the host loop allows.
DEFAULT_SPEED_MS = 500
SPEED_CHOICES_MS = (1000, 500, 250, 100, 25, 0)

# A freshly found solution stays on screen this long before the search moves on.
SOLUTION_HOLD_MS = 1000

# Upper bound on how long a paused checkpoint sleeps before re-checking its flags (seconds).
PAUSE_POLL_INTERVAL = 0.05

# Cap on engine events pulled in a single host tick when the delay is 0.
MAX_STEPS_PER_TICK = 400

# Window geometry
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 720
WINDOW_TITLE = "N-Queens Backtracking"

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.55
BOARD_MAX_HEIGHT_PCT = 0.75
BOTTOM_MARGIN = 90
TOP_MARGIN = 60
MIN_TILE_SIZE = 16

# Control bar sits below the board.
CONTROL_BUTTON_WIDTH = 120.0
CONTROL_BUTTON_HEIGHT = 44.0
CONTROL_BUTTON_GAP = 14.0

# Solution thumbnails fill the panel to the right of the board.
SIDE_GAP = 30
THUMBNAIL_CELL = 8
THUMBNAIL_GAP = 10

# Cell colours
LIGHT_CELL = (240, 217, 181)
DARK_CELL = (181, 136, 99)
CURRENT_TINT = (80, 140, 230)
SAFE_TINT = (70, 180, 90)
UNSAFE_TINT = (210, 60, 60)
QUEEN_COLOR = (25, 25, 25)
QUEEN_GLYPH = "♛"
