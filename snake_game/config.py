import os

# Timing
TICK_DELAY_MS = 100
FPS = 60

# Board geometry
CELL_SIZE = 30
INITIAL_LENGTH = 4
# Board side in cells when sized from the display
MIN_BOARD_CELLS = 5
MAX_BOARD_CELLS = 30
# Fraction of the display height the board may use
BOARD_HEIGHT_RATIO = 0.75

HEADER_HEIGHT = 48

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 50, 50)
YELLOW = (255, 255, 0)
GREEN = (0, 255, 0)
DARK_GREY = (50, 50, 50)
SNAKE_BODY_COLOR = (255, 170, 0)
SNAKE_HEAD_COLOR = (187, 187, 187)
GRID_LINE_COLOR = (68, 68, 68)
BACKGROUND_COLOR = (17, 17, 17)
HEADER_COLOR = (10, 10, 10)
OVERLAY_COLOR = (0, 0, 0, 160)

# Audio
EAT_VOLUME = 0.8

# High score persistence
HIGHSCORE_FILE = os.path.join(os.path.expanduser("~"), ".grid_snake_highscore.json")

WINDOW_CAPTION = "Snake"
