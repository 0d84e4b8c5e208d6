BOARD_SIZE = 4
INITIAL_TILE_COUNT = 2
# Percent chance that a spawned tile is a 2 (otherwise 4).
NEW_TILE_PROBABILITY_2 = 90
MINIMUM_SWIPE_DISTANCE = 30

# Storage keys shared by the persistence systems.
GAME_STATE_KEY = "gameState"
HIGH_SCORE_KEY = "highScore"

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 720
WINDOW_TITLE = "2048"
TILE_SIZE = 120
TILE_PADDING = 10
BOTTOM_MARGIN = 20

# Board maximum footprint relative to window (percentage of window width/height).
# Leaves room above the board for the score header.
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.78

# Seconds a merged tile keeps its highlight pulse.
MERGE_PULSE_DURATION = 0.15

BACKGROUND_COLOR = (250, 248, 239)
BOARD_COLOR = (187, 173, 160)
EMPTY_TILE_COLOR = (205, 193, 180)
DARK_TEXT_COLOR = (119, 110, 101)
LIGHT_TEXT_COLOR = (249, 246, 242)
TILE_COLORS = {
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}
# Anything above 2048 shares one color.
SUPER_TILE_COLOR = (60, 58, 50)
