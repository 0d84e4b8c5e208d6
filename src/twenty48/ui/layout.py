from twenty48.components.position import Position
from twenty48.constants import BOARD_SIZE, BOTTOM_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT

MIN_TILE_SIZE = 20


def compute_board_geometry(window_width: int, window_height: int, size: int = BOARD_SIZE):
    """Return (tile_size, start_x, start_y) for a square board of ``size`` cells.

    The board is centred horizontally and sits ``BOTTOM_MARGIN`` above the
    window bottom; it never exceeds the configured share of the window.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w, max_board_h) / size)
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = size * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_origin(position: Position, tile_size: int, start_x: float, start_y: float, size: int = BOARD_SIZE):
    """Bottom-left corner of a cell. Row 0 is the top row on screen."""
    x = start_x + position.col * tile_size
    y = start_y + (size - 1 - position.row) * tile_size
    return x, y
