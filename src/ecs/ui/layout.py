from typing import Tuple

from ecs.constants import BOARD_SIZE, SPACING, TILE_PADDING, TILE_SIZE

Rect = Tuple[float, float, float, float]


def window_size(rows: int = BOARD_SIZE, cols: int = BOARD_SIZE) -> Tuple[int, int]:
    """Window (width, height) that fits the board plus SPACING on every side."""
    return cols * TILE_SIZE + 2 * SPACING, rows * TILE_SIZE + 2 * SPACING


def compute_board_geometry(window_width: int, window_height: int, rows: int = BOARD_SIZE, cols: int = BOARD_SIZE):
    """Return (tile_size, start_x, start_y) with the board centred in the window.

    start_y is the bottom edge of the board; arcade's y axis points up.
    """
    tile_size = TILE_SIZE
    start_x = (window_width - cols * tile_size) / 2
    start_y = (window_height - rows * tile_size) / 2
    return tile_size, start_x, start_y


def tile_rect(row: int, col: int, rows: int, tile_size: float, start_x: float, start_y: float) -> Rect:
    """(left, bottom, width, height) of a tile; row 0 sits at the top of the board."""
    size = max(tile_size - 2 * TILE_PADDING, 1)
    left = start_x + col * tile_size + TILE_PADDING
    bottom = start_y + (rows - 1 - row) * tile_size + TILE_PADDING
    return left, bottom, size, size
