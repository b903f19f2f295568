from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from esper import World

from ecs.components.tile_palette import TilePalette
from ecs.systems.board_ops import get_board, get_palette
from ecs.ui.layout import compute_board_geometry


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    tile_size: int
    board_left: float
    board_bottom: float
    rows: int
    cols: int
    cells: Tuple[Tuple[int, ...], ...]
    palette: TilePalette

    @property
    def board_width(self) -> float:
        return self.tile_size * self.cols

    @property
    def board_height(self) -> float:
        return self.tile_size * self.rows


def build_render_context(world: World, window_width: int, window_height: int) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    board = get_board(world)
    tile_size, board_left, board_bottom = compute_board_geometry(
        window_width, window_height, board.rows, board.cols
    )
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        tile_size=tile_size,
        board_left=board_left,
        board_bottom=board_bottom,
        rows=board.rows,
        cols=board.cols,
        cells=board.snapshot(),
        palette=get_palette(world),
    )
