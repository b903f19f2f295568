from __future__ import annotations

from typing import Any, Dict, Tuple

from ecs.constants import LABEL_FONT_SIZE
from ecs.rendering.context import RenderContext
from ecs.ui.layout import tile_rect

BoardPos = Tuple[int, int]


class BoardRenderer:
    """Draws the board background, one rectangle per cell, and value labels."""

    def __init__(self, font_size: int = LABEL_FONT_SIZE):
        self._font_size = font_size

    def layout(self, ctx: RenderContext) -> Dict[BoardPos, Dict[str, Any]]:
        palette = ctx.palette
        tiles: Dict[BoardPos, Dict[str, Any]] = {}
        for row in range(ctx.rows):
            for col in range(ctx.cols):
                value = ctx.cells[row][col]
                left, bottom, width, height = tile_rect(
                    row, col, ctx.rows, ctx.tile_size, ctx.board_left, ctx.board_bottom
                )
                tiles[(row, col)] = {
                    "value": value,
                    "rect": (left, bottom, width, height),
                    "center": (left + width / 2, bottom + height / 2),
                    "color": palette.background_for(value),
                    "label": palette.label_for(value),
                    "text_color": palette.text_for(value),
                }
        return tiles

    def render(self, arcade, ctx: RenderContext, tiles: Dict[BoardPos, Dict[str, Any]]) -> None:
        arcade.draw_lbwh_rectangle_filled(
            ctx.board_left, ctx.board_bottom, ctx.board_width, ctx.board_height, ctx.palette.board
        )
        for entry in tiles.values():
            left, bottom, width, height = entry["rect"]
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, entry["color"])
            if not entry["label"]:
                continue
            cx, cy = entry["center"]
            arcade.draw_text(
                entry["label"],
                cx,
                cy,
                entry["text_color"],
                self._font_size,
                bold=True,
                anchor_x="center",
                anchor_y="center",
            )
