from dataclasses import dataclass, field
from typing import List, Tuple

from ecs.constants import BOARD_COLOR, EMPTY_TILE_COLOR, TEXT_COLOR, TILE_COLORS

Color = Tuple[int, int, int]


@dataclass(slots=True)
class TilePalette:
    """Canonical tile colours stored on a single entity.

    Colours are indexed by log2 of the tile value; anything past the table
    shares the last colour.
    """
    tile_colors: List[Color] = field(default_factory=lambda: list(TILE_COLORS))
    board: Color = BOARD_COLOR
    empty: Color = EMPTY_TILE_COLOR
    text: Color = TEXT_COLOR

    def __post_init__(self) -> None:
        if not self.tile_colors:
            raise ValueError("TilePalette requires at least one tile colour")

    def background_for(self, value: int) -> Color:
        if value <= 0:
            return self.empty
        index = min(value.bit_length() - 1, len(self.tile_colors) - 1)
        return self.tile_colors[index]

    def text_for(self, value: int) -> Color:
        return self.text

    @staticmethod
    def label_for(value: int) -> str:
        return "" if value == 0 else str(value)
