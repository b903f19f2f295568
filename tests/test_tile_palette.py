from ecs.components.tile_palette import TilePalette
from ecs.constants import EMPTY_TILE_COLOR, TEXT_COLOR, TILE_COLORS
from ecs.systems.board_ops import get_palette


def test_background_indexed_by_log2():
    palette = TilePalette()
    assert palette.background_for(0) == EMPTY_TILE_COLOR
    assert palette.background_for(1) == TILE_COLORS[0]
    assert palette.background_for(2) == TILE_COLORS[1]
    assert palette.background_for(1024) == TILE_COLORS[10]
    assert palette.background_for(2048) == TILE_COLORS[11]


def test_background_clamps_past_table():
    palette = TilePalette()
    assert palette.background_for(1 << 14) == TILE_COLORS[-1]


def test_labels_and_text_color():
    palette = TilePalette()
    assert palette.label_for(0) == ""
    assert palette.label_for(64) == "64"
    assert palette.text_for(64) == TEXT_COLOR


def test_world_registers_palette(world):
    assert isinstance(get_palette(world), TilePalette)
