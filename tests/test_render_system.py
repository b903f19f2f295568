from ecs.constants import EMPTY_TILE_COLOR, SPACING, TILE_COLORS, TILE_PADDING, TILE_SIZE
from ecs.events.bus import EVENT_MOVE_REQUEST
from ecs.components.direction import Direction
from ecs.systems.board import BoardSystem
from ecs.systems.render import RenderSystem
from ecs.ui.layout import compute_board_geometry, tile_rect, window_size


def _load(system, cells):
    system.board.cells = [list(row) for row in cells]


def test_window_fits_board_with_spacing():
    assert window_size(4, 4) == (4 * TILE_SIZE + 2 * SPACING,) * 2
    tile_size, start_x, start_y = compute_board_geometry(*window_size(4, 4))
    assert (tile_size, start_x, start_y) == (TILE_SIZE, SPACING, SPACING)


def test_row_zero_is_drawn_at_top():
    top = tile_rect(0, 0, 4, TILE_SIZE, SPACING, SPACING)
    bottom = tile_rect(3, 0, 4, TILE_SIZE, SPACING, SPACING)
    assert top[1] > bottom[1]
    assert bottom == (SPACING + TILE_PADDING, SPACING + TILE_PADDING,
                      TILE_SIZE - 2 * TILE_PADDING, TILE_SIZE - 2 * TILE_PADDING)


def test_layout_reflects_board(world, bus, window):
    board_system = BoardSystem(world, bus)
    render = RenderSystem(world, bus, window)
    _load(board_system, [
        [0, 1, 0, 0],
        [0, 0, 2, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 2048],
    ])
    layout = render.tile_layout()
    assert len(layout) == 16
    assert layout[(0, 0)]["label"] == ""
    assert layout[(0, 0)]["color"] == EMPTY_TILE_COLOR
    assert layout[(0, 1)]["label"] == "1"
    assert layout[(0, 1)]["color"] == TILE_COLORS[0]
    assert layout[(1, 2)]["color"] == TILE_COLORS[1]
    assert layout[(3, 3)]["label"] == "2048"
    assert layout[(3, 3)]["color"] == TILE_COLORS[11]


def test_layout_rebuilt_only_after_board_change(world, bus, window):
    board_system = BoardSystem(world, bus)
    render = RenderSystem(world, bus, window)
    _load(board_system, [
        [1, 1, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    render.tile_layout()
    assert render.redraw_count == 1
    assert not render.needs_redraw

    bus.emit(EVENT_MOVE_REQUEST, direction=Direction.RIGHT)
    assert render.needs_redraw
    layout = render.tile_layout()
    assert render.redraw_count == 2
    assert layout[(0, 3)]["label"] == "2"

    # Blocked move: no board change, no rebuild.
    _load(board_system, [
        [0, 0, 0, 2],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    bus.emit(EVENT_MOVE_REQUEST, direction=Direction.UP)
    assert not render.needs_redraw
    render.tile_layout()
    assert render.redraw_count == 2
