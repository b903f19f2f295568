from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from esper import World

from ecs.components.board import Board, Position
from ecs.components.direction import Direction
from ecs.components.tile_palette import TilePalette
from ecs.constants import SPAWN_VALUE


@dataclass(slots=True)
class MoveResult:
    direction: Direction
    moved: bool
    merges: List[Position] = field(default_factory=list)


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def get_palette(world: World) -> TilePalette:
    for _, palette in world.get_component(TilePalette):
        return palette
    raise RuntimeError("TilePalette definitions not found")


def slide_line(line: Sequence[int]) -> Tuple[List[int], List[int]]:
    """Compact a line toward index 0 and merge equal neighbours.

    Returns the new line and the indices that received a merge. A tile
    produced by a merge never merges again in the same pass.
    """
    tiles = [value for value in line if value != 0]
    result: List[int] = []
    merged_at: List[int] = []
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            merged_at.append(len(result))
            result.append(tiles[i] * 2)
            i += 2
        else:
            result.append(tiles[i])
            i += 1
    result.extend([0] * (len(line) - len(result)))
    return result, merged_at


def line_positions(rows: int, cols: int, direction: Direction) -> List[List[Position]]:
    """Board positions grouped into lines, each ordered from the edge tiles move toward."""
    lines: List[List[Position]] = []
    if direction.horizontal:
        col_order = range(cols - 1, -1, -1) if direction.toward_end else range(cols)
        for r in range(rows):
            lines.append([(r, c) for c in col_order])
    else:
        row_order = range(rows - 1, -1, -1) if direction.toward_end else range(rows)
        for c in range(cols):
            lines.append([(r, c) for r in row_order])
    return lines


def apply_move(board: Board, direction: Direction) -> MoveResult:
    """Slide every line of the board in place."""
    result = MoveResult(direction=direction, moved=False)
    for positions in line_positions(board.rows, board.cols, direction):
        before = [board.cells[r][c] for r, c in positions]
        after, merged_at = slide_line(before)
        if after == before:
            continue
        result.moved = True
        for (r, c), value in zip(positions, after):
            board.cells[r][c] = value
        result.merges.extend(positions[i] for i in merged_at)
    return result


def spawn_tile(board: Board, rng: random.Random, value: int = SPAWN_VALUE) -> Optional[Position]:
    """Place value on a uniformly chosen empty cell; no-op on a full board."""
    empty = board.empty_positions()
    if not empty:
        return None
    row, col = empty[rng.randrange(len(empty))]
    board.set(row, col, value)
    return row, col


def format_board(cells: Sequence[Sequence[int]]) -> str:
    """Render the grid as right-aligned text rows, '.' marking empty cells."""
    width = max((len(str(value)) for row in cells for value in row), default=1)
    return "\n".join(
        " ".join(("." if value == 0 else str(value)).rjust(width) for value in row)
        for row in cells
    )
