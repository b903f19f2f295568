from dataclasses import dataclass, field
from typing import List, Tuple

from ecs.constants import BOARD_SIZE, MAX_TILE_VALUE

Position = Tuple[int, int]


def is_tile_value(value: int) -> bool:
    """True for 0 (empty) or a power of two no larger than MAX_TILE_VALUE."""
    if value == 0:
        return True
    return 0 < value <= MAX_TILE_VALUE and value & (value - 1) == 0


@dataclass(slots=True)
class Board:
    """Fixed-size grid of tile values. Row 0 is the top row, col 0 the left column."""
    rows: int = BOARD_SIZE
    cols: int = BOARD_SIZE
    cells: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.rows}x{self.cols}")
        if not self.cells:
            self.cells = [[0] * self.cols for _ in range(self.rows)]
            return
        if len(self.cells) != self.rows or any(len(row) != self.cols for row in self.cells):
            raise ValueError(f"Board cells must form a {self.rows}x{self.cols} grid")
        for r, row in enumerate(self.cells):
            for c, value in enumerate(row):
                if not is_tile_value(value):
                    raise ValueError(f"Invalid tile value {value!r} at ({r}, {c})")
        # Own a private copy so callers cannot mutate the grid behind our back.
        self.cells = [list(row) for row in self.cells]

    def get(self, row: int, col: int) -> int:
        return self.cells[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        if not is_tile_value(value):
            raise ValueError(f"Invalid tile value {value!r} at ({row}, {col})")
        self.cells[row][col] = value

    def empty_positions(self) -> List[Position]:
        """Empty cells in row-major order."""
        return [
            (r, c)
            for r in range(self.rows)
            for c in range(self.cols)
            if self.cells[r][c] == 0
        ]

    def is_full(self) -> bool:
        return not any(0 in row for row in self.cells)

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self.cells)
