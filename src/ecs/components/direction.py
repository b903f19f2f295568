"""Move directions understood by the board engine."""
from enum import Enum


class Direction(Enum):
    """Direction tiles slide in. The value names the edge the line compacts toward."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def toward_end(self) -> bool:
        """True when tiles gather at the last row/column instead of index 0."""
        return self in (Direction.RIGHT, Direction.DOWN)

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown direction: {value!r}")
