import logging
import random
from typing import Optional

from esper import World

from ecs.components.board import Board, Position
from ecs.components.direction import Direction
from ecs.constants import BOARD_SIZE
from ecs.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_MOVE_BLOCKED,
    EVENT_MOVE_REQUEST,
    EVENT_TILE_SPAWNED,
    EVENT_TILES_MOVED,
)
from ecs.systems.board_ops import MoveResult, apply_move, format_board, spawn_tile

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and applies moves and spawns to it."""

    def __init__(self, world: World, event_bus: EventBus, rows: int = BOARD_SIZE, cols: int = BOARD_SIZE):
        self.world = world
        self.event_bus = event_bus
        # Create a single board entity with Board component
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board(rows=rows, cols=cols))
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)
        self._init_board()

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    @property
    def rng(self) -> random.Random:
        rng = getattr(self.world, "random", None)
        if rng is None:
            rng = random.Random()
            setattr(self.world, "random", rng)
        return rng

    def _init_board(self):
        pos = self.spawn()
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="init", positions=[pos] if pos else [])

    def move(self, direction: Direction) -> bool:
        """Slide the board; return whether any cell changed."""
        return self._apply(direction).moved

    def spawn(self) -> Optional[Position]:
        """Drop a new tile on a random empty cell; None when the board is full."""
        board = self.board
        pos = spawn_tile(board, self.rng)
        if pos is None:
            logger.debug("Spawn skipped: board full")
            return None
        row, col = pos
        value = board.get(row, col)
        logger.debug("Spawned %d at (%d, %d)", value, row, col)
        self.event_bus.emit(EVENT_TILE_SPAWNED, row=row, col=col, value=value)
        return pos

    def on_move_request(self, sender, **kwargs):
        raw = kwargs.get('direction')
        if raw is None:
            return
        try:
            direction = Direction.parse(raw)
        except ValueError:
            logger.warning("Ignoring move request with invalid direction %r", raw)
            return
        result = self._apply(direction)
        if not result.moved:
            self.event_bus.emit(EVENT_MOVE_BLOCKED, direction=direction)
            return
        self.event_bus.emit(EVENT_TILES_MOVED, direction=direction, merges=list(result.merges))
        spawned = self.spawn()
        positions = list(result.merges)
        if spawned is not None:
            positions.append(spawned)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="move", positions=positions)

    def _apply(self, direction: Direction) -> MoveResult:
        board = self.board
        result = apply_move(board, direction)
        if result.moved:
            logger.debug("Moved %s with %d merge(s):\n%s", direction.value, len(result.merges), format_board(board.cells))
        else:
            logger.debug("Move %s blocked", direction.value)
        return result
