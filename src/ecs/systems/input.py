import logging

from ecs.components.direction import Direction
from ecs.constants import (
    KEY_A, KEY_D, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_S, KEY_UP, KEY_W,
)
from ecs.events.bus import EventBus, EVENT_KEY_PRESS, EVENT_MOVE_REQUEST

logger = logging.getLogger(__name__)

DEFAULT_KEY_BINDINGS = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_W: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_A: Direction.LEFT,
    KEY_D: Direction.RIGHT,
}


class InputSystem:
    """Translates raw key presses into board move requests."""

    def __init__(self, event_bus: EventBus, bindings: dict[int, Direction] | None = None):
        self.event_bus = event_bus
        self.bindings = dict(DEFAULT_KEY_BINDINGS if bindings is None else bindings)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        self.handle_key_press(symbol, kwargs.get('modifiers', 0))

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> bool:
        """Emit a move request for bound keys; return whether the key was used."""
        direction = self.bindings.get(symbol)
        if direction is None:
            logger.debug("Unbound key %s ignored", symbol)
            return False
        self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)
        return True
