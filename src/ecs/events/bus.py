from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"          # payload: symbol=int, modifiers=int


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_MOVE_REQUEST = "move_request"    # payload: direction=Direction|str
EVENT_TILES_MOVED = "tiles_moved"      # payload: direction=Direction, merges=list[(r,c)]
EVENT_MOVE_BLOCKED = "move_blocked"    # payload: direction=Direction
EVENT_TILE_SPAWNED = "tile_spawned"    # payload: row=int, col=int, value=int
EVENT_BOARD_CHANGED = "board_changed"  # payload: reason=str, positions=list[(r,c)]
