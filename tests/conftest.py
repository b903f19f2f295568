import random
import sys, os

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from ecs.events.bus import EventBus
from ecs.world import create_world


class DummyWindow:
    def __init__(self, width=420, height=420):
        self.width = width
        self.height = height


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def world():
    return create_world(rng=random.Random(1234))


@pytest.fixture
def window():
    return DummyWindow()


@pytest.fixture
def recorder(bus):
    """Subscribe to events by name and collect their payloads."""
    seen: dict[str, list[dict]] = {}

    def listen(*names):
        for name in names:
            seen.setdefault(name, [])
            bus.subscribe(name, lambda sender, _name=name, **payload: seen[_name].append(payload))
        return seen

    return listen
