"""Entry point for the 2048 slide game.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run
from ecs.world import create_world
from ecs.constants import BOARD_COLOR, BOARD_SIZE, LOG_FORMAT, LOG_LEVEL, WINDOW_TITLE
from ecs.events.bus import EventBus, EVENT_KEY_PRESS
from ecs.systems.board import BoardSystem
from ecs.systems.input import InputSystem
from ecs.systems.render import RenderSystem
from ecs.ui.layout import window_size

logger = logging.getLogger(__name__)


class SlideGameWindow(Window):
    def __init__(self):
        width, height = window_size(BOARD_SIZE, BOARD_SIZE)
        super().__init__(width, height, WINDOW_TITLE, resizable=False)
        self.background_color = BOARD_COLOR
        self.event_bus = EventBus()
        self.world = create_world()

        # Render system subscribes first so the initial board is drawn.
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.board_system = BoardSystem(self.world, self.event_bus, rows=BOARD_SIZE, cols=BOARD_SIZE)
        self.input_system = InputSystem(self.event_bus)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    logger.info("Starting %s", WINDOW_TITLE)
    window = SlideGameWindow()
    logger.debug("Window %dx%d ready", window.width, window.height)
    run()

if __name__ == "__main__":
    main()
