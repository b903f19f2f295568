import logging
from typing import Any, Dict, Tuple

from esper import World

from ecs.events.bus import EventBus, EVENT_BOARD_CHANGED
from ecs.rendering.board_renderer import BoardRenderer
from ecs.rendering.context import RenderContext, build_render_context

logger = logging.getLogger(__name__)


class RenderSystem:
    """Keeps a per-cell layout cache in sync with the board and draws it."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)
        self._board_renderer = BoardRenderer()
        self._render_ctx: RenderContext | None = None
        self._last_tile_layout: Dict[Tuple[int, int], Dict[str, Any]] = {}
        self._dirty = True
        self.redraw_count = 0

    def on_board_changed(self, sender, **kwargs):
        logger.debug("Board changed (%s); layout marked stale", kwargs.get('reason'))
        self._dirty = True

    @property
    def needs_redraw(self) -> bool:
        return self._dirty

    def tile_layout(self) -> Dict[Tuple[int, int], Dict[str, Any]]:
        """Current per-cell layout, rebuilt first if the board changed."""
        if self._dirty or self._render_ctx is None:
            self.refresh()
        return self._last_tile_layout

    def refresh(self) -> None:
        ctx = build_render_context(self.world, self.window.width, self.window.height)
        self._render_ctx = ctx
        self._last_tile_layout = self._board_renderer.layout(ctx)
        self._dirty = False
        self.redraw_count += 1

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        layout = self.tile_layout()
        try:
            arcade.get_window()
        except Exception:
            # No active window (unit tests); layout cache is still current.
            return
        self._board_renderer.render(arcade, self._render_ctx, layout)
