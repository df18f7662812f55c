from __future__ import annotations

import logging

from esper import World

from pbn.events.bus import (
    EventBus,
    EVENT_CELL_MISMATCH,
    EVENT_COLOR_COMPLETED,
    EVENT_RESIZE,
    EVENT_TICK,
)
from pbn.rendering.board_renderer import BoardRenderer
from pbn.rendering.canvas import Canvas
from pbn.rendering.context import build_render_context
from pbn.rendering.palette_renderer import PaletteRenderer
from pbn.rendering.status_renderer import StatusRenderer
from pbn.utils.queries import get_terminal_size

logger = logging.getLogger(__name__)

NOTICE_SECONDS = 1.5


class RenderSystem:
    """Composes a frame (board, then palette panel, then status line) and presents it.

    Without a screen the system runs headless: the canvas is still built so tests can
    inspect ``last_canvas``.
    """
    def __init__(self, world: World, event_bus: EventBus, screen=None):
        self.world = world
        self.event_bus = event_bus
        self.screen = screen
        self._time = 0.0
        self.frames = 0
        self.last_canvas: Canvas | None = None
        self.notice: str | None = None
        self._notice_until = 0.0
        self._board_renderer = BoardRenderer()
        self._palette_renderer = PaletteRenderer()
        self._status_renderer = StatusRenderer()
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_RESIZE, self.on_resize)
        self.event_bus.subscribe(EVENT_CELL_MISMATCH, self.on_cell_mismatch)
        self.event_bus.subscribe(EVENT_COLOR_COMPLETED, self.on_color_completed)

    def on_tick(self, sender, **kwargs):
        self._time += float(kwargs.get('dt', 0.0))
        if self.notice is not None and self._time >= self._notice_until:
            self.notice = None

    def on_resize(self, sender, **kwargs):
        logger.debug("Resized to %sx%s", kwargs.get('width'), kwargs.get('height'))
        if self.screen is not None and hasattr(self.screen, 'invalidate'):
            self.screen.invalidate()

    def on_cell_mismatch(self, sender, **kwargs):
        color = kwargs.get('color')
        if color is not None:
            self.show_notice(f"That cell is color {color + 1}")

    def on_color_completed(self, sender, **kwargs):
        color = kwargs.get('color')
        if color is not None:
            self.show_notice(f"Color {color + 1} done!")

    def show_notice(self, text: str) -> None:
        self.notice = text
        self._notice_until = self._time + NOTICE_SECONDS

    def process(self) -> Canvas:
        size = get_terminal_size(self.world)
        canvas = Canvas(size.width, size.height)
        ctx = build_render_context(self.world, size.width, size.height)
        self._board_renderer.render(canvas, ctx)
        self._palette_renderer.render(canvas, ctx)
        self._status_renderer.render(canvas, ctx, notice=self.notice)
        self.last_canvas = canvas
        self.frames += 1
        if self.screen is not None:
            self.screen.present(canvas)
        return canvas
