from esper import World

from pbn.constants import CELL_HEIGHT, CELL_WIDTH
from pbn.events.bus import EventBus, EVENT_VIEWPORT_MOVED, EVENT_VIEWPORT_PAN
from pbn.ui.layout import board_area
from pbn.utils.queries import get_board, get_viewport


class ViewportSystem:
    """Keeps the board offset; panning is unbounded so the board may leave the screen."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_VIEWPORT_PAN, self.on_pan)

    def on_pan(self, sender, **kwargs):
        dx = int(kwargs.get('dx', 0))
        dy = int(kwargs.get('dy', 0))
        if not dx and not dy:
            return
        viewport = get_viewport(self.world)
        self.move_to(viewport.x + dx, viewport.y + dy)

    def move_to(self, x: int, y: int) -> None:
        viewport = get_viewport(self.world)
        viewport.x = x
        viewport.y = y
        self.event_bus.emit(EVENT_VIEWPORT_MOVED, x=x, y=y)

    def center(self, width: int, height: int) -> None:
        """Center the board in the area between the status line and the palette.

        A board larger than that area is pinned to its top-left corner instead.
        """
        board = get_board(self.world)
        left, top, area_w, area_h = board_area(width, height)
        board_w = board.cols * CELL_WIDTH
        board_h = board.rows * CELL_HEIGHT
        x = left + max(0, (area_w - board_w) // 2)
        y = top + max(0, (area_h - board_h) // 2)
        self.move_to(x, y)
