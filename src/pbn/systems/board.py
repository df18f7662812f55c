import logging

from esper import World

from pbn.events.bus import (
    EventBus,
    EVENT_BOARD_COMPLETED,
    EVENT_CELL_CLICK,
    EVENT_CELL_FILLED,
    EVENT_CELL_MISMATCH,
    EVENT_COLOR_COMPLETED,
)
from pbn.utils.queries import get_board, get_palette

logger = logging.getLogger(__name__)


class BoardSystem:
    """Fills cells whose color matches the selected palette entry.

    Logic:
      - On EVENT_CELL_CLICK: an unfilled cell whose color index equals the selected index is
        filled and its palette color's ``painted`` counter goes up; filled cells keep their color.
      - Unfilled cells of another color only emit EVENT_CELL_MISMATCH.
      - Completion of a color and of the whole board is announced once each.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self._remaining = self._count_unfilled()
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)

    def _count_unfilled(self) -> int:
        board = get_board(self.world)
        return board.total() - board.filled_count()

    @property
    def remaining(self) -> int:
        return self._remaining

    def on_cell_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        self.paint(row, col)

    def paint(self, row: int, col: int) -> bool:
        """Try to fill (row, col) with the selected color. Returns True when it got filled."""
        board = get_board(self.world)
        if not board.contains(row, col):
            return False
        cell = board.get(row, col)
        if cell.filled:
            return False
        palette = get_palette(self.world)
        if cell.color != palette.selected:
            self.event_bus.emit(
                EVENT_CELL_MISMATCH, row=row, col=col, color=cell.color, selected=palette.selected
            )
            return False
        cell.filled = True
        color = palette.colors[cell.color]
        color.painted += 1
        self._remaining -= 1
        self.event_bus.emit(EVENT_CELL_FILLED, row=row, col=col, color=cell.color)
        if color.painted == color.count:
            logger.info("Color %d completed (%d cells)", cell.color + 1, color.count)
            self.event_bus.emit(EVENT_COLOR_COMPLETED, color=cell.color)
        if self._remaining == 0:
            logger.info("Board completed (%d cells)", board.total())
            self.event_bus.emit(EVENT_BOARD_COMPLETED, cells=board.total())
        return True
