import logging
from typing import Optional

from esper import World

from pbn.events.bus import (
    EventBus,
    EVENT_COLOR_COMPLETED,
    EVENT_COLOR_SELECT_REQUEST,
    EVENT_COLOR_SELECTED,
    EVENT_PALETTE_PAGE_CHANGED,
    EVENT_PALETTE_PAGE_REQUEST,
)
from pbn.utils.queries import get_palette

logger = logging.getLogger(__name__)


class PaletteSystem:
    """Owns palette selection and paging.

    The visible page always follows a new selection. When ``auto_advance`` is set on the
    palette, finishing a color moves the selection to the next unfinished one.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_COLOR_SELECT_REQUEST, self.on_select_request)
        self.event_bus.subscribe(EVENT_PALETTE_PAGE_REQUEST, self.on_page_request)
        self.event_bus.subscribe(EVENT_COLOR_COMPLETED, self.on_color_completed)

    def on_select_request(self, sender, **kwargs):
        index = kwargs.get('index')
        if index is None:
            return
        self.select(int(index))

    def select(self, index: int) -> bool:
        palette = get_palette(self.world)
        if not 0 <= index < len(palette.colors):
            return False
        previous = palette.selected
        if index == previous:
            return False
        palette.selected = index
        logger.debug("Selected color %d", index + 1)
        self.event_bus.emit(EVENT_COLOR_SELECTED, index=index, previous=previous)
        self.set_page(palette.page_of(index))
        return True

    def on_page_request(self, sender, **kwargs):
        delta = kwargs.get('delta', 0)
        palette = get_palette(self.world)
        self.set_page(palette.page + int(delta))

    def set_page(self, page: int) -> bool:
        palette = get_palette(self.world)
        page = max(0, min(page, palette.page_count - 1))
        previous = palette.page
        if page == previous:
            return False
        palette.page = page
        self.event_bus.emit(EVENT_PALETTE_PAGE_CHANGED, page=page, previous=previous)
        return True

    def on_color_completed(self, sender, **kwargs):
        palette = get_palette(self.world)
        if not palette.auto_advance:
            return
        color = kwargs.get('color')
        if color is None or color != palette.selected:
            return
        nxt = self.next_incomplete(color)
        if nxt is not None:
            self.select(nxt)

    def next_incomplete(self, after: int) -> Optional[int]:
        palette = get_palette(self.world)
        total = len(palette.colors)
        for step in range(1, total):
            index = (after + step) % total
            if not palette.colors[index].complete:
                return index
        return None
