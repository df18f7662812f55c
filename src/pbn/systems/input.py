from __future__ import annotations

import logging
from typing import Optional, Set, Tuple

from esper import World

from pbn.components.game_state import GameMode
from pbn.constants import CELL_HEIGHT, CELL_WIDTH, PALETTE_PAGE_SIZE, STATUS_ROWS
from pbn.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_COLOR_SELECT_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_PALETTE_PAGE_REQUEST,
    EVENT_QUIT_REQUEST,
    EVENT_VIEWPORT_PAN,
)
from pbn.ui.layout import compute_palette_geometry, screen_to_cell
from pbn.utils.queries import current_mode, get_board, get_palette, get_terminal_size, get_viewport

logger = logging.getLogger(__name__)

QUIT_KEYS = {"q", "Q", "ctrl+c"}
PAN_KEYS = {
    "left": (1, 0), "h": (1, 0),
    "right": (-1, 0), "l": (-1, 0),
    "up": (0, 1), "k": (0, 1),
    "down": (0, -1), "j": (0, -1),
}
PAGE_KEYS = {"[": -1, "<": -1, "]": 1, ">": 1}
# Digits select the n-th swatch of the visible page; 0 is the tenth.
SLOT_KEYS = {str(n): n - 1 for n in range(1, 10)} | {"0": 9}


class InputSystem:
    """Turns pointer and key events into board, palette and viewport requests.

    Every left press or drag report is mapped on its own, so a fast drag still fills each
    cell the terminal reported. Middle drags pan by the offset since the previous report.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.mouse_x = 0
        self.mouse_y = 0
        self.buttons_pressed: Set[str] = set()
        self._drag_origin: Optional[Tuple[int, int]] = None
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_DRAG, self.on_mouse_drag)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        self.mouse_x, self.mouse_y = x, y
        if button:
            self.buttons_pressed.add(button)
        self._drag_origin = (x, y)
        if not self._playing():
            return
        if button == 'left':
            self._handle_left(x, y, allow_paging=True)

    def on_mouse_drag(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        self.mouse_x, self.mouse_y = x, y
        origin = self._drag_origin or (x, y)
        self._drag_origin = (x, y)
        if not self._playing():
            return
        if button == 'middle':
            dx = x - origin[0]
            dy = y - origin[1]
            if dx or dy:
                self.event_bus.emit(EVENT_VIEWPORT_PAN, dx=dx, dy=dy)
        elif button == 'left':
            self._handle_left(x, y, allow_paging=False)

    def on_mouse_release(self, sender, **kwargs):
        button = kwargs.get('button')
        if button is None:
            # Legacy reports do not say which button went up.
            self.buttons_pressed.clear()
        else:
            self.buttons_pressed.discard(button)
        self._drag_origin = None

    def on_key_press(self, sender, **kwargs):
        key = kwargs.get('key')
        if not key:
            return
        if key in QUIT_KEYS:
            self.event_bus.emit(EVENT_QUIT_REQUEST, reason='key')
            return
        if not self._playing():
            return
        if key in PAN_KEYS:
            dx, dy = PAN_KEYS[key]
            self.event_bus.emit(EVENT_VIEWPORT_PAN, dx=dx * CELL_WIDTH, dy=dy * CELL_HEIGHT)
        elif key in PAGE_KEYS:
            self.event_bus.emit(EVENT_PALETTE_PAGE_REQUEST, delta=PAGE_KEYS[key])
        elif key in SLOT_KEYS:
            palette = get_palette(self.world)
            index = palette.page * PALETTE_PAGE_SIZE + SLOT_KEYS[key]
            if index < len(palette.colors):
                self.event_bus.emit(EVENT_COLOR_SELECT_REQUEST, index=index)

    def is_button_down(self, button: str) -> bool:
        return button in self.buttons_pressed

    def _handle_left(self, x: int, y: int, *, allow_paging: bool) -> None:
        size = get_terminal_size(self.world)
        palette = get_palette(self.world)
        geometry = compute_palette_geometry(size.width, size.height)
        hit = geometry.hit_test(x, y, palette.page, len(palette.colors))
        if hit is not None:
            if hit.kind == 'swatch':
                if hit.value != palette.selected:
                    self.event_bus.emit(EVENT_COLOR_SELECT_REQUEST, index=hit.value)
            elif hit.kind == 'arrow' and allow_paging:
                self.event_bus.emit(EVENT_PALETTE_PAGE_REQUEST, delta=hit.value)
            # The palette panel covers the board underneath it.
            return
        if y < STATUS_ROWS:
            # So does the status line.
            return
        viewport = get_viewport(self.world)
        row, col = screen_to_cell(x, y, viewport.x, viewport.y)
        if get_board(self.world).contains(row, col):
            self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)

    def _playing(self) -> bool:
        return current_mode(self.world) == GameMode.PLAYING
