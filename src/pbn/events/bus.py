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
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float
EVENT_RESIZE = "resize"                    # payload: width=int, height=int


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_KEY_PRESS = "key_press"              # payload: key=str
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_MOUSE_DRAG = "mouse_drag"            # payload: x, y, button
EVENT_MOUSE_RELEASE = "mouse_release"      # payload: x, y, button
EVENT_CELL_CLICK = "cell_click"            # payload: row, col
EVENT_QUIT_REQUEST = "quit_request"        # payload: reason=str


# ============================================================================
# BOARD
# ============================================================================
EVENT_CELL_FILLED = "cell_filled"          # payload: row, col, color=int
EVENT_CELL_MISMATCH = "cell_mismatch"      # payload: row, col, color=int, selected=int
EVENT_COLOR_COMPLETED = "color_completed"  # payload: color=int
EVENT_BOARD_COMPLETED = "board_completed"  # payload: cells=int


# ============================================================================
# PALETTE
# ============================================================================
EVENT_COLOR_SELECT_REQUEST = "color_select_request"    # payload: index=int
EVENT_COLOR_SELECTED = "color_selected"                # payload: index=int, previous=int
EVENT_PALETTE_PAGE_REQUEST = "palette_page_request"    # payload: delta=int
EVENT_PALETTE_PAGE_CHANGED = "palette_page_changed"    # payload: page=int, previous=int


# ============================================================================
# VIEWPORT
# ============================================================================
EVENT_VIEWPORT_PAN = "viewport_pan"        # payload: dx=int, dy=int
EVENT_VIEWPORT_MOVED = "viewport_moved"    # payload: x=int, y=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
