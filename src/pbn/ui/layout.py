from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from pbn.constants import (
    ARROW_GAP, ARROW_HEIGHT, ARROW_WIDTH, CELL_HEIGHT, CELL_WIDTH, PALETTE_HEIGHT,
    PALETTE_PAGE_SIZE, PALETTE_WIDTH, STATUS_ROWS, SWATCH_HEIGHT, SWATCH_ROWS,
    SWATCH_WIDTH, SWATCHES_PER_ROW,
)


@dataclass(frozen=True, slots=True)
class PaletteHit:
    """Result of a palette hit test.

    ``kind`` is ``"swatch"`` (``value`` = palette index), ``"arrow"`` (``value`` = page delta)
    or ``"panel"`` for any other point covered by the palette chrome.
    """
    kind: str
    value: int = 0


@dataclass(frozen=True, slots=True)
class PaletteGeometry:
    left: int
    top: int

    @property
    def swatch_top(self) -> int:
        # First row below the rule.
        return self.top + 1

    @property
    def right(self) -> int:
        return self.left + PALETTE_WIDTH

    @property
    def bottom(self) -> int:
        return self.top + PALETTE_HEIGHT

    @property
    def arrow_top(self) -> int:
        return self.top + PALETTE_HEIGHT - ARROW_HEIGHT - 1

    @property
    def left_arrow_x(self) -> int:
        return self.left - ARROW_GAP - ARROW_WIDTH

    @property
    def right_arrow_x(self) -> int:
        return self.right + ARROW_GAP

    def swatch_origin(self, slot: int) -> Tuple[int, int]:
        row, col = divmod(slot, SWATCHES_PER_ROW)
        return self.left + col * SWATCH_WIDTH, self.swatch_top + row * SWATCH_HEIGHT

    def hit_test(self, x: int, y: int, page: int, color_count: int) -> Optional[PaletteHit]:
        if self.arrow_top <= y < self.arrow_top + ARROW_HEIGHT:
            if self.left_arrow_x <= x < self.left_arrow_x + ARROW_WIDTH:
                return PaletteHit("arrow", -1)
            if self.right_arrow_x <= x < self.right_arrow_x + ARROW_WIDTH:
                return PaletteHit("arrow", 1)
        # Side bars sit one column outside the swatches.
        if not (self.left - 1 <= x <= self.right and self.top <= y < self.bottom):
            return None
        if self.left <= x < self.right and y >= self.swatch_top:
            col = (x - self.left) // SWATCH_WIDTH
            row = (y - self.swatch_top) // SWATCH_HEIGHT
            if 0 <= row < SWATCH_ROWS and 0 <= col < SWATCHES_PER_ROW:
                index = page * PALETTE_PAGE_SIZE + row * SWATCHES_PER_ROW + col
                if index < color_count:
                    return PaletteHit("swatch", index)
        return PaletteHit("panel")


def compute_palette_geometry(width: int, height: int) -> PaletteGeometry:
    """Place the palette panel centered on the bottom rows of a ``width`` x ``height`` terminal.

    Shared by the input and render systems so hit testing matches what is drawn.
    """
    left = max(1, (width - PALETTE_WIDTH) // 2)
    top = max(0, height - PALETTE_HEIGHT)
    return PaletteGeometry(left=left, top=top)


def screen_to_cell(x: int, y: int, origin_x: int, origin_y: int) -> Tuple[int, int]:
    """Map a terminal position to (row, col) for a board whose top-left is at the origin."""
    col = (x - origin_x) // CELL_WIDTH
    row = (y - origin_y) // CELL_HEIGHT
    return row, col


def board_area(width: int, height: int) -> Tuple[int, int, int, int]:
    """Return (left, top, width, height) of the area between the status line and the palette."""
    top = STATUS_ROWS
    area_height = max(0, height - PALETTE_HEIGHT - top)
    return 0, top, width, area_height
