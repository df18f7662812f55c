from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Glyph:
    """One terminal cell. ``None`` colors mean the terminal default."""
    char: str = " "
    fg: Optional[RGB] = None
    bg: Optional[RGB] = None


BLANK = Glyph()


class Canvas:
    """Frame buffer of glyphs. Every character is assumed to be one column wide;
    writes outside the canvas are clipped."""

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self._rows: List[List[Glyph]] = [[BLANK] * self.width for _ in range(self.height)]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Glyph:
        return self._rows[y][x]

    def put(self, x: int, y: int, char: str, fg: Optional[RGB] = None, bg: Optional[RGB] = None) -> None:
        if self.contains(x, y):
            self._rows[y][x] = Glyph(char, fg, bg)

    def text(self, x: int, y: int, text: str, fg: Optional[RGB] = None, bg: Optional[RGB] = None) -> None:
        for offset, char in enumerate(text):
            self.put(x + offset, y, char, fg, bg)

    def fill(self, x: int, y: int, width: int, height: int, char: str = " ",
             fg: Optional[RGB] = None, bg: Optional[RGB] = None) -> None:
        for row in range(y, y + height):
            for col in range(x, x + width):
                self.put(col, row, char, fg, bg)

    def row_text(self, y: int) -> str:
        return "".join(glyph.char for glyph in self._rows[y])

    def rows(self) -> Iterator[Tuple[int, List[Glyph]]]:
        return enumerate(self._rows)
