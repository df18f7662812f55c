"""Terminal output through blessed: session modes, mouse capture and frame presentation."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Tuple

import blessed

from pbn.rendering.canvas import Canvas

logger = logging.getLogger(__name__)

# Button-event tracking (press/release/drag) with SGR extended coordinates.
MOUSE_ON = "\x1b[?1000h\x1b[?1002h\x1b[?1006h"
MOUSE_OFF = "\x1b[?1006l\x1b[?1002l\x1b[?1000l"
# Synchronized output; terminals without support ignore it.
SYNC_BEGIN = "\x1b[?2026h"
SYNC_END = "\x1b[?2026l"

RGB = Tuple[int, int, int]
Style = Tuple[Optional[RGB], Optional[RGB]]


class TerminalScreen:
    """Presents canvases on a blessed terminal, writing only glyphs that changed."""

    def __init__(self, term: blessed.Terminal | None = None):
        self.term = term if term is not None else blessed.Terminal()
        self._previous: Canvas | None = None
        self._styles: Dict[Style, str] = {}

    def size(self) -> Tuple[int, int]:
        return self.term.width, self.term.height

    @contextmanager
    def session(self) -> Iterator[TerminalScreen]:
        """Alternate screen, hidden cursor, raw input and mouse capture for the block."""
        term = self.term
        with term.fullscreen(), term.hidden_cursor(), term.raw():
            self._write(MOUSE_ON)
            logger.debug("Terminal session started (%dx%d)", term.width, term.height)
            try:
                yield self
            finally:
                self._write(MOUSE_OFF + term.normal)
                self._previous = None
                logger.debug("Terminal session ended")

    def invalidate(self) -> None:
        """Force the next present() to redraw every glyph."""
        self._previous = None

    def present(self, canvas: Canvas) -> None:
        previous = self._previous
        full = (
            previous is None
            or previous.width != canvas.width
            or previous.height != canvas.height
        )
        out: List[str] = [SYNC_BEGIN]
        if full:
            out.append(self.term.normal + self.term.clear)
        current: Style | None = None
        for y, row in canvas.rows():
            cursor_x: int | None = None
            for x, glyph in enumerate(row):
                if not full and previous.get(x, y) == glyph:
                    cursor_x = None
                    continue
                if cursor_x != x:
                    out.append(self.term.move_xy(x, y))
                style = (glyph.fg, glyph.bg)
                if style != current:
                    out.append(self._style(style))
                    current = style
                out.append(glyph.char)
                cursor_x = x + 1
        out.append(self.term.normal)
        out.append(SYNC_END)
        self._write("".join(out))
        self._previous = canvas

    def _style(self, style: Style) -> str:
        cached = self._styles.get(style)
        if cached is None:
            fg, bg = style
            cached = self.term.normal
            if fg is not None:
                cached += self.term.color_rgb(*fg)
            if bg is not None:
                cached += self.term.on_color_rgb(*bg)
            self._styles[style] = cached
        return cached

    def _write(self, text: str) -> None:
        stream = self.term.stream
        stream.write(text)
        stream.flush()
