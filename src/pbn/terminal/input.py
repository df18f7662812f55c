"""Non-blocking terminal input: raw bytes to key and mouse events."""
from __future__ import annotations

import codecs
import logging
import os
import re
import select
from dataclasses import dataclass
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

MOUSE_RE = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([mM])")
CSI_RE = re.compile(r"\x1b\[([0-9;?]*)([@-~])")
SS3_RE = re.compile(r"\x1bO([@-~])")

ARROW_KEYS = {"A": "up", "B": "down", "C": "right", "D": "left", "H": "home", "F": "end"}
CONTROL_KEYS = {"\r": "enter", "\n": "enter", "\t": "tab", "\x7f": "backspace", "\x03": "ctrl+c"}

BUTTON_NAMES = {0: "left", 1: "middle", 2: "right"}


@dataclass(frozen=True, slots=True)
class KeyEvent:
    key: str


@dataclass(frozen=True, slots=True)
class MouseEvent:
    """Mouse report with 0-based terminal coordinates.

    ``kind`` is one of ``press``, ``release``, ``drag``, ``move``, ``scroll_up``, ``scroll_down``.
    ``button`` is ``left``, ``middle``, ``right`` or ``None`` when no button is involved.
    """
    kind: str
    button: Optional[str]
    x: int
    y: int


InputEvent = Union[KeyEvent, MouseEvent]


def _decode_mouse(code: int, x: int, y: int, final: str) -> MouseEvent:
    col, row = x - 1, y - 1
    low = code & 3
    if code & 64:
        kind = "scroll_up" if low == 0 else "scroll_down"
        return MouseEvent(kind, None, col, row)
    button = BUTTON_NAMES.get(low)
    if code & 32:
        return MouseEvent("drag" if button else "move", button, col, row)
    if final == "m":
        return MouseEvent("release", button, col, row)
    return MouseEvent("press", button, col, row)


class InputParser:
    """Incremental parser for SGR mouse reports, cursor keys and plain characters.

    Incomplete escape sequences stay buffered until more data arrives.
    """

    def __init__(self) -> None:
        self.buffer = ""

    def feed(self, data: str) -> List[InputEvent]:
        self.buffer += data
        events: List[InputEvent] = []
        while self.buffer:
            head = self.buffer[0]
            if head != "\x1b":
                self.buffer = self.buffer[1:]
                events.append(KeyEvent(CONTROL_KEYS.get(head, head)))
                continue
            if len(self.buffer) == 1:
                break
            if self.buffer.startswith("\x1b[<"):
                match = MOUSE_RE.match(self.buffer)
                if match is None:
                    if self._maybe_incomplete(self.buffer[3:], "0123456789;"):
                        break
                    # Malformed report; drop the introducer and resync.
                    self.buffer = self.buffer[3:]
                    continue
                code, x, y, final = match.groups()
                self.buffer = self.buffer[match.end():]
                events.append(_decode_mouse(int(code), int(x), int(y), final))
                continue
            if self.buffer.startswith("\x1b["):
                match = CSI_RE.match(self.buffer)
                if match is None:
                    if self._maybe_incomplete(self.buffer[2:], "0123456789;?"):
                        break
                    self.buffer = self.buffer[2:]
                    continue
                self.buffer = self.buffer[match.end():]
                key = ARROW_KEYS.get(match.group(2))
                if key is not None:
                    events.append(KeyEvent(key))
                else:
                    logger.debug("Ignoring CSI sequence %r", match.group(0))
                continue
            if self.buffer.startswith("\x1bO"):
                match = SS3_RE.match(self.buffer)
                if match is None:
                    break
                self.buffer = self.buffer[match.end():]
                key = ARROW_KEYS.get(match.group(1))
                if key is not None:
                    events.append(KeyEvent(key))
                continue
            # ESC followed by an ordinary character: treat as a lone escape.
            self.buffer = self.buffer[1:]
            events.append(KeyEvent("escape"))
        return events

    def flush(self) -> List[InputEvent]:
        """Resolve a trailing lone ESC once no more input is pending."""
        if self.buffer == "\x1b":
            self.buffer = ""
            return [KeyEvent("escape")]
        return []

    @staticmethod
    def _maybe_incomplete(rest: str, allowed: str) -> bool:
        return all(ch in allowed for ch in rest)


class TerminalInput:
    """Reads every pending byte from ``fd`` without blocking and parses it."""

    def __init__(self, fd: int, parser: InputParser | None = None) -> None:
        self.fd = fd
        self.parser = parser or InputParser()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def _ready(self) -> bool:
        ready, _, _ = select.select([self.fd], [], [], 0)
        return bool(ready)

    def poll(self) -> List[InputEvent]:
        """Parse everything pending on ``fd``.

        A trailing lone ESC is held until a later poll finds no new bytes, so an escape
        sequence split across reads is still parsed whole.
        """
        events: List[InputEvent] = []
        received = False
        while self._ready():
            chunk = os.read(self.fd, 4096)
            if not chunk:
                raise EOFError("terminal input closed")
            received = True
            events.extend(self.parser.feed(self._decoder.decode(chunk)))
        if not received:
            events.extend(self.parser.flush())
        return events
