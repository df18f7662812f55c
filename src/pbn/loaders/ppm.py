"""Reader for plain (ASCII, ``P3``) PPM pixel maps."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List

from pbn.factories.boards import RGB, BoardData, BoardLoadError

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
MAX_SAMPLE_VALUE = 65535


class PpmFormatError(BoardLoadError):
    """The file is not a well formed plain PPM image."""


def _tokens(text: str) -> Iterator[str]:
    for line in text.splitlines():
        line = line.split("#", 1)[0]
        yield from line.split()


def _next_int(tokens: Iterator[str], expected: str) -> int:
    token = next(tokens, None)
    if token is None:
        raise PpmFormatError(f"Expected {expected}, but got EOF")
    if not (token.isascii() and token.isdigit()):
        raise PpmFormatError(f"Invalid {expected}, expected integer but got {token!r}")
    return int(token)


def parse_ppm(text: str) -> BoardData:
    tokens = _tokens(text)
    magic = next(tokens, None)
    if magic != PPM_MAGIC:
        raise PpmFormatError(f"Expected magic {PPM_MAGIC!r}, but got {magic!r}")

    width = _next_int(tokens, "width")
    height = _next_int(tokens, "height")
    if width <= 0 or height <= 0:
        raise PpmFormatError(f"Image size must be positive, got {width}x{height}")
    max_value = _next_int(tokens, "max color value")
    if not 0 < max_value <= MAX_SAMPLE_VALUE:
        raise PpmFormatError(f"Max color value must be in 1..{MAX_SAMPLE_VALUE}, got {max_value}")

    pixels: List[RGB] = []
    for _ in range(width * height):
        rgb = []
        for channel in ("red", "green", "blue"):
            value = _next_int(tokens, channel)
            if not 0 <= value <= max_value:
                raise PpmFormatError(f"Invalid {channel} sample {value}, expected 0..{max_value}")
            if max_value != 255:
                value = round(value * 255 / max_value)
            rgb.append(value)
        pixels.append((rgb[0], rgb[1], rgb[2]))

    return BoardData.from_pixels(width, height, pixels)


def load_ppm(path: str | Path) -> BoardData:
    """Read and parse ``path``; I/O errors propagate unchanged."""
    path = Path(path)
    text = path.read_text(encoding="ascii", errors="replace")
    board_data = parse_ppm(text)
    logger.info(
        "Loaded %s: %dx%d, %d colors", path, board_data.width, board_data.height, board_data.color_count()
    )
    return board_data
