"""Board data sources: image pixels and random boards over a fixed palette."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from pbn.constants import MAX_COLORS

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

# Fixed palette table used for random boards.
DEFAULT_PALETTE: Dict[str, RGB] = {
    'red':     (180, 60, 60),
    'green':   (80, 170, 80),
    'blue':    (70, 90, 180),
    'yellow':  (200, 190, 80),
    'magenta': (170, 80, 160),
    'cyan':    (70, 170, 170),
    'orange':  (200, 130, 60),
    'cream':   (232, 215, 161),
    'plum':    (123, 62, 133),
}


class BoardLoadError(ValueError):
    """Raised when a board cannot be built from its source data."""


@dataclass(slots=True)
class BoardDataColor:
    rgb: RGB
    count: int


@dataclass(slots=True)
class BoardData:
    """Immutable description of a board before it is put into the world.

    ``pixels[y][x]`` holds an index into ``colors``.
    """
    width: int
    height: int
    pixels: List[List[int]]
    colors: List[BoardDataColor] = field(default_factory=list)

    @classmethod
    def from_pixels(cls, width: int, height: int, image_pixels: Sequence[RGB]) -> BoardData:
        """Deduplicate ``image_pixels`` (row-major) into a palette and an index grid.

        Pixels with identical RGB share one index; indices follow first appearance.
        """
        if width <= 0 or height <= 0:
            raise BoardLoadError(f"Board must have a positive size, got {width}x{height}")
        if len(image_pixels) < width * height:
            raise BoardLoadError(
                f"Expected {width * height} pixels for a {width}x{height} board, got {len(image_pixels)}"
            )
        colors: List[BoardDataColor] = []
        index_of: Dict[RGB, int] = {}
        pixels: List[List[int]] = [[0] * width for _ in range(height)]
        for y in range(height):
            for x in range(width):
                rgb = tuple(image_pixels[y * width + x])
                color_index = index_of.get(rgb)
                if color_index is None:
                    if len(colors) >= MAX_COLORS:
                        raise BoardLoadError(
                            f"Image has more than {MAX_COLORS} distinct colors; reduce its palette first"
                        )
                    color_index = len(colors)
                    index_of[rgb] = color_index
                    colors.append(BoardDataColor(rgb=rgb, count=1))
                else:
                    colors[color_index].count += 1
                pixels[y][x] = color_index
        logger.debug("Deduplicated %dx%d pixels into %d colors", width, height, len(colors))
        return cls(width=width, height=height, pixels=pixels, colors=colors)

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        palette: Sequence[RGB] | None = None,
        rng: random.Random | None = None,
    ) -> BoardData:
        """Fill a board uniformly from ``palette`` (defaults to ``DEFAULT_PALETTE``).

        Goes through ``from_pixels`` so colors that never got drawn are not in the palette.
        """
        table = list(palette) if palette else list(DEFAULT_PALETTE.values())
        rng = rng or random.Random()
        image_pixels = [rng.choice(table) for _ in range(width * height)]
        return cls.from_pixels(width, height, image_pixels)

    def color_count(self) -> int:
        return len(self.colors)
