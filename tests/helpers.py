from __future__ import annotations

from typing import Any, Sequence

from pbn.events.bus import EventBus
from pbn.factories.boards import RGB, BoardData

RED: RGB = (220, 40, 60)
GREEN: RGB = (80, 170, 80)
BLUE: RGB = (70, 90, 180)


def board_data_from_grid(grid: Sequence[Sequence[RGB]]) -> BoardData:
    """Build BoardData from rows of RGB triples."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    pixels = [rgb for row in grid for rgb in row]
    return BoardData.from_pixels(width, height, pixels)


def distinct_colors(count: int) -> list[RGB]:
    return [(10 * i % 256, 20 + i, 200 - i) for i in range(count)]


def capture(bus: EventBus, name: str) -> list[dict[str, Any]]:
    """Subscribe to ``name`` and collect every payload emitted."""
    received: list[dict[str, Any]] = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received
