from dataclasses import dataclass, field
from typing import List, Tuple

from pbn.constants import PALETTE_PAGE_SIZE

RGB = Tuple[int, int, int]


@dataclass(slots=True)
class PaletteColor:
    """Palette entry with paint progress.

    ``count`` is the number of board cells using this color, ``painted`` how many of
    them have been filled so far.
    """
    rgb: RGB
    count: int
    painted: int = 0

    @property
    def remaining(self) -> int:
        return max(0, self.count - self.painted)

    @property
    def progress(self) -> float:
        if self.count <= 0:
            return 1.0
        return min(1.0, self.painted / self.count)

    @property
    def complete(self) -> bool:
        return self.painted >= self.count


@dataclass(slots=True)
class Palette:
    colors: List[PaletteColor] = field(default_factory=list)
    selected: int = 0
    page: int = 0
    auto_advance: bool = True

    def rgb(self, index: int) -> RGB:
        return self.colors[index].rgb

    def selected_color(self) -> PaletteColor:
        return self.colors[self.selected]

    @property
    def page_count(self) -> int:
        return max(1, -(-len(self.colors) // PALETTE_PAGE_SIZE))

    def page_of(self, index: int) -> int:
        return index // PALETTE_PAGE_SIZE

    def page_range(self, page: int) -> range:
        start = page * PALETTE_PAGE_SIZE
        return range(start, min(start + PALETTE_PAGE_SIZE, len(self.colors)))

    def total_painted(self) -> int:
        return sum(color.painted for color in self.colors)

    def total_cells(self) -> int:
        return sum(color.count for color in self.colors)
