from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


@dataclass(slots=True)
class Cell:
    """One grid unit: the palette index it must be painted with and whether it is."""
    color: int
    filled: bool = False


@dataclass(slots=True)
class Board:
    rows: int
    cols: int
    cells: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[Cell(color=0) for _ in range(self.cols)] for _ in range(self.rows)]

    def get(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for row, line in enumerate(self.cells):
            for col, cell in enumerate(line):
                yield row, col, cell

    def filled_count(self) -> int:
        return sum(1 for _, _, cell in self.iter_cells() if cell.filled)

    def total(self) -> int:
        return self.rows * self.cols
