from dataclasses import dataclass


@dataclass(slots=True)
class Viewport:
    """Terminal-cell offset of the board's top-left corner. May be negative."""
    x: int = 0
    y: int = 0
