"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """High-level modes that drive which systems react to input."""
    PLAYING = auto()
    COMPLETE = auto()
    QUIT = auto()


@dataclass
class GameState:
    """Singleton component storing the currently active game mode."""
    mode: GameMode = GameMode.PLAYING
