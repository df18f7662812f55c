import random

from esper import World
from .events.bus import EventBus
from pbn.components.board import Board, Cell
from pbn.components.game_state import GameState, GameMode
from pbn.components.palette import Palette, PaletteColor
from pbn.components.terminal_size import TerminalSize
from pbn.components.viewport import Viewport
from pbn.factories.boards import BoardData


def create_world(
    event_bus: EventBus,
    board_data: BoardData | None = None,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    auto_advance: bool = True,
    terminal_size: tuple[int, int] = (80, 24),
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())
    if board_data is None:
        board_data = BoardData.random(8, 8, rng=getattr(world, "random"))

    # Global state resources share one entity.
    world.create_entity(
        GameState(mode=initial_mode),
        TerminalSize(width=terminal_size[0], height=terminal_size[1]),
    )

    cells = [
        [Cell(color=board_data.pixels[row][col]) for col in range(board_data.width)]
        for row in range(board_data.height)
    ]
    palette = Palette(
        colors=[PaletteColor(rgb=color.rgb, count=color.count) for color in board_data.colors],
        auto_advance=auto_advance,
    )
    world.create_entity(
        Board(rows=board_data.height, cols=board_data.width, cells=cells),
        palette,
        Viewport(),
    )
    return world
