from __future__ import annotations

from dataclasses import dataclass

from esper import World

from pbn.components.board import Board
from pbn.components.game_state import GameMode
from pbn.components.palette import Palette
from pbn.components.viewport import Viewport
from pbn.ui.layout import PaletteGeometry, compute_palette_geometry
from pbn.utils.queries import current_mode, get_board, get_palette, get_viewport


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    world: World
    width: int
    height: int
    board: Board
    palette: Palette
    viewport: Viewport
    mode: GameMode
    palette_geometry: PaletteGeometry


def build_render_context(world: World, width: int, height: int) -> RenderContext:
    """Populate a RenderContext for the current frame."""
    return RenderContext(
        world=world,
        width=width,
        height=height,
        board=get_board(world),
        palette=get_palette(world),
        viewport=get_viewport(world),
        mode=current_mode(world),
        palette_geometry=compute_palette_geometry(width, height),
    )
