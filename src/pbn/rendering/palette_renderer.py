from __future__ import annotations

from typing import TYPE_CHECKING

from pbn.constants import BORDER_COLOR, PALETTE_WIDTH, SWATCH_HEIGHT, SWATCH_WIDTH
from pbn.utils.color import text_colors_for

if TYPE_CHECKING:
    from pbn.components.palette import PaletteColor
    from pbn.rendering.canvas import Canvas
    from pbn.rendering.context import RenderContext

SWATCH_TOP = "🭽▔▔▔▔🭾"
SWATCH_BOTTOM = "🭼▁▁▁▁🭿"
SWATCH_LEFT = "▏"
SWATCH_RIGHT = "▕"
SIDE_BAR = "█"
TOP_RULE = "🬭"
CHECK = "✓"
EIGHTHS = " ▏▎▍▌▋▊▉█"

RIGHT_ARROW = ("▀▄ ", " ▄▀", "▀  ")
LEFT_ARROW = (" ▄▀", "▀▄ ", "  ▀")
ARROW_ENABLED = (200, 200, 210)
ARROW_DISABLED = (70, 70, 80)


def progress_bar(progress: float, width: int = SWATCH_WIDTH - 2) -> str:
    """Render ``progress`` (0..1) as ``width`` columns of eighth blocks."""
    units = round(max(0.0, min(1.0, progress)) * width * 8)
    chars = []
    for column in range(width):
        level = max(0, min(8, units - column * 8))
        chars.append(EIGHTHS[level])
    return "".join(chars)


class PaletteRenderer:
    """Swatch panel on the bottom rows, with paging arrows on either side."""

    def render(self, canvas: Canvas, ctx: RenderContext) -> None:
        geometry = ctx.palette_geometry
        palette = ctx.palette

        canvas.text(geometry.left - 1, geometry.top, TOP_RULE * (PALETTE_WIDTH + 2), BORDER_COLOR)
        for y in range(geometry.swatch_top, geometry.bottom):
            canvas.fill(geometry.left, y, PALETTE_WIDTH, 1)
            canvas.put(geometry.left - 1, y, SIDE_BAR, BORDER_COLOR)
            canvas.put(geometry.right, y, SIDE_BAR, BORDER_COLOR)

        for slot, index in enumerate(palette.page_range(palette.page)):
            x, y = geometry.swatch_origin(slot)
            self.render_swatch(canvas, x, y, index, palette.colors[index], index == palette.selected)

        self._render_arrow(canvas, geometry.left_arrow_x, geometry.arrow_top, LEFT_ARROW, palette.page > 0)
        self._render_arrow(
            canvas, geometry.right_arrow_x, geometry.arrow_top, RIGHT_ARROW,
            palette.page < palette.page_count - 1,
        )

    def render_swatch(self, canvas: Canvas, x: int, y: int, index: int,
                      color: PaletteColor, selected: bool) -> None:
        bg = color.rgb
        dim, normal = text_colors_for(bg)

        canvas.text(x, y, SWATCH_TOP, BORDER_COLOR, bg)

        canvas.put(x, y + 1, SWATCH_LEFT, BORDER_COLOR, bg)
        canvas.put(x + 1, y + 1, CHECK if color.complete else " ", normal, bg)
        label = f"{index + 1:02d}"
        if len(label) == 2:
            canvas.put(x + 2, y + 1, label[0], dim if label[0] == "0" else normal, bg)
            canvas.put(x + 3, y + 1, label[1], normal, bg)
            canvas.put(x + 4, y + 1, " ", normal, bg)
        else:
            canvas.text(x + 2, y + 1, label, normal, bg)
        canvas.put(x + SWATCH_WIDTH - 1, y + 1, SWATCH_RIGHT, BORDER_COLOR, bg)

        canvas.text(x, y + SWATCH_HEIGHT - 1, SWATCH_BOTTOM, BORDER_COLOR, bg)
        if selected:
            canvas.text(x + 1, y + SWATCH_HEIGHT - 1, progress_bar(color.progress), normal, bg)

    @staticmethod
    def _render_arrow(canvas: Canvas, x: int, y: int, rows: tuple[str, ...], enabled: bool) -> None:
        fg = ARROW_ENABLED if enabled else ARROW_DISABLED
        for offset, line in enumerate(rows):
            for col, char in enumerate(line):
                if char != " ":
                    canvas.put(x + col, y + offset, char, fg)
