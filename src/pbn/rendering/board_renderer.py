from __future__ import annotations

from typing import TYPE_CHECKING

from pbn.constants import CELL_HEIGHT, CELL_WIDTH, HIGHLIGHT_BG, HIGHLIGHT_FG, UNFILLED_BG, UNFILLED_FG

if TYPE_CHECKING:
    from pbn.rendering.canvas import Canvas
    from pbn.rendering.context import RenderContext


def cell_label(color: int) -> str:
    """Two-column, 1-based number shown on an unfilled cell."""
    number = color + 1
    if number > 99:
        return "··"
    return f"{number:>2}"


class BoardRenderer:
    """Draws the visible part of the board. Only cells that fit entirely on screen are drawn."""

    def render(self, canvas: Canvas, ctx: RenderContext) -> int:
        board = ctx.board
        palette = ctx.palette
        vx, vy = ctx.viewport.x, ctx.viewport.y
        col_start = max(0, -(vx // CELL_WIDTH))
        row_start = max(0, -(vy // CELL_HEIGHT))
        col_end = min(board.cols, (ctx.width - vx) // CELL_WIDTH)
        row_end = min(board.rows, (ctx.height - vy) // CELL_HEIGHT)
        drawn = 0
        for row in range(row_start, row_end):
            cy = vy + row * CELL_HEIGHT
            if cy < 0:
                continue
            for col in range(col_start, col_end):
                cx = vx + col * CELL_WIDTH
                if cx < 0:
                    continue
                cell = board.get(row, col)
                if cell.filled:
                    canvas.fill(cx, cy, CELL_WIDTH, CELL_HEIGHT, bg=palette.rgb(cell.color))
                else:
                    if cell.color == palette.selected:
                        fg, bg = HIGHLIGHT_FG, HIGHLIGHT_BG
                    else:
                        fg, bg = UNFILLED_FG, UNFILLED_BG
                    canvas.fill(cx, cy, CELL_WIDTH, CELL_HEIGHT, bg=bg)
                    canvas.text(cx + CELL_WIDTH - 2, cy + CELL_HEIGHT // 2, cell_label(cell.color), fg, bg)
                drawn += 1
        return drawn
