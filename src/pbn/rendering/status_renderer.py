from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pbn.components.game_state import GameMode
from pbn.constants import COMPLETE_FG, STATUS_BG, STATUS_FG

if TYPE_CHECKING:
    from pbn.rendering.canvas import Canvas
    from pbn.rendering.context import RenderContext


def status_text(ctx: RenderContext, notice: Optional[str] = None) -> str:
    palette = ctx.palette
    total = palette.total_cells()
    painted = palette.total_painted()
    if ctx.mode == GameMode.COMPLETE:
        return f" Complete! All {total} cells painted. Press q to quit."
    percent = int(100 * painted / total) if total else 100
    selected = palette.selected_color()
    parts = [
        f" Color {palette.selected + 1}/{len(palette.colors)}",
        f"{selected.painted}/{selected.count}",
        f"{percent}% painted",
    ]
    if palette.page_count > 1:
        parts.append(f"page {palette.page + 1}/{palette.page_count}")
    if notice:
        parts.append(notice)
    else:
        parts.append("q quit")
    return "  ·  ".join(parts)


class StatusRenderer:
    def render(self, canvas: Canvas, ctx: RenderContext, notice: Optional[str] = None) -> None:
        fg = COMPLETE_FG if ctx.mode == GameMode.COMPLETE else STATUS_FG
        canvas.fill(0, 0, ctx.width, 1, bg=STATUS_BG)
        canvas.text(0, 0, status_text(ctx, notice)[:ctx.width], fg, STATUS_BG)
