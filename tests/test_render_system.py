import pytest

from pbn.components.game_state import GameMode
from pbn.constants import HIGHLIGHT_BG, HIGHLIGHT_FG, LIGHT_TEXT, LIGHT_TEXT_DIM, STATUS_BG, UNFILLED_FG
from pbn.events.bus import EventBus, EVENT_CELL_MISMATCH, EVENT_COLOR_COMPLETED, EVENT_TICK
from pbn.factories.boards import BoardData
from pbn.rendering.board_renderer import BoardRenderer, cell_label
from pbn.rendering.canvas import Canvas
from pbn.rendering.context import build_render_context
from pbn.rendering.palette_renderer import ARROW_DISABLED, ARROW_ENABLED, progress_bar
from pbn.systems.render import RenderSystem
from pbn.utils.game_state import set_game_mode
from pbn.utils.queries import get_board, get_palette, get_viewport
from pbn.world import create_world
from tests.helpers import GREEN, RED, board_data_from_grid, distinct_colors


@pytest.fixture
def render_world():
    bus = EventBus()
    world = create_world(bus, board_data_from_grid([[RED, GREEN], [GREEN, RED]]))
    viewport = get_viewport(world)
    viewport.x, viewport.y = 0, 2
    return bus, world, RenderSystem(world, bus)


def test_unfilled_cells_show_numbers(render_world):
    _, _, system = render_world
    canvas = system.process()
    assert canvas.row_text(2)[:4] == " 1 2"
    assert canvas.row_text(3)[:4] == " 2 1"


def test_selected_color_cells_are_highlighted(render_world):
    _, _, system = render_world
    canvas = system.process()
    selected = canvas.get(1, 2)
    other = canvas.get(3, 2)
    assert (selected.fg, selected.bg) == (HIGHLIGHT_FG, HIGHLIGHT_BG)
    assert (other.fg, other.bg) == (UNFILLED_FG, None)


def test_filled_cell_shows_its_color(render_world):
    _, world, system = render_world
    get_board(world).get(0, 0).filled = True
    canvas = system.process()
    for x in (0, 1):
        glyph = canvas.get(x, 2)
        assert glyph.char == " "
        assert glyph.bg == RED


def test_partially_visible_cells_are_skipped(render_world):
    _, world, _ = render_world
    get_viewport(world).x = -1
    canvas = Canvas(80, 24)
    drawn = BoardRenderer().render(canvas, build_render_context(world, 80, 24))
    assert drawn == 2
    assert canvas.get(0, 2).char == " " and canvas.get(0, 2).bg is None
    assert canvas.get(2, 2).char == "2"


def test_board_past_right_edge_is_clipped(render_world):
    _, world, _ = render_world
    get_viewport(world).x = 79
    canvas = Canvas(80, 24)
    assert BoardRenderer().render(canvas, build_render_context(world, 80, 24)) == 0


def test_swatch_chrome_and_label(render_world):
    _, _, system = render_world
    canvas = system.process()
    assert canvas.row_text(18)[25:31] == "🭽▔▔▔▔🭾"
    assert canvas.row_text(19)[25:31] == "▏ 01 ▕"
    assert canvas.row_text(20)[25:31] == "🭼    🭿"
    # Second swatch is not selected and has no progress bar.
    assert canvas.row_text(20)[31:37] == "🭼▁▁▁▁🭿"


def test_leading_zero_is_dimmed(render_world):
    _, _, system = render_world
    canvas = system.process()
    assert canvas.get(27, 19).fg == LIGHT_TEXT_DIM
    assert canvas.get(28, 19).fg == LIGHT_TEXT
    assert canvas.get(27, 19).bg == RED


def test_selected_swatch_shows_progress(render_world):
    _, world, system = render_world
    get_palette(world).colors[0].painted = 1
    canvas = system.process()
    assert canvas.row_text(20)[26:30] == "██  "


def test_completed_swatch_is_checked(render_world):
    _, world, system = render_world
    get_palette(world).colors[1].painted = 2
    canvas = system.process()
    assert canvas.row_text(19)[31:37] == "▏✓02 ▕"


def test_arrows_reflect_available_pages():
    bus = EventBus()
    world = create_world(bus, BoardData.from_pixels(12, 1, distinct_colors(12)))
    system = RenderSystem(world, bus)
    canvas = system.process()
    # Right arrow starts at column 58, left arrow ends at column 21.
    assert canvas.get(58, 20).fg == ARROW_ENABLED
    assert canvas.get(21, 20).fg == ARROW_DISABLED
    get_palette(world).page = 1
    canvas = system.process()
    assert canvas.get(58, 20).fg == ARROW_DISABLED
    assert canvas.get(21, 20).fg == ARROW_ENABLED
    assert canvas.row_text(19)[25:31] == "▏ 11 ▕"


def test_status_line(render_world):
    _, world, system = render_world
    get_palette(world).colors[0].painted = 1
    canvas = system.process()
    assert canvas.row_text(0).rstrip() == " Color 1/2  ·  1/2  ·  25% painted  ·  q quit"
    assert canvas.get(79, 0).bg == STATUS_BG


def test_status_line_when_complete(render_world):
    bus, world, system = render_world
    set_game_mode(world, bus, GameMode.COMPLETE)
    canvas = system.process()
    assert canvas.row_text(0).rstrip() == " Complete! All 4 cells painted. Press q to quit."


def test_notices_expire(render_world):
    bus, _, system = render_world
    bus.emit(EVENT_CELL_MISMATCH, row=0, col=1, color=1, selected=0)
    assert "That cell is color 2" in system.process().row_text(0)
    bus.emit(EVENT_TICK, dt=1.0)
    assert system.notice == "That cell is color 2"
    bus.emit(EVENT_TICK, dt=1.0)
    assert system.notice is None
    assert "q quit" in system.process().row_text(0)


def test_color_completion_notice(render_world):
    bus, _, system = render_world
    bus.emit(EVENT_COLOR_COMPLETED, color=0)
    assert system.notice == "Color 1 done!"


def test_process_counts_frames(render_world):
    _, _, system = render_world
    system.process()
    system.process()
    assert system.frames == 2
    assert system.last_canvas is not None


@pytest.mark.parametrize("progress, expected", [
    (0.0, "    "),
    (1.0, "████"),
    (0.5, "██  "),
    (1 / 32, "▏   "),
    (0.3, "█▎  "),
    (2.0, "████"),
])
def test_progress_bar(progress, expected):
    assert progress_bar(progress) == expected


@pytest.mark.parametrize("color, label", [(0, " 1"), (9, "10"), (98, "99"), (99, "··")])
def test_cell_label(color, label):
    assert cell_label(color) == label
