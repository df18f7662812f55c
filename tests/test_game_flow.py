from esper import World

from pbn.components.game_state import GameMode
from pbn.events.bus import EventBus, EVENT_BOARD_COMPLETED, EVENT_GAME_MODE_CHANGED, EVENT_QUIT_REQUEST
from pbn.systems.game_flow_system import GameFlowSystem
from pbn.utils.game_state import set_game_mode
from pbn.utils.queries import current_mode
from pbn.world import create_world
from tests.helpers import RED, board_data_from_grid, capture


def make_flow_world():
    bus = EventBus()
    world = create_world(bus, board_data_from_grid([[RED]]))
    GameFlowSystem(world, bus)
    return bus, world


def test_board_completion_enters_complete_mode():
    bus, world = make_flow_world()
    changes = capture(bus, EVENT_GAME_MODE_CHANGED)
    bus.emit(EVENT_BOARD_COMPLETED, cells=1)
    assert current_mode(world) == GameMode.COMPLETE
    assert changes == [{"previous_mode": GameMode.PLAYING, "new_mode": GameMode.COMPLETE}]


def test_quit_request_from_any_mode():
    bus, world = make_flow_world()
    bus.emit(EVENT_BOARD_COMPLETED, cells=1)
    bus.emit(EVENT_QUIT_REQUEST, reason="key")
    assert current_mode(world) == GameMode.QUIT


def test_setting_same_mode_emits_nothing():
    bus, world = make_flow_world()
    changes = capture(bus, EVENT_GAME_MODE_CHANGED)
    set_game_mode(world, bus, GameMode.PLAYING)
    assert changes == []


def test_mode_state_created_when_missing():
    bus = EventBus()
    world = World()
    changes = capture(bus, EVENT_GAME_MODE_CHANGED)
    set_game_mode(world, bus, GameMode.COMPLETE)
    assert current_mode(world) == GameMode.COMPLETE
    assert changes == [{"previous_mode": None, "new_mode": GameMode.COMPLETE}]
