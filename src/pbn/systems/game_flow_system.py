import logging

from esper import World

from pbn.components.game_state import GameMode
from pbn.events.bus import EventBus, EVENT_BOARD_COMPLETED, EVENT_QUIT_REQUEST
from pbn.utils.game_state import set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Moves the session between PLAYING, COMPLETE and QUIT."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_BOARD_COMPLETED, self.on_board_completed)
        self.event_bus.subscribe(EVENT_QUIT_REQUEST, self.on_quit_request)

    def on_board_completed(self, sender, **kwargs):
        set_game_mode(self.world, self.event_bus, GameMode.COMPLETE)

    def on_quit_request(self, sender, **kwargs):
        logger.info("Quit requested (%s)", kwargs.get('reason', 'unknown'))
        set_game_mode(self.world, self.event_bus, GameMode.QUIT)
