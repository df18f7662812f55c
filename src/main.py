"""Entry point for the terminal paint-by-number toy.

Sets up ECS world, event bus, systems, and the blessed terminal session.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from typing import Callable, Sequence

from esper import World

from pbn.components.game_state import GameMode
from pbn.constants import DEFAULT_RANDOM_COLS, DEFAULT_RANDOM_ROWS, FPS
from pbn.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_RESIZE,
    EVENT_TICK,
)
from pbn.factories.boards import BoardData, BoardLoadError
from pbn.loaders.ppm import load_ppm
from pbn.systems.board import BoardSystem
from pbn.systems.game_flow_system import GameFlowSystem
from pbn.systems.input import InputSystem
from pbn.systems.palette import PaletteSystem
from pbn.systems.render import RenderSystem
from pbn.systems.viewport import ViewportSystem
from pbn.terminal.input import InputEvent, KeyEvent, MouseEvent, TerminalInput
from pbn.terminal.screen import TerminalScreen
from pbn.utils.log_setup import configure_logging
from pbn.utils.queries import current_mode, get_terminal_size
from pbn.world import create_world

logger = logging.getLogger(__name__)

MOUSE_EVENTS = {
    "press": EVENT_MOUSE_PRESS,
    "drag": EVENT_MOUSE_DRAG,
    "release": EVENT_MOUSE_RELEASE,
}


class PaintApp:
    """One interactive session: poll input, update, render, then sleep to cap the frame rate."""

    def __init__(
        self,
        board_data: BoardData,
        screen: TerminalScreen | None = None,
        terminal_input: TerminalInput | None = None,
        *,
        fps: int = FPS,
        auto_advance: bool = True,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.screen = screen
        self.terminal_input = terminal_input
        self.frame_time = 1.0 / fps if fps > 0 else 0.0
        self._clock = clock
        self._sleep = sleep
        width, height = screen.size() if screen is not None else (80, 24)
        self.event_bus = EventBus()
        self.world: World = create_world(
            self.event_bus,
            board_data,
            auto_advance=auto_advance,
            terminal_size=(width, height),
            rng=rng,
        )
        # Flow and input systems
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.world, self.event_bus)

        # Board, palette and viewport systems
        self.palette_system = PaletteSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.viewport_system = ViewportSystem(self.world, self.event_bus)

        self.render_system = RenderSystem(self.world, self.event_bus, screen)
        self.viewport_system.center(width, height)

    @property
    def running(self) -> bool:
        return current_mode(self.world) != GameMode.QUIT

    def dispatch(self, event: InputEvent) -> None:
        if isinstance(event, KeyEvent):
            self.event_bus.emit(EVENT_KEY_PRESS, key=event.key)
        elif isinstance(event, MouseEvent):
            name = MOUSE_EVENTS.get(event.kind)
            if name is None:
                return
            self.event_bus.emit(name, x=event.x, y=event.y, button=event.button)

    def sync_size(self) -> None:
        if self.screen is None:
            return
        width, height = self.screen.size()
        size = get_terminal_size(self.world)
        if (width, height) != (size.width, size.height):
            size.width, size.height = width, height
            self.event_bus.emit(EVENT_RESIZE, width=width, height=height)

    def step(self, dt: float) -> None:
        self.sync_size()
        if self.terminal_input is not None:
            for event in self.terminal_input.poll():
                self.dispatch(event)
        self.event_bus.emit(EVENT_TICK, dt=dt)
        if self.running:
            self.render_system.process()

    def run(self) -> None:
        if self.screen is None:
            raise RuntimeError("PaintApp.run needs a screen")
        with self.screen.session():
            dt = self.frame_time
            while self.running:
                start = self._clock()
                self.step(dt)
                elapsed = self._clock() - start
                if elapsed < self.frame_time:
                    self._sleep(self.frame_time - elapsed)
                dt = max(elapsed, self.frame_time)


def parse_size(text: str) -> tuple[int, int]:
    try:
        cols, rows = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected COLSxROWS, got {text!r}") from None
    if cols <= 0 or rows <= 0:
        raise argparse.ArgumentTypeError(f"board size must be positive, got {text!r}")
    return cols, rows


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paint-by-number",
        description="Fill numbered cells with the matching palette color, right in the terminal.",
    )
    parser.add_argument("image", nargs="?", help="plain PPM (P3) image to paint")
    parser.add_argument("--random", type=parse_size, metavar="COLSxROWS",
                        help="paint a random board of this size instead of an image")
    parser.add_argument("--seed", type=int, help="seed for random boards")
    parser.add_argument("--fps", type=int, default=FPS, help="frame rate cap (default: %(default)s)")
    parser.add_argument("--no-auto-advance", dest="auto_advance", action="store_false",
                        help="keep the finished color selected instead of moving to the next one")
    parser.add_argument("--log-file", help="write logs to this file")
    parser.add_argument("--log-level", default="INFO", help="log level (default: %(default)s)")
    return parser


def load_board(args: argparse.Namespace, rng: random.Random) -> BoardData:
    if args.image:
        return load_ppm(args.image)
    cols, rows = args.random or (DEFAULT_RANDOM_COLS, DEFAULT_RANDOM_ROWS)
    return BoardData.random(cols, rows, rng=rng)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.image and args.random:
        parser.error("give either an image or --random, not both")
    try:
        configure_logging(args.log_file, args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    rng = random.Random(args.seed)
    try:
        board_data = load_board(args, rng)
    except (BoardLoadError, OSError) as exc:
        logger.error("Could not load board: %s", exc)
        parser.exit(1, f"error: {exc}\n")

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        parser.exit(1, "error: an interactive terminal is required\n")

    screen = TerminalScreen()
    app = PaintApp(
        board_data,
        screen,
        TerminalInput(sys.stdin.fileno()),
        fps=args.fps,
        auto_advance=args.auto_advance,
        rng=rng,
    )
    logger.info("Starting %dx%d board with %d colors", board_data.width, board_data.height, board_data.color_count())
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
