"""Lookups for the singleton components every system needs."""
from __future__ import annotations

from esper import World

from pbn.components.board import Board
from pbn.components.game_state import GameMode, GameState
from pbn.components.palette import Palette
from pbn.components.terminal_size import TerminalSize
from pbn.components.viewport import Viewport


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError('Board not found')


def get_palette(world: World) -> Palette:
    for _, palette in world.get_component(Palette):
        return palette
    raise RuntimeError('Palette not found')


def get_viewport(world: World) -> Viewport:
    for _, viewport in world.get_component(Viewport):
        return viewport
    raise RuntimeError('Viewport not found')


def get_terminal_size(world: World) -> TerminalSize:
    for _, size in world.get_component(TerminalSize):
        return size
    ent = world.create_entity(TerminalSize())
    return world.component_for_entity(ent, TerminalSize)


def current_mode(world: World) -> GameMode:
    states = list(world.get_component(GameState))
    if not states:
        return GameMode.PLAYING
    return states[0][1].mode
