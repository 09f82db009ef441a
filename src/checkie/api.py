"""Functional entry points for a rendering layer.

Each call takes the :class:`GameState` explicitly and hands the same
state back, so a front end can thread one value through its event loop::

    state = new_game("suicide")
    state = select_square(state, 5, 0)
    state = apply_move(state, 4, 1)
    print(get_status(state).winner)

Refusals raise :class:`~checkie.game.errors.RulesError` subclasses and
leave the state untouched.
"""

from __future__ import annotations

from checkie.core.enums import GameMode
from checkie.game.state import GameState, GameStatus


def new_game(mode: GameMode | str = GameMode.STANDARD) -> GameState:
    """Canonical initial position for *mode*, red to move."""
    return GameState.new(GameMode.parse(mode))


def select_square(state: GameState, row: int, col: int) -> GameState:
    state.select_square((row, col))
    return state


def apply_move(state: GameState, row: int, col: int) -> GameState:
    state.apply_move((row, col))
    return state


def get_status(state: GameState) -> GameStatus:
    return state.status()


__all__ = ["apply_move", "get_status", "new_game", "select_square"]
