"""Game management layer — controller, state machine, rejections.

Quick start::

    from checkie.game import GameController, GameSettings
    from checkie.core import GameMode

    ctrl = GameController(GameSettings(mode=GameMode.SUICIDE))
    ctrl.select_square((5, 0))
    ctrl.apply_move((4, 1))

The PyQt6 adapter lives in :mod:`checkie.game.qt_bridge` and is imported
on demand so the rules can run without a Qt installation.
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.errors import (
    GameOver,
    IllegalMove,
    InvalidSelection,
    MustCapture,
    RulesError,
)
from checkie.game.interfaces import GamePhase, GameSettings, IGameController
from checkie.game.state import GameState, GameStatus

__all__ = [
    # Interfaces
    "GamePhase",
    "GameSettings",
    "IGameController",
    # Errors
    "GameOver",
    "IllegalMove",
    "InvalidSelection",
    "MustCapture",
    "RulesError",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "GameStatus",
]
