"""Qt bridge exposing a game controller through signals and slots."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.move import Move
from checkie.core.types import Square
from checkie.game.controller import GameController
from checkie.game.errors import RulesError
from checkie.game.interfaces import GameSettings
from checkie.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class GameSession(QObject):
    """Thread-affine adapter between a board widget and :class:`GameController`.

    The widget translates clicks into ``select_square`` / ``apply_move``
    calls and redraws from ``state_changed``; nothing here renders.
    """

    state_changed = pyqtSignal(object)  # GameState
    selection_changed = pyqtSignal(object)  # list of destination squares
    turn_changed = pyqtSignal(object)  # Color
    game_over = pyqtSignal(object)  # GameResult
    move_rejected = pyqtSignal(str)

    __slots__ = ("_controller",)

    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self._controller = controller or GameController()
        events = self._controller.events
        events.on_selection.append(self._on_selection)
        events.on_move.append(self._on_move)
        events.on_turn_changed.append(self.turn_changed.emit)
        events.on_game_over.append(self.game_over.emit)
        events.on_rejected.append(self._on_rejected)

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def state(self) -> GameState:
        return self._controller.state

    @pyqtSlot(str)
    def new_game(self, mode_name: str) -> None:
        """Start a new game from a mode-selector value."""
        try:
            settings = GameSettings.from_selector(mode_name)
        except ValueError:
            _LOGGER.warning(
                "Unknown game mode %r, keeping %s",
                mode_name,
                self._controller.settings.mode,
            )
            settings = None
        self._controller.new_game(settings)
        self.selection_changed.emit([])
        self.state_changed.emit(self._controller.state)

    @pyqtSlot(int, int)
    def select_square(self, row: int, col: int) -> None:
        self._controller.select_square((row, col))

    @pyqtSlot(int, int)
    def apply_move(self, row: int, col: int) -> None:
        self._controller.apply_move((row, col))

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_selection(self, _sq: Square, moves: list[Move]) -> None:
        self.selection_changed.emit([m.to_sq for m in moves])

    def _on_move(self, _move: Move, state: GameState) -> None:
        self.selection_changed.emit(state.destinations())
        self.state_changed.emit(state)

    def _on_rejected(self, exc: RulesError) -> None:
        self.move_rejected.emit(str(exc))
