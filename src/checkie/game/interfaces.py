"""Abstract interfaces and settings for the game layer.

The UI depends on :class:`IGameController`, not on the concrete
controller, and feeds it nothing but board coordinates.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import GameMode

if TYPE_CHECKING:
    from checkie.core.types import Square
    from checkie.game.state import GameStatus


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a single game."""

    IDLE = auto()  # nothing selected
    SELECTED = auto()  # a piece is chosen, destinations computed
    CHAINED = auto()  # mid multi-jump, only the jumping piece may act
    GAME_OVER = auto()


# ── Settings ─────────────────────────────────────────────────────────────────


@dataclass
class GameSettings:
    """All user-configurable game options."""

    mode: GameMode = GameMode.STANDARD

    @classmethod
    def from_selector(cls, value: str) -> GameSettings:
        """Settings from a mode-selector value such as ``"suicide"``."""
        return cls(mode=GameMode.parse(value))


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, settings: GameSettings | None = None) -> None:
        """Discard the current game and set up the initial position."""

    @abstractmethod
    def select_square(self, sq: Square) -> bool:
        """Select the piece on *sq*. Returns True if accepted."""

    @abstractmethod
    def apply_move(self, sq: Square) -> bool:
        """Move the selected piece to *sq*. Returns True if legal and applied."""

    @abstractmethod
    def status(self) -> GameStatus:
        """Piece counts and winner of the current game."""
