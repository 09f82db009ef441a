"""GameController — the central orchestrator of a draughts game.

Coordinates: GameSettings, GameState.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.enums import Color, GameResult
from checkie.core.move import Move
from checkie.core.types import Square, square_name
from checkie.game.errors import RulesError
from checkie.game.interfaces import GamePhase, GameSettings, IGameController
from checkie.game.state import GameState, GameStatus

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Square, list[Move]], None]  # square, legal moves
MoveCallback = Callable[[Move, GameState], None]
ChainCallback = Callable[[Square, list[Move]], None]  # chain square, captures
TurnCallback = Callable[[Color], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
RejectedCallback = Callable[[RulesError], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_chain: list[ChainCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates selections and moves, tracks
    chains and turns, notifies listeners.

    Thread-safety: one controller per game, driven from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_settings", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings or GameSettings()
        self._state = GameState.new(self._settings.mode)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def turn(self) -> Color:
        return self._state.turn

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, settings: GameSettings | None = None) -> None:
        if settings is not None:
            self._settings = settings
        self._state = GameState.new(self._settings.mode)
        _LOGGER.info("New %s game", self._settings.mode)

        self._emit_phase(self._state.phase)
        self._emit_turn(self._state.turn)

    def load_state(self, state: GameState) -> None:
        """Continue from an existing state, e.g. a composed position."""
        self._state = state
        self._settings = GameSettings(mode=state.mode)
        self._emit_phase(state.phase)
        if state.is_game_over:
            self._emit_game_over(state.result)
        else:
            self._emit_turn(state.turn)

    def select_square(self, sq: Square) -> bool:
        try:
            moves = self._state.select_square(sq)
        except RulesError as exc:
            self._reject(exc)
            return False

        _LOGGER.debug(
            "%s selected %s: %d legal move(s)",
            self._state.turn,
            square_name(sq),
            len(moves),
        )
        for cb in self.events.on_selection:
            cb(sq, moves)
        self._emit_phase(self._state.phase)
        return True

    def apply_move(self, sq: Square) -> bool:
        mover = self._state.turn
        try:
            move = self._state.apply_move(sq)
        except RulesError as exc:
            self._reject(exc)
            return False

        _LOGGER.debug("%s played %s", mover, move)
        for cb in self.events.on_move:
            cb(move, self._state)

        state = self._state
        if state.chain_square is not None:
            _LOGGER.debug("%s must keep jumping from %s", mover, square_name(sq))
            for cb in self.events.on_chain:
                cb(state.chain_square, list(state.legal_moves))
            self._emit_phase(GamePhase.CHAINED)
            return True

        if state.is_game_over:
            self._emit_game_over(state.result)
            return True

        self._emit_phase(state.phase)
        self._emit_turn(state.turn)
        return True

    def status(self) -> GameStatus:
        return self._state.status()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(self, exc: RulesError) -> None:
        _LOGGER.debug("Rejected: %s", exc)
        for cb in self.events.on_rejected:
            cb(exc)

    def _emit_turn(self, color: Color) -> None:
        for cb in self.events.on_turn_changed:
            cb(color)

    def _emit_game_over(self, result: GameResult) -> None:
        status = self._state.status()
        _LOGGER.info(
            "Game over in %s mode: %s wins (red %d, black %d)",
            self._state.mode,
            result.winner,
            status.red_count,
            status.black_count,
        )
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
