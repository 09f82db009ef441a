"""Game state machine — selection, move application, jump chains, results."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GameMode, GameResult
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.rules import Rules
from checkie.core.types import Square, on_board
from checkie.game.errors import GameOver, IllegalMove, InvalidSelection, MustCapture
from checkie.game.interfaces import GamePhase


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Snapshot of piece counts and the winner, for display."""

    red_count: int
    black_count: int
    result: GameResult

    @property
    def winner(self) -> Color | None:
        return self.result.winner


@dataclass
class GameState:
    """Everything one game needs: board, turn, mode and chain bookkeeping.

    ``select_square`` and ``apply_move`` are the only mutating entry
    points.  Both validate first and raise a
    :class:`~checkie.game.errors.RulesError` without touching the state
    when the request is refused.

    While ``chain_square`` is set the same side keeps the turn, only that
    square may act and ``forced_squares`` is left as it was.  The forced
    set is recomputed exactly once per turn change.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.RED
    mode: GameMode = GameMode.STANDARD
    chain_square: Square | None = field(default=None, init=False)
    forced_squares: frozenset[Square] = field(default=frozenset(), init=False)
    selected_square: Square | None = field(default=None, init=False)
    legal_moves: list[Move] = field(default_factory=list, init=False)
    phase: GamePhase = field(default=GamePhase.IDLE, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)

    def __post_init__(self) -> None:
        self._begin_turn(mover=None)

    # ── Initialisation ───────────────────────────────────────────────────

    @classmethod
    def new(cls, mode: GameMode = GameMode.STANDARD) -> GameState:
        """Canonical starting position, red to move."""
        return cls(mode=mode)

    @classmethod
    def from_board(
        cls,
        board: Board,
        turn: Color = Color.RED,
        mode: GameMode = GameMode.STANDARD,
    ) -> GameState:
        """State for an arbitrary position. The state takes ownership of *board*."""
        return cls(board=board, turn=turn, mode=mode)

    def reset(self, mode: GameMode | None = None) -> None:
        """Start over from the initial position, keeping the mode unless given."""
        if mode is not None:
            self.mode = mode
        self.board = Board.initial()
        self.turn = Color.RED
        self.chain_square = None
        self._clear_selection()
        self._begin_turn(mover=None)

    # ── Selection ────────────────────────────────────────────────────────

    def select_square(self, sq: Square) -> list[Move]:
        """Select the piece on *sq* and compute where it may go.

        Raises:
            GameOver: the game already has a winner.
            InvalidSelection: *sq* is empty, off the board or holds an
                opponent's piece.
            MustCapture: a jump chain or a mandatory capture restricts
                selection to other squares.
        """
        self._ensure_in_progress(sq)
        piece = self.board[sq] if on_board(*sq) else None
        if piece is None:
            raise InvalidSelection(sq, "No piece to select")
        if piece.color != self.turn:
            raise InvalidSelection(sq, f"Not {piece.color!s}'s turn")

        if self.chain_square is not None:
            if sq != self.chain_square:
                raise MustCapture(sq, "The jumping piece must continue its chain")
        elif self.forced_squares and sq not in self.forced_squares:
            raise MustCapture(sq, "A capture is mandatory")

        moves = MoveGenerator(self.board).generate(sq)
        if self.chain_square is not None or self.forced_squares:
            moves = [m for m in moves if m.is_capture]

        self.selected_square = sq
        self.legal_moves = moves
        if self.chain_square is not None:
            self.phase = GamePhase.CHAINED
        else:
            self.phase = GamePhase.SELECTED
        return list(moves)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, sq: Square) -> Move:
        """Move the selected piece to *sq* and return the move played.

        Order of effects: relocate, crown, remove the captured piece, then
        either continue the chain (same piece, captures only) or pass the
        turn.  Crowning happens before the continuation check, so a piece
        that is crowned mid-chain continues as a flying king.

        Raises:
            GameOver: the game already has a winner.
            IllegalMove: *sq* is not a destination of the current selection.
        """
        self._ensure_in_progress(sq)
        matches = [m for m in self.legal_moves if m.to_sq == sq]
        if len(matches) != 1:
            raise IllegalMove(sq, "Not a legal destination")
        move = matches[0]

        board = self.board
        piece = board[move.from_sq]
        assert piece is not None, "selection points at an empty square"
        board[move.from_sq] = None
        board[move.to_sq] = Rules.crowned(piece, move.to_sq)

        if move.captured is not None:
            board[move.captured] = None
            follow_ups = MoveGenerator(board).captures(move.to_sq)
            if follow_ups:
                self.chain_square = move.to_sq
                self.selected_square = move.to_sq
                self.legal_moves = follow_ups
                self.phase = GamePhase.CHAINED
                return move

        mover = self.turn
        self.chain_square = None
        self._clear_selection()
        self.turn = mover.opposite
        self._begin_turn(mover=mover)
        return move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        return self.result.winner

    @property
    def is_chaining(self) -> bool:
        return self.chain_square is not None

    def selectable_squares(self) -> frozenset[Square]:
        """Squares the side to move may currently select."""
        if self.is_game_over:
            return frozenset()
        if self.chain_square is not None:
            return frozenset((self.chain_square,))
        if self.forced_squares:
            return self.forced_squares
        return frozenset(self.board.pieces(self.turn))

    def must_jump_squares(self) -> frozenset[Square]:
        """Squares whose piece is obliged to capture right now."""
        if self.chain_square is not None:
            return frozenset((self.chain_square,))
        return self.forced_squares

    def destinations(self) -> list[Square]:
        """Target squares of the current selection."""
        return [m.to_sq for m in self.legal_moves]

    def status(self) -> GameStatus:
        return GameStatus(
            red_count=self.board.count(Color.RED),
            black_count=self.board.count(Color.BLACK),
            result=self.result,
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _clear_selection(self) -> None:
        self.selected_square = None
        self.legal_moves = []

    def _begin_turn(self, mover: Color | None) -> None:
        self.forced_squares = Rules.forced_capture_squares(self.board, self.turn)
        self.result = Rules.game_result(self.board, self.mode, mover)
        if self.result != GameResult.IN_PROGRESS:
            self.phase = GamePhase.GAME_OVER
        else:
            self.phase = GamePhase.IDLE

    def _ensure_in_progress(self, sq: Square) -> None:
        if self.is_game_over:
            raise GameOver(sq, f"Game is over, {self.winner!s} won")
