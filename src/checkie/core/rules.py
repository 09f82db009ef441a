"""High-level draughts rules: forced captures, promotion, win detection."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color, GameMode, GameResult
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.types import Square, promotion_row


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - Capturing is mandatory across the whole board.
    # - No draw detection: a blocked side simply has nothing to select.

    @staticmethod
    def forced_capture_squares(board: Board, color: Color) -> frozenset[Square]:
        """Squares of *color* whose occupant has at least one capture."""
        gen = MoveGenerator(board)
        return frozenset(sq for sq in board.pieces(color) if gen.has_capture(sq))

    @staticmethod
    def crowned(piece: Piece, sq: Square) -> Piece:
        """*piece* after landing on *sq*: simple pieces reaching their
        promotion row become kings, everything else is unchanged.
        """
        if not piece.is_king and sq[0] == promotion_row(piece.color):
            return piece.promoted()
        return piece

    @staticmethod
    def evaluate(
        red_count: int,
        black_count: int,
        mode: GameMode,
        mover: Color | None = None,
    ) -> GameResult:
        """Winner from piece counts alone.

        Standard: the side left with pieces wins.  Suicide: the side that
        has lost all of its pieces wins.  If both counts are zero the
        *mover* (the side that made the last move) wins; without one red
        wins in either mode.
        """
        if red_count == 0 and black_count == 0 and mover is not None:
            return GameResult.won_by(mover)
        if mode == GameMode.SUICIDE:
            if red_count == 0:
                return GameResult.RED_WINS
            if black_count == 0:
                return GameResult.BLACK_WINS
            return GameResult.IN_PROGRESS
        if black_count == 0:
            return GameResult.RED_WINS
        if red_count == 0:
            return GameResult.BLACK_WINS
        return GameResult.IN_PROGRESS

    @staticmethod
    def game_result(
        board: Board, mode: GameMode, mover: Color | None = None
    ) -> GameResult:
        """Determine the current game result for *board*."""
        return Rules.evaluate(
            board.count(Color.RED), board.count(Color.BLACK), mode, mover
        )
