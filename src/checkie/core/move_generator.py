"""Per-piece move generation for simple pieces and flying kings."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.types import (
    BOARD_SIZE,
    DIAGONALS,
    Square,
    forward_diagonals,
    on_board,
)

# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> dict[Square, tuple[tuple[Square, ...], ...]]:
    """For each square, the squares along each diagonal out to the edge."""
    rays: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            square_rays: list[tuple[Square, ...]] = []
            for dr, dc in DIAGONALS:
                r, c = row + dr, col + dc
                ray: list[Square] = []
                while on_board(r, c):
                    ray.append((r, c))
                    r += dr
                    c += dc
                square_rays.append(tuple(ray))
            rays[(row, col)] = tuple(square_rays)
    return rays


_DIAGONAL_RAYS = _build_rays()


class MoveGenerator:
    """Generates candidate moves for a single piece on a :class:`Board`.

    The generator knows nothing about whose turn it is, about mandatory
    captures elsewhere on the board, or about an ongoing jump chain.  Both
    captures and walks are returned; filtering is the caller's job.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate(self, sq: Square, piece: Piece | None = None) -> list[Move]:
        """All candidate moves for the piece on *sq*.

        *piece* overrides the board's occupant, which lets the caller ask
        for the move set of a just-promoted piece.
        """
        if piece is None:
            piece = self._board[sq]
        if piece is None:
            return []
        moves: list[Move] = []
        if piece.is_king:
            self._gen_flying(sq, piece, moves)
        else:
            self._gen_simple(sq, piece, moves)
        return moves

    def captures(self, sq: Square, piece: Piece | None = None) -> list[Move]:
        """Only the capturing moves for the piece on *sq*."""
        return [m for m in self.generate(sq, piece) if m.is_capture]

    def has_capture(self, sq: Square) -> bool:
        return any(m.is_capture for m in self.generate(sq))

    # -- Simple pieces ------------------------------------------------------

    def _gen_simple(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        row, col = sq

        # Captures go along all four diagonals, backward included.
        for ray in _DIAGONAL_RAYS[sq]:
            if len(ray) < 2:
                continue
            over, land = ray[0], ray[1]
            victim = board[over]
            if victim is None or not victim.is_enemy_of(piece):
                continue
            if board[land] is None:
                moves.append(Move(sq, land, captured=over))

        # Walks go forward only.
        for dr, dc in forward_diagonals(piece.color):
            to = (row + dr, col + dc)
            if on_board(*to) and board[to] is None:
                moves.append(Move(sq, to))

    # -- Flying kings -------------------------------------------------------

    def _gen_flying(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        append = moves.append

        for ray in _DIAGONAL_RAYS[sq]:
            captured: Square | None = None
            for to in ray:
                occupant = board[to]
                if occupant is None:
                    append(Move(sq, to, captured=captured))
                    continue
                # Second piece on the line, or own piece: the run ends here.
                if captured is not None or not occupant.is_enemy_of(piece):
                    break
                captured = to


def generate_moves(board: Board, sq: Square) -> list[Move]:
    """Functional shortcut for ``MoveGenerator(board).generate(sq)``."""
    return MoveGenerator(board).generate(sq)
