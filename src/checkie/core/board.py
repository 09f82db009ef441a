"""Board - piece placement on an 8x8 draughts board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from checkie.core.enums import Color, Rank
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Square, is_dark, on_board

_COLOR_COUNT = 2
_START_ROWS: dict[Color, range] = {
    Color.BLACK: range(0, 3),
    Color.RED: range(5, 8),
}


class Board:
    """Mutable 8x8 grid of ``Piece | None`` with incremental piece counts.

    Squares are addressed as ``board[row, col]``.  Placement on light
    squares is not rejected here; every generated move keeps pieces on
    dark squares.
    """

    __slots__ = ("_squares", "_counts")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        # [color] -> number of pieces on the board.
        self._counts: list[int] = [0] * _COLOR_COUNT

    @staticmethod
    def _index(sq: Square) -> int:
        row, col = sq
        if not on_board(row, col):
            raise IndexError(f"Square off the board: {sq!r}")
        return row * BOARD_SIZE + col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        idx = self._index(sq)
        old_piece = self._squares[idx]
        if old_piece == piece:
            return
        if old_piece is not None:
            self._counts[int(old_piece.color)] -= 1
        self._squares[idx] = piece
        if piece is not None:
            self._counts[int(piece.color)] += 1

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def count(self, color: Color) -> int:
        """Number of *color*'s pieces on the board."""
        return self._counts[int(color)]

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, in row-major order."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Iterate ``(square, piece)`` over every occupied square."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield divmod(idx, BOARD_SIZE), piece

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._counts = self._counts.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._counts = [0] * _COLOR_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: black rows 0–2, red rows 5–7."""
        b = cls()
        for color, rows in _START_ROWS.items():
            for row in rows:
                for col in range(BOARD_SIZE):
                    if is_dark(row, col):
                        b[row, col] = Piece(color, Rank.SIMPLE)
        return b

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Board:
        """Build a board from a text diagram, row 0 first.

        Each row holds eight characters: ``.`` for empty, ``r``/``b`` for
        simple pieces and ``R``/``B`` for kings.  Whitespace is ignored.
        """
        lines = ["".join(line.split()) for line in rows]
        lines = [line for line in lines if line]
        if len(lines) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(lines)}")
        b = cls()
        for row, line in enumerate(lines):
            if len(line) != BOARD_SIZE:
                raise ValueError(f"Row {row} must have {BOARD_SIZE} squares: {line!r}")
            for col, char in enumerate(line):
                if char != ".":
                    b[row, col] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[row, col]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  " + " ".join(str(c) for c in range(BOARD_SIZE)))
        return "\n".join(rows)
