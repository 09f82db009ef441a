"""Square type alias and coordinate helpers.

Board layout (row, col), row 0 at the top:
    row 0 is red's promotion edge, black starts on rows 0-2
    row 7 is black's promotion edge, red starts on rows 5-7
Only dark squares, where ``(row + col)`` is odd, ever hold pieces.
"""

from __future__ import annotations

from typing import TypeAlias

from checkie.core.enums import Color

Square: TypeAlias = tuple[int, int]  # (row, col), both 0–7

BOARD_SIZE = 8

DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# Row step that takes a simple piece away from its own back row.
_FORWARD_STEP: dict[Color, int] = {Color.RED: -1, Color.BLACK: 1}


def on_board(row: int, col: int) -> bool:
    """Whether (row, col) lies inside the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark(row: int, col: int) -> bool:
    """Dark (playable) squares have an odd coordinate sum."""
    return (row + col) % 2 == 1


def square_name(sq: Square) -> str:
    """Compact label used in logs and reprs, e.g. (5, 0) → 'r5c0'."""
    return f"r{sq[0]}c{sq[1]}"


def forward_diagonals(color: Color) -> tuple[tuple[int, int], ...]:
    """The two diagonals a simple piece of *color* may walk along."""
    dr = _FORWARD_STEP[color]
    return ((dr, -1), (dr, 1))


def promotion_row(color: Color) -> int:
    """Row on which a simple piece of *color* is crowned."""
    return 0 if color == Color.RED else BOARD_SIZE - 1
