"""Core domain layer — pure draughts logic with zero external dependencies.

Quick start::

    from checkie.core import Board, MoveGenerator

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.generate((5, 0)):
        print(move)
"""

from checkie.core.board import Board
from checkie.core.enums import Color, GameMode, GameResult, Rank
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator, generate_moves
from checkie.core.piece import Piece
from checkie.core.rules import Rules
from checkie.core.types import (
    BOARD_SIZE,
    Square,
    is_dark,
    on_board,
    promotion_row,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameMode",
    "GameResult",
    "Rank",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "is_dark",
    "on_board",
    "promotion_row",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "generate_moves",
]
