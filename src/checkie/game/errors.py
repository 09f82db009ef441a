"""Rejections raised by the game layer.

All of them are recoverable: the state is validated before anything is
mutated, so a rejected call leaves the game exactly as it was.
"""

from __future__ import annotations

from checkie.core.types import Square, square_name


class RulesError(ValueError):
    """Base class for a selection or move refused by the rules."""

    def __init__(self, square: Square, message: str) -> None:
        super().__init__(f"{message} ({square_name(square)})")
        self.square = square


class InvalidSelection(RulesError):
    """Selected an empty square or a piece of the side not to move."""


class MustCapture(RulesError):
    """Selected a piece that cannot take part in the mandatory capture."""


class IllegalMove(RulesError):
    """Destination is not among the selected piece's legal moves."""


class GameOver(RulesError):
    """The game already has a winner."""
