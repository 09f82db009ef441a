"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. Red moves first and promotes on row 0."""

    RED = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank."""

    SIMPLE = 1
    KING = 2


class GameMode(IntEnum):
    """Win-condition variant."""

    STANDARD = 0  # last side with pieces wins
    SUICIDE = 1  # first side to lose all pieces wins

    @classmethod
    def parse(cls, value: str | GameMode) -> GameMode:
        """Accept a mode selector value such as ``"suicide"``."""
        if isinstance(value, GameMode):
            return value
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown game mode: {value!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    RED_WINS = 1
    BLACK_WINS = 2

    @property
    def winner(self) -> Color | None:
        if self == GameResult.RED_WINS:
            return Color.RED
        if self == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @classmethod
    def won_by(cls, color: Color) -> GameResult:
        return cls.RED_WINS if color == Color.RED else cls.BLACK_WINS
