"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color, Rank

# Diagram character ↔ (Color, Rank)
_CHAR_MAP: dict[str, tuple[Color, Rank]] = {
    "r": (Color.RED, Rank.SIMPLE),
    "R": (Color.RED, Rank.KING),
    "b": (Color.BLACK, Rank.SIMPLE),
    "B": (Color.BLACK, Rank.KING),
}

_UNICODE: dict[tuple[Color, Rank], str] = {
    (Color.RED, Rank.SIMPLE): "⛀",
    (Color.RED, Rank.KING): "⛁",
    (Color.BLACK, Rank.SIMPLE): "⛂",
    (Color.BLACK, Rank.KING): "⛃",
}

_CHARS: dict[tuple[Color, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for a draughts piece."""

    color: Color
    rank: Rank = Rank.SIMPLE

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def is_enemy_of(self, other: Piece) -> bool:
        return self.color != other.color

    def promoted(self) -> Piece:
        """The crowned version of this piece (kings are returned unchanged)."""
        if self.is_king:
            return self
        return Piece(self.color, Rank.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (lowercase = simple, uppercase = king)."""
        return _CHARS[(self.color, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from diagram character, e.g. 'R' → red king."""
        try:
            color, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, rank)

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛁."""
        return _UNICODE[(self.color, self.rank)]
