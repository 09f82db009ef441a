"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object for a single step or jump.

    A flying-king capture may land several squares beyond the enemy piece;
    ``captured`` always names the one piece removed by the move.
    """

    from_sq: Square
    to_sq: Square
    captured: Square | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"
