"""Move value object (coordinate notation)."""

from __future__ import annotations

from dataclasses import dataclass

from chesster.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move request.

    The move carries only its endpoints; how it is executed (castle,
    en passant, promotion) is decided from the board it is played on.
    """

    start: Square
    end: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.start)}{square_name(self.end)}"

    @property
    def uci(self) -> str:
        """Four-character coordinate notation, e.g. ``e2e4``."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``<file><rank><file><rank>``, e.g. 'e2e4'."""
        text = text.strip()
        if len(text) != 4:
            raise ValueError(f"Invalid move (expected 4 characters): {text!r}")
        try:
            return cls(parse_square(text[:2]), parse_square(text[2:]))
        except ValueError:
            raise ValueError(f"Invalid move (square out of range): {text!r}") from None
