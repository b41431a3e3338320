"""Board - piece placement on an 8x8 board plus the most recent move."""

from __future__ import annotations

from collections.abc import Iterator

from chesster.core.enums import Color, PieceType
from chesster.core.move import Move
from chesster.core.piece import Piece
from chesster.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board.

    ``last_move`` remembers only the move that produced the current
    placement; en passant eligibility is derived from it.
    """

    __slots__ = ("_squares", "last_move")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self.last_move: Move | None = None

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) pairs in row-major order."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, in row-major order."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq for sq, piece in self.occupied() if piece.is_a(color, piece_type)
        ]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None when it is missing."""
        for sq, piece in self.occupied():
            if piece.is_a(color, PieceType.KING):
                return sq
        return None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b.last_move = self.last_move
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b[make_square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)

        for col, pt in enumerate(_BACK_RANK):
            b[make_square(7, col)] = Piece(Color.WHITE, pt)
            b[make_square(0, col)] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_rows(cls, rows: list[str], *, has_moved: bool = False) -> Board:
        """Build a board from 8 strings of 8 piece letters or '.'.

        Row 0 is rank 8. Raises ValueError on a malformed layout.
        """
        if len(rows) != 8:
            raise ValueError(f"Board needs 8 rows, got {len(rows)}")
        b = cls()
        for row, text in enumerate(rows):
            if len(text) != 8:
                raise ValueError(f"Board row {row} must have 8 squares: {text!r}")
            for col, ch in enumerate(text):
                if ch != ".":
                    b[make_square(row, col)] = Piece.from_char(ch, has_moved=has_moved)
        return b

    def rows(self) -> list[str]:
        """Inverse of :meth:`from_rows`."""
        rows: list[str] = []
        for row in range(8):
            text = ""
            for col in range(8):
                p = self._squares[make_square(row, col)]
                text += str(p) if p else "."
            rows.append(text)
        return rows

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        lines: list[str] = []
        for row, text in enumerate(self.rows()):
            lines.append(f"{8 - row} {' '.join(text)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
