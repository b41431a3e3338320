"""Per-piece movement patterns.

A move is *pattern-valid* when the moving piece's geometry allows it on the
current board: sliding paths are clear and the destination is empty or
holds an opposing piece. Whether the move exposes the mover's own king is
not considered here (see :mod:`chesster.core.move_generator`).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chesster.core.enums import Color, PieceType
from chesster.core.types import Square, col_of, make_square, row_of

if TYPE_CHECKING:
    from chesster.core.board import Board
    from chesster.core.piece import Piece

PatternFn = Callable[["Piece", Square, Square, "Board"], bool]


def forward(color: Color) -> int:
    """Row step of a pawn of *color*."""
    return -1 if color == Color.WHITE else 1


def home_row(color: Color) -> int:
    """Row a pawn of *color* starts on."""
    return 6 if color == Color.WHITE else 1


def back_row(color: Color) -> int:
    """Row holding *color*'s king and rooks at the start."""
    return 7 if color == Color.WHITE else 0


def promotion_row(color: Color) -> int:
    """Row on which a pawn of *color* promotes."""
    return back_row(color.opposite)


def _step(delta: int) -> int:
    return (delta > 0) - (delta < 0)


def _landing_ok(piece: Piece, end: Square, board: Board) -> bool:
    target = board[end]
    return target is None or target.color != piece.color


def _path_clear(start: Square, end: Square, board: Board) -> bool:
    """Squares strictly between *start* and *end* on a line are empty."""
    dr = _step(row_of(end) - row_of(start))
    dc = _step(col_of(end) - col_of(start))
    r, c = row_of(start) + dr, col_of(start) + dc
    while (r, c) != (row_of(end), col_of(end)):
        if not board.is_empty(make_square(r, c)):
            return False
        r += dr
        c += dc
    return True


# -- Patterns -----------------------------------------------------------------


def _pawn(piece: Piece, start: Square, end: Square, board: Board) -> bool:
    dr = row_of(end) - row_of(start)
    dc = col_of(end) - col_of(start)
    step = forward(piece.color)

    if dc == 0 and board.is_empty(end):
        if dr == step:
            return True
        if dr == 2 * step and row_of(start) == home_row(piece.color):
            return board.is_empty(make_square(row_of(start) + step, col_of(start)))
        return False

    if abs(dc) == 1 and dr == step:
        target = board[end]
        return target is not None and target.color != piece.color
    return False


def _rook(piece: Piece, start: Square, end: Square, board: Board) -> bool:
    if row_of(start) != row_of(end) and col_of(start) != col_of(end):
        return False
    return _path_clear(start, end, board) and _landing_ok(piece, end, board)


def _knight(piece: Piece, start: Square, end: Square, board: Board) -> bool:
    dr = abs(row_of(end) - row_of(start))
    dc = abs(col_of(end) - col_of(start))
    if (dr, dc) not in ((1, 2), (2, 1)):
        return False
    return _landing_ok(piece, end, board)


def _bishop(piece: Piece, start: Square, end: Square, board: Board) -> bool:
    dr = abs(row_of(end) - row_of(start))
    dc = abs(col_of(end) - col_of(start))
    if dr != dc:
        return False
    return _path_clear(start, end, board) and _landing_ok(piece, end, board)


def _queen(piece: Piece, start: Square, end: Square, board: Board) -> bool:
    return _rook(piece, start, end, board) or _bishop(piece, start, end, board)


def _king_step(piece: Piece, start: Square, end: Square, board: Board) -> bool:
    dr = abs(row_of(end) - row_of(start))
    dc = abs(col_of(end) - col_of(start))
    return dr <= 1 and dc <= 1 and _landing_ok(piece, end, board)


def is_castle_candidate(piece: Piece, start: Square, end: Square, board: Board) -> bool:
    """King two columns sideways with an unmoved rook and a clear path.

    Only occupancy is checked; attacked squares are left to the caller.
    """
    if piece.piece_type != PieceType.KING or piece.has_moved:
        return False
    row = row_of(start)
    if row != back_row(piece.color) or row_of(end) != row:
        return False
    dc = col_of(end) - col_of(start)
    if abs(dc) != 2:
        return False

    rook_sq = make_square(row, 7 if dc > 0 else 0)
    rook = board[rook_sq]
    if rook is None or rook.has_moved or not rook.is_a(piece.color, PieceType.ROOK):
        return False
    return _path_clear(start, rook_sq, board)


def _king(piece: Piece, start: Square, end: Square, board: Board) -> bool:
    if _king_step(piece, start, end, board):
        return True
    return is_castle_candidate(piece, start, end, board)


_PATTERNS: dict[PieceType, PatternFn] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}


# -- Public API ---------------------------------------------------------------


def is_pattern_valid(piece: Piece, start: Square, end: Square, board: Board) -> bool:
    """Whether *piece* on *start* may geometrically move to *end*."""
    if start == end:
        return False
    return _PATTERNS[piece.piece_type](piece, start, end, board)


def attacks(piece: Piece, start: Square, target: Square, board: Board) -> bool:
    """Whether *piece* on *start* attacks *target*.

    A square is attacked when the piece has a pattern-valid move onto it,
    except that kings attack only adjacent squares (never through the
    castle branch).
    """
    if piece.piece_type == PieceType.KING:
        return start != target and _king_step(piece, start, target, board)
    return is_pattern_valid(piece, start, target, board)
