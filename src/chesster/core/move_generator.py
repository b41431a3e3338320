"""Legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesster.core.enums import Color, MoveKind, PieceType
from chesster.core.move import Move
from chesster.core.patterns import (
    attacks,
    forward,
    is_pattern_valid,
    promotion_row,
)
from chesster.core.types import Square, col_of, is_valid_square, make_square, row_of

if TYPE_CHECKING:
    from chesster.core.board import Board


class MoveGenerator:
    """Answers legality questions about a :class:`Board`.

    Every query is side-effect free: candidate moves are tried on a copy
    of the board, never on the board itself. Malformed input (off-board
    squares, empty origin) yields ``False`` or an empty result.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        if not is_valid_square(sq):
            return False
        board = self._board
        for from_sq, piece in board.occupied():
            if piece.color == by_color and attacks(piece, from_sq, sq, board):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    # -- Classification -----------------------------------------------------

    def en_passant_victim(self, start: Square, end: Square) -> Square | None:
        """Square of the pawn an en passant capture *start*→*end* removes.

        The victim must be an opposing pawn beside *start* that reached its
        square by a double step on the immediately preceding move.
        """
        board = self._board
        piece = board[start]
        if piece is None or piece.piece_type != PieceType.PAWN:
            return None
        if row_of(end) - row_of(start) != forward(piece.color):
            return None
        if abs(col_of(end) - col_of(start)) != 1 or not board.is_empty(end):
            return None

        victim_sq = make_square(row_of(start), col_of(end))
        victim = board[victim_sq]
        if victim is None or not victim.is_a(piece.color.opposite, PieceType.PAWN):
            return None

        last = board.last_move
        if last is None or last.end != victim_sq:
            return None
        if col_of(last.start) != col_of(last.end):
            return None
        if abs(row_of(last.end) - row_of(last.start)) != 2:
            return None
        return victim_sq

    def classify_move(self, move: Move) -> MoveKind:
        """How *move* would be carried out on the current board."""
        piece = self._board[move.start]
        if piece is None:
            return MoveKind.ORDINARY
        if self.en_passant_victim(move.start, move.end) is not None:
            return MoveKind.EN_PASSANT
        if piece.piece_type == PieceType.KING and _is_two_column_slide(move):
            return MoveKind.CASTLE
        if (
            piece.piece_type == PieceType.PAWN
            and row_of(move.end) == promotion_row(piece.color)
        ):
            return MoveKind.PROMOTION
        return MoveKind.ORDINARY

    # -- Legality -----------------------------------------------------------

    def is_legal_move(self, start: Square, end: Square, color: Color) -> bool:
        """Whether *color* may play *start*→*end* without exposing its king."""
        if not (is_valid_square(start) and is_valid_square(end)):
            return False
        board = self._board
        piece = board[start]
        if piece is None or piece.color != color:
            return False

        victim_sq = self.en_passant_victim(start, end)
        if victim_sq is None and not is_pattern_valid(piece, start, end, board):
            return False

        scratch = board.copy()
        if victim_sq is not None:
            scratch[victim_sq] = None
        scratch[end] = piece
        scratch[start] = None
        king_safe = not MoveGenerator(scratch).is_in_check(color)

        if piece.piece_type == PieceType.KING and _is_two_column_slide(Move(start, end)):
            passed = make_square(row_of(start), (col_of(start) + col_of(end)) // 2)
            return (
                king_safe
                and not self.is_in_check(color)
                and not self.is_square_attacked(passed, color.opposite)
            )
        return king_safe

    def is_legal(self, move: Move, color: Color) -> bool:
        return self.is_legal_move(move.start, move.end, color)

    # -- Enumeration --------------------------------------------------------

    def has_any_legal_move(self, color: Color) -> bool:
        """Stops at the first legal move found for *color*."""
        for start in self._board.all_pieces(color):
            for end in range(64):
                if self.is_legal_move(start, end, color):
                    return True
        return False

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All legal moves for *color*, ordered by start then end square."""
        moves: list[Move] = []
        for start in self._board.all_pieces(color):
            for end in self.legal_destinations(start, color):
                moves.append(Move(start, end))
        return moves

    def legal_destinations(self, start: Square, color: Color) -> list[Square]:
        """Squares the piece of *color* on *start* may legally move to."""
        if not is_valid_square(start):
            return []
        return [end for end in range(64) if self.is_legal_move(start, end, color)]


def _is_two_column_slide(move: Move) -> bool:
    return row_of(move.start) == row_of(move.end) and (
        abs(col_of(move.end) - col_of(move.start)) == 2
    )
