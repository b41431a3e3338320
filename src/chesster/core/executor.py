"""Commits a legal move to the board."""

from __future__ import annotations

from chesster.core.board import Board
from chesster.core.enums import MoveKind, PieceType
from chesster.core.move import Move
from chesster.core.move_generator import MoveGenerator
from chesster.core.piece import Piece
from chesster.core.types import col_of, make_square, row_of, square_name


def execute_move(board: Board, move: Move) -> MoveKind:
    """Apply *move* to *board* and return how it was carried out.

    The move must already have passed
    :meth:`MoveGenerator.is_legal_move`; legality is not re-checked and
    an illegal move leaves the board in an unspecified state.
    """
    kind = MoveGenerator(board).classify_move(move)

    piece = board[move.start]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.start)}")

    # En passant: the captured pawn sits beside the origin, not on the target
    if kind == MoveKind.EN_PASSANT:
        board[make_square(row_of(move.start), col_of(move.end))] = None

    board[move.end] = piece.moved()
    board[move.start] = None

    if kind == MoveKind.CASTLE:
        toward = 1 if col_of(move.end) > col_of(move.start) else -1
        row = row_of(move.end)
        rook_from = make_square(row, 7 if toward > 0 else 0)
        rook_to = make_square(row, col_of(move.end) - toward)
        rook = board[rook_from]
        board[rook_from] = None
        if rook is not None:
            board[rook_to] = rook.moved()
    elif kind == MoveKind.PROMOTION:
        board[move.end] = Piece(piece.color, PieceType.QUEEN, has_moved=True)

    board.last_move = move
    return kind
