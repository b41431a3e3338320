"""Tests for Board and Piece."""

import pytest

from chesster.core.board import Board
from chesster.core.enums import Color, PieceType
from chesster.core.move import Move
from chesster.core.piece import Piece
from chesster.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
)


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_str(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KING)) == "K"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    def test_moved_is_new_value(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        moved = pawn.moved()
        assert moved.has_moved
        assert not pawn.has_moved
        assert moved.moved() is moved


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_white_pawns(self) -> None:
        board = Board.initial()
        pawns = board.pieces(Color.WHITE, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(48 <= sq < 56 for sq in pawns)  # rank 2

    def test_black_pawns(self) -> None:
        board = Board.initial()
        pawns = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(8 <= sq < 16 for sq in pawns)  # rank 7

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        assert all(not piece.has_moved for _, piece in board.occupied())
        assert board.last_move is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        board.last_move = Move(E2, E4)
        copy = board.copy()
        assert board == copy
        assert copy.last_move == Move(E2, E4)
        copy[E1] = None
        copy.last_move = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board.last_move == Move(E2, E4)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing(self) -> None:
        assert Board().king_square(Color.WHITE) is None

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_rows_roundtrip(self) -> None:
        board = Board.initial()
        assert board.rows()[0] == "rnbqkbnr"
        assert board.rows()[7] == "RNBQKBNR"
        assert Board.from_rows(board.rows()) == board

    def test_from_rows_marks_moved(self) -> None:
        board = Board.from_rows(["....k...", *["........"] * 6, "....K..."], has_moved=True)
        assert board[E1] == Piece(Color.WHITE, PieceType.KING, has_moved=True)

    def test_from_rows_rejects_bad_layout(self) -> None:
        with pytest.raises(ValueError, match="8 rows"):
            Board.from_rows(["........"] * 7)
        with pytest.raises(ValueError, match="8 squares"):
            Board.from_rows(["......."] + ["........"] * 7)
        with pytest.raises(ValueError, match="Invalid piece character"):
            Board.from_rows(["...x...."] + ["........"] * 7)

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text
        assert text.splitlines()[0].startswith("8 r")
