"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesster.core.enums import Color, GameResult
from chesster.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chesster.core.board import Board


class Rules:
    """Static rule-checker for the side to move on a :class:`Board`.

    Repetition and fifty-move draws are not tracked; a game ends only by
    checkmate or stalemate.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        return not gen.has_any_legal_move(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if gen.is_in_check(color):
            return False
        return not gen.has_any_legal_move(color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the game result with *side_to_move* about to play."""
        gen = MoveGenerator(board)
        if gen.has_any_legal_move(side_to_move):
            return GameResult.IN_PROGRESS
        if gen.is_in_check(side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
