"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chesster.core.board import Board
from chesster.core.enums import Color
from chesster.core.executor import execute_move
from chesster.core.move import Move
from chesster.core.move_generator import MoveGenerator

PlayFn = Callable[..., Board]


@pytest.fixture
def play() -> PlayFn:
    """Play coordinate moves on a board, alternating sides.

    Each move is asserted legal before it is executed.
    """

    def _play(board: Board, *moves: str, first: Color = Color.WHITE) -> Board:
        color = first
        for text in moves:
            move = Move.from_uci(text)
            assert MoveGenerator(board).is_legal(move, color), f"{text} should be legal"
            execute_move(board, move)
            color = color.opposite
        return board

    return _play


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()
