"""Tests for Player implementations."""

import random

from chesster.core.board import Board
from chesster.core.enums import Color
from chesster.core.move_generator import MoveGenerator
from chesster.game.player import HumanPlayer, RandomPlayer, players_from_settings
from chesster.settings import GameSettings

EMPTY = "........"


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(Color.WHITE, "Alice")
        assert p.color == Color.WHITE
        assert p.name == "Alice"
        assert p.is_human is True

    def test_default_name(self) -> None:
        p = HumanPlayer(Color.BLACK)
        assert "black" in p.name.lower()

    def test_choose_move_returns_none(self) -> None:
        p = HumanPlayer(Color.WHITE)
        assert p.choose_move(Board.initial()) is None


class TestRandomPlayer:
    def test_properties(self) -> None:
        p = RandomPlayer(Color.BLACK)
        assert p.color == Color.BLACK
        assert p.name == "Computer"
        assert p.is_human is False

    def test_move_is_legal(self) -> None:
        board = Board.initial()
        p = RandomPlayer(Color.WHITE, random.Random(3))
        move = p.choose_move(board)
        assert move is not None
        assert MoveGenerator(board).is_legal(move, Color.WHITE)

    def test_seeded_players_agree(self) -> None:
        board = Board.initial()
        a = RandomPlayer(Color.WHITE, random.Random(11))
        b = RandomPlayer(Color.WHITE, random.Random(11))
        assert [a.choose_move(board) for _ in range(5)] == [
            b.choose_move(board) for _ in range(5)
        ]

    def test_does_not_touch_board(self) -> None:
        board = Board.initial()
        before = board.copy()
        RandomPlayer(Color.WHITE, random.Random(0)).choose_move(board)
        assert board == before

    def test_none_when_stalemated(self) -> None:
        board = Board.from_rows([*[EMPTY] * 5, "......qk", EMPTY, ".......K"])
        assert RandomPlayer(Color.WHITE).choose_move(board) is None

    def test_only_move_chosen(self) -> None:
        # Black king h8 in check from the rook on a8 can only step to g7 or h7.
        board = Board.from_rows(["R......k", *[EMPTY] * 6, "K......."])
        p = RandomPlayer(Color.BLACK, random.Random(5))
        move = p.choose_move(board)
        assert move is not None
        assert move.uci in {"h8g7", "h8h7"}


class TestPlayersFromSettings:
    def test_both_human_by_default(self) -> None:
        white, black = players_from_settings(GameSettings())
        assert white.is_human and black.is_human
        assert white.color == Color.WHITE
        assert black.color == Color.BLACK

    def test_computer_side(self) -> None:
        white, black = players_from_settings(GameSettings(opponent_color=Color.BLACK))
        assert white.is_human
        assert not black.is_human
        assert black.color == Color.BLACK

    def test_seed_makes_games_repeatable(self) -> None:
        settings = GameSettings(opponent_color=Color.WHITE, seed=99)
        board = Board.initial()
        first, _ = players_from_settings(settings)
        second, _ = players_from_settings(settings)
        assert first.choose_move(board) == second.choose_move(board)
