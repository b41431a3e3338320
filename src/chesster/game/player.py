"""Concrete player implementations."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from chesster.core.enums import Color
from chesster.core.move_generator import MoveGenerator
from chesster.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chesster.core.board import Board
    from chesster.core.move import Move
    from chesster.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


class HumanPlayer(IPlayer):
    """A human participant — moves come from user input.

    ``choose_move`` returns None because humans submit moves through
    the controller.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color.name.lower()})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, board: Board) -> Move | None:
        return None


class RandomPlayer(IPlayer):
    """Computer opponent that picks uniformly among the legal moves.

    Args:
        color: Side the computer plays.
        rng: Random source; pass a seeded ``random.Random`` for
            reproducible games.
        name: Display name.
    """

    __slots__ = ("_color", "_name", "_rng")

    def __init__(
        self,
        color: Color,
        rng: random.Random | None = None,
        name: str = "Computer",
    ) -> None:
        self._color = color
        self._rng = rng if rng is not None else random.Random()
        self._name = name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def choose_move(self, board: Board) -> Move | None:
        moves = MoveGenerator(board).generate_legal_moves(self._color)
        if not moves:
            _LOGGER.debug("%s has no legal move", self._color)
            return None
        return self._rng.choice(moves)


def players_from_settings(settings: GameSettings) -> tuple[IPlayer, IPlayer]:
    """(white, black) players for the configured opponent side."""
    rng = random.Random(settings.seed)
    players: list[IPlayer] = []
    for color in (Color.WHITE, Color.BLACK):
        if color == settings.opponent_color:
            players.append(RandomPlayer(color, rng))
        else:
            players.append(HumanPlayer(color))
    return players[0], players[1]
