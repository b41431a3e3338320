"""Abstract interfaces for the game layer.

The controller depends on :class:`IPlayer`, not on concrete players, so
human input and the computer opponent plug in the same way.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesster.core.enums import Color

if TYPE_CHECKING:
    from chesster.core.board import Board
    from chesster.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game.

    ``CHECKMATE`` and ``STALEMATE`` are terminal.
    """

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    CHECKMATE = auto()
    STALEMATE = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or computer)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, board: Board) -> Move | None:
        """Pick a move on *board*, or None when the player picks none here."""
