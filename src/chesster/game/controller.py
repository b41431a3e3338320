"""GameController — the central orchestrator of a chess game.

Coordinates: Players, GameState, MoveGenerator, persistence.
Emits events via simple callbacks so a front end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from chesster.core.enums import Color, GameResult
from chesster.core.move import Move
from chesster.core.move_generator import MoveGenerator
from chesster.core.types import Square, is_valid_square
from chesster.game.interfaces import GamePhase, IPlayer
from chesster.game.persistence import load_game, save_game
from chesster.game.player import HumanPlayer
from chesster.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full chess game: validates moves, switches turns,
    saves and restores games, notifies listeners.

    Rejected input never changes the game: malformed move text raises
    ValueError, an illegal move makes :meth:`submit_move` return False,
    and a failed load leaves the current game in place.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer | None = None,
        black: IPlayer | None = None,
    ) -> None:
        self._players = {
            Color.WHITE: white or HumanPlayer(Color.WHITE),
            Color.BLACK: black or HumanPlayer(Color.BLACK),
        }
        self._state = GameState()
        self._state.setup()
        self._announce_phase()

    def submit_move(self, move: Move) -> bool:
        """Play *move* for the side to move if it is legal."""
        state = self._state
        if state.phase != GamePhase.AWAITING_MOVE:
            return False
        if not state.is_legal(move):
            _LOGGER.info("Rejected illegal move %s for %s", move, state.side_to_move)
            return False

        record = state.apply_move(move)
        _LOGGER.debug("%s played %s (%s)", state.side_to_move.opposite, move, record.kind.name)
        self._emit_move(record)
        self._announce_phase()
        return True

    def submit_uci(self, text: str) -> bool:
        """Parse coordinate move text and submit it.

        Raises ValueError when *text* is not a 4-character move on the board.
        """
        return self.submit_move(Move.from_uci(text))

    def play_computer_move(self) -> Move | None:
        """Let a non-human side to move pick and play its move."""
        cp = self.current_player
        if cp is None or cp.is_human or self._state.is_game_over:
            return None
        move = cp.choose_move(self._state.board)
        if move is None or not self.submit_move(move):
            return None
        return move

    def legal_destinations(self, square: Square) -> list[Square]:
        """Legal targets for the side to move's piece on *square*."""
        if not is_valid_square(square) or self._state.is_game_over:
            return []
        gen = MoveGenerator(self._state.board)
        return gen.legal_destinations(square, self._state.side_to_move)

    # ── Persistence ──────────────────────────────────────────────────────

    def save(self, file_path: str | Path) -> Path:
        return save_game(file_path, self._state.board, self._state.history_text)

    def load(self, file_path: str | Path) -> None:
        """Replace the current game with the one saved at *file_path*.

        OSError and SnapshotError propagate with the current game untouched.
        """
        snapshot = load_game(file_path)
        state = GameState()
        state.restore(snapshot)
        self._state = state
        if not self._players:
            self._players = {
                Color.WHITE: HumanPlayer(Color.WHITE),
                Color.BLACK: HumanPlayer(Color.BLACK),
            }
        self._announce_phase()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _announce_phase(self) -> None:
        state = self._state
        self._emit_phase(state.phase)
        if state.is_game_over:
            _LOGGER.info("Game over: %s", state.result.name)
            for cb in self.events.on_game_over:
                cb(state.result)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
