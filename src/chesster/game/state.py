"""Game state machine — tracks turns, phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chesster.core.board import Board
from chesster.core.enums import Color, GameResult, MoveKind
from chesster.core.executor import execute_move
from chesster.core.move import Move
from chesster.core.move_generator import MoveGenerator
from chesster.core.rules import Rules
from chesster.game.interfaces import GamePhase

if TYPE_CHECKING:
    from chesster.core.notation import Snapshot


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    kind: MoveKind
    was_capture: bool = False
    was_check: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: board, turn, phase, result, move history.

    Pure data and logic, no I/O.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[Move] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, history: list[Move] | None = None) -> None:
        """Initialise (or reset) the game.

        A *history* describes how *board* was reached and must come with
        it; the side to move is White after an even number of moves and
        Black otherwise. Raises ValueError for a history without a board.
        """
        if history and board is None:
            raise ValueError("A move history needs the board it produced")
        self.board = board if board is not None else Board.initial()
        self.move_history = list(history or [])
        self.side_to_move = (
            Color.WHITE if len(self.move_history) % 2 == 0 else Color.BLACK
        )
        self._enter_turn()

    def restore(self, snapshot: Snapshot) -> None:
        """Replace the whole game with a parsed snapshot."""
        self.setup(snapshot.board, [Move.from_uci(text) for text in snapshot.history])

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        board = self.board
        was_capture = board[move.end] is not None

        kind = execute_move(board, move)
        self.move_history.append(move)
        self.side_to_move = self.side_to_move.opposite

        record = MoveRecord(
            move=move,
            kind=kind,
            was_capture=was_capture or kind == MoveKind.EN_PASSANT,
            was_check=self.in_check,
        )
        self._enter_turn()
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase in (GamePhase.CHECKMATE, GamePhase.STALEMATE)

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @property
    def in_check(self) -> bool:
        """Whether the side to move is in check."""
        return Rules.is_in_check(self.board, self.side_to_move)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def history_text(self) -> list[str]:
        """Move history in coordinate notation."""
        return [move.uci for move in self.move_history]

    def is_legal(self, move: Move) -> bool:
        return MoveGenerator(self.board).is_legal(move, self.side_to_move)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.board).generate_legal_moves(self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _enter_turn(self) -> None:
        self.result = Rules.game_result(self.board, self.side_to_move)
        if self.result == GameResult.IN_PROGRESS:
            self.phase = GamePhase.AWAITING_MOVE
        elif self.result == GameResult.DRAW:
            self.phase = GamePhase.STALEMATE
        else:
            self.phase = GamePhase.CHECKMATE
