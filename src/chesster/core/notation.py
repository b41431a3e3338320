"""Plain-text game snapshot: board rows, a ``HISTORY`` marker, moves.

Layout::

    rnbqkbnr        row 0 (rank 8) first, '.' for an empty square
    pppppppp
    ........
    ........
    ....P...
    ........
    PPPP.PPP
    RNBQKBNR
    HISTORY
    e2e4            one coordinate move per line, oldest first
"""

from __future__ import annotations

from dataclasses import dataclass, field

from chesster.core.board import Board
from chesster.core.enums import Color, PieceType
from chesster.core.move import Move

HISTORY_MARKER = "HISTORY"


class SnapshotError(ValueError):
    """Snapshot text does not follow the expected layout."""


@dataclass(slots=True)
class Snapshot:
    """A parsed snapshot: placement, played moves and whose turn it is."""

    board: Board
    history: list[str] = field(default_factory=list)

    @property
    def side_to_move(self) -> Color:
        """White after an even number of moves, Black after an odd one."""
        return Color.WHITE if len(self.history) % 2 == 0 else Color.BLACK


def dump_snapshot(board: Board, history: list[str]) -> str:
    """Serialise *board* and the move *history* to snapshot text."""
    lines = board.rows()
    lines.append(HISTORY_MARKER)
    lines.extend(history)
    return "\n".join(lines) + "\n"


def parse_snapshot(text: str) -> Snapshot:
    """Parse snapshot text.

    Castling rights do not survive: every piece comes back with
    ``has_moved`` set. The last history entry becomes ``last_move`` so an
    en passant reply remains available.
    """
    lines = text.splitlines()
    if len(lines) < 8:
        raise SnapshotError(f"Snapshot needs 8 board rows, got {len(lines)} lines")

    rows = [line.rstrip() for line in lines[:8]]
    for idx, row in enumerate(rows):
        if len(row) < 8:
            raise SnapshotError(f"Snapshot row {idx} is too short: {row!r}")
    try:
        board = Board.from_rows([row[:8] for row in rows], has_moved=True)
    except ValueError as exc:
        raise SnapshotError(str(exc)) from exc

    for color in Color:
        kings = len(board.pieces(color, PieceType.KING))
        if kings != 1:
            raise SnapshotError(
                f"Snapshot must hold exactly one {color.name.lower()} king, got {kings}"
            )

    if len(lines) < 9 or lines[8].strip() != HISTORY_MARKER:
        raise SnapshotError(f"Missing {HISTORY_MARKER!r} marker after the board")

    history: list[str] = []
    for line in lines[9:]:
        entry = line.strip()
        if not entry:
            continue
        try:
            move = Move.from_uci(entry)
        except ValueError as exc:
            raise SnapshotError(f"Invalid history entry: {entry!r}") from exc
        history.append(move.uci)

    if history:
        board.last_move = Move.from_uci(history[-1])
    return Snapshot(board, history)
