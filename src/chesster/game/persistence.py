"""Save/load of game snapshots to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from chesster.core.notation import Snapshot, dump_snapshot, parse_snapshot

if TYPE_CHECKING:
    from chesster.core.board import Board

_LOGGER = logging.getLogger(__name__)


def save_game(file_path: str | Path, board: Board, history: list[str]) -> Path:
    """Write *board* and *history* to *file_path*; return the path written."""
    save_path = Path(file_path)
    save_path.write_text(dump_snapshot(board, history), encoding="utf-8")
    _LOGGER.info("Game saved to %s (%d moves)", save_path, len(history))
    return save_path


def load_game(file_path: str | Path) -> Snapshot:
    """Read a snapshot from *file_path*.

    Raises OSError when the file cannot be read and
    :class:`~chesster.core.notation.SnapshotError` when it is malformed.
    """
    load_path = Path(file_path)
    snapshot = parse_snapshot(load_path.read_text(encoding="utf-8"))
    _LOGGER.info("Game loaded from %s (%d moves)", load_path, len(snapshot.history))
    return snapshot
