"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesster.core import Board, Color, Move, MoveGenerator, execute_move

    board = Board.initial()
    gen = MoveGenerator(board)
    move = Move.from_uci("e2e4")
    if gen.is_legal(move, Color.WHITE):
        execute_move(board, move)
"""

from chesster.core.board import Board
from chesster.core.enums import Color, GameResult, MoveKind, PieceType
from chesster.core.executor import execute_move
from chesster.core.move import Move
from chesster.core.move_generator import MoveGenerator
from chesster.core.notation import (
    HISTORY_MARKER,
    Snapshot,
    SnapshotError,
    dump_snapshot,
    parse_snapshot,
)
from chesster.core.patterns import attacks, is_pattern_valid
from chesster.core.piece import Piece
from chesster.core.rules import Rules
from chesster.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "MoveKind",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "attacks",
    "execute_move",
    "is_pattern_valid",
    # Snapshot format
    "HISTORY_MARKER",
    "Snapshot",
    "SnapshotError",
    "dump_snapshot",
    "parse_snapshot",
]
