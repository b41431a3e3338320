"""Application entry point: a text session on stdin/stdout."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from chesster.core.enums import GameResult
from chesster.core.notation import SnapshotError
from chesster.core.types import parse_square, square_name
from chesster.game.controller import GameController
from chesster.game.player import players_from_settings
from chesster.settings import GameSettings, configure_logging

_LOGGER = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  e2e4           play a move (from-square, to-square)
  help <square>  list legal destinations of the piece on <square>
  save <file>    write the game to <file>
  load <file>    replace the game with the one saved in <file>
  quit           leave the game"""

_RESULT_TEXT = {
    GameResult.WHITE_WINS: "Checkmate. White wins.",
    GameResult.BLACK_WINS: "Checkmate. Black wins.",
    GameResult.DRAW: "Stalemate. The game is drawn.",
}


def _show_board(ctrl: GameController, out: TextIO) -> None:
    state = ctrl.state
    print(repr(state.board), file=out)
    if state.in_check and not state.is_game_over:
        print(f"{state.side_to_move.name.capitalize()} is in check.", file=out)


def _show_history(ctrl: GameController, out: TextIO) -> None:
    history = ctrl.state.history_text
    print("Moves:", file=out)
    for idx in range(0, len(history), 2):
        print(f"{idx // 2 + 1}. {' '.join(history[idx:idx + 2])}", file=out)


def _handle_command(ctrl: GameController, line: str, out: TextIO) -> bool:
    """Run one line of input; return False when the session should end."""
    command, _, arg = line.partition(" ")
    arg = arg.strip()

    if command == "quit":
        print("Bye.", file=out)
        return False

    if command == "help":
        if not arg:
            print(HELP_TEXT, file=out)
            return True
        try:
            square = parse_square(arg)
        except ValueError as exc:
            print(exc, file=out)
            return True
        targets = ctrl.legal_destinations(square)
        if targets:
            print(" ".join(square_name(sq) for sq in targets), file=out)
        else:
            print(f"No legal moves from {arg}.", file=out)
        return True

    if command == "save":
        if not arg:
            print("Usage: save <file>", file=out)
            return True
        try:
            path = ctrl.save(arg)
        except OSError as exc:
            print(f"Could not save game: {exc}", file=out)
            return True
        print(f"Game saved to {path}.", file=out)
        return True

    if command == "load":
        if not arg:
            print("Usage: load <file>", file=out)
            return True
        try:
            ctrl.load(arg)
        except (OSError, SnapshotError) as exc:
            print(f"Could not load game: {exc}", file=out)
            return True
        print(f"Game loaded from {arg}.", file=out)
        _show_board(ctrl, out)
        return True

    try:
        accepted = ctrl.submit_uci(line)
    except ValueError as exc:
        print(exc, file=out)
        return True
    if not accepted:
        print(f"Illegal move: {line}", file=out)
        return True
    _show_board(ctrl, out)
    return True


def run_session(ctrl: GameController, stdin: TextIO, stdout: TextIO) -> int:
    """Play *ctrl*'s game reading commands from *stdin* until it ends.

    The session ends on checkmate, stalemate, ``quit`` or end of input.
    Returns the process exit code.
    """
    _show_board(ctrl, stdout)
    while not ctrl.state.is_game_over:
        player = ctrl.current_player
        if player is not None and not player.is_human:
            move = ctrl.play_computer_move()
            if move is None:
                break
            print(f"{player.name} plays {move}", file=stdout)
            _show_board(ctrl, stdout)
            continue

        color = ctrl.state.side_to_move.name.capitalize()
        print(f"{color} to move> ", end="", file=stdout)
        stdout.flush()
        line = stdin.readline()
        if not line:
            print(file=stdout)
            _LOGGER.debug("Input closed, ending session")
            break
        line = line.strip()
        if line and not _handle_command(ctrl, line, stdout):
            break

    if ctrl.state.is_game_over:
        print(_RESULT_TEXT[ctrl.state.result], file=stdout)
        _show_history(ctrl, stdout)
    return 0


def main() -> None:
    """Launch a chess session in the terminal."""
    try:
        settings = GameSettings.from_env()
    except ValueError as exc:
        print(f"chesster: {exc}", file=sys.stderr)
        sys.exit(2)
    configure_logging(settings)

    white, black = players_from_settings(settings)
    ctrl = GameController()
    ctrl.new_game(white, black)
    sys.exit(run_session(ctrl, sys.stdin, sys.stdout))


if __name__ == "__main__":
    main()
