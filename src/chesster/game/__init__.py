"""Game management layer — controller, players, state machine, persistence.

Quick start::

    from chesster.game import GameController, HumanPlayer, RandomPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=RandomPlayer(Color.BLACK, random.Random(7)),
    )
    ctrl.submit_uci("e2e4")
    ctrl.play_computer_move()
"""

from chesster.game.controller import GameController, GameEvents
from chesster.game.interfaces import GamePhase, IPlayer
from chesster.game.persistence import load_game, save_game
from chesster.game.player import HumanPlayer, RandomPlayer, players_from_settings
from chesster.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
    "RandomPlayer",
    # Helpers
    "load_game",
    "players_from_settings",
    "save_game",
]
