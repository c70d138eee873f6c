"""Game management layer: controller, players and the state machine.

Quick start::

    from boardwise.core import Loyalty
    from boardwise.game import AIPlayer, GameController, HumanPlayer

    requests = []
    ctrl = GameController()
    ctrl.new_game(
        red=HumanPlayer(Loyalty.RED, "Alice"),
        black=AIPlayer(Loyalty.BLACK, on_request_move=requests.append),
        first=Loyalty.RED,
    )
    ctrl.submit_move(ctrl.state.legal_moves()[0])
    # requests[-1] now holds a copy of the game for the engine to search.
"""

from boardwise.game.controller import GameController, GameEvents
from boardwise.game.interfaces import GamePhase, IGameController, IPlayer
from boardwise.game.player import AIPlayer, HumanPlayer
from boardwise.game.state import GameState, MoveRecord

__all__ = [
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GamePhase",
    "GameState",
    "HumanPlayer",
    "IGameController",
    "IPlayer",
    "MoveRecord",
]
