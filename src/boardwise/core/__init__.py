"""Core domain layer - board, pieces, move generation and rules.

Quick start::

    from boardwise.core import Game, GameType, Rules

    game = Game.new(GameType.CHECKERS)
    for move in Rules.legal_moves(game, game.turn):
        print(move)
"""

from boardwise.core.board import Board
from boardwise.core.enums import GameResult, GameType, Loyalty, PieceKind
from boardwise.core.game import Game
from boardwise.core.move import Move
from boardwise.core.move_generator import MoveGenerator
from boardwise.core.piece import Piece
from boardwise.core.rules import IllegalMoveError, Rules
from boardwise.core.types import Location, forward

__all__ = [
    # Enums
    "GameResult",
    "GameType",
    "Loyalty",
    "PieceKind",
    # Types / helpers
    "Location",
    "forward",
    # Domain objects
    "Board",
    "Game",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Errors
    "IllegalMoveError",
]
