"""Boardwise - checkers and chess engine with minimax game-tree search."""

from boardwise.api import (
    apply_move,
    best_move,
    is_complete,
    is_defeated,
    legal_moves,
    new_game,
)
from boardwise.core import (
    Board,
    Game,
    GameResult,
    GameType,
    IllegalMoveError,
    Location,
    Loyalty,
    Move,
    Piece,
    PieceKind,
)
from boardwise.engine import MinimaxSearchEngine, SearchLimits, SearchResult

__all__ = [
    "Board",
    "Game",
    "GameResult",
    "GameType",
    "IllegalMoveError",
    "Location",
    "Loyalty",
    "MinimaxSearchEngine",
    "Move",
    "Piece",
    "PieceKind",
    "SearchLimits",
    "SearchResult",
    "apply_move",
    "best_move",
    "is_complete",
    "is_defeated",
    "legal_moves",
    "new_game",
]

__version__ = "0.1.0"
