"""Public contract of the engine for orchestrators and user interfaces."""

from __future__ import annotations

import random

from boardwise.core.enums import GameType, Loyalty
from boardwise.core.game import Game
from boardwise.core.move import Move
from boardwise.core.rules import Rules
from boardwise.engine.minimax_search import MinimaxSearchEngine
from boardwise.engine.search import SearchLimits


def new_game(
    game_type: GameType = GameType.CHECKERS,
    first: Loyalty | None = None,
    rng: random.Random | None = None,
) -> Game:
    return Game.new(game_type, first, rng)


def legal_moves(game: Game, side: Loyalty) -> list[Move]:
    """Legal moves of *side* in the current position."""
    return Rules.legal_moves(game, side)


def apply_move(game: Game, move: Move) -> None:
    """Apply *move* for the side to move, in place.

    Raises:
        IllegalMoveError: if *move* is not one of the legal moves.
    """
    Rules.check_legal(game, move)
    game.apply_move(move)


def best_move(
    game: Game,
    side: Loyalty,
    config: SearchLimits | None = None,
    rng: random.Random | None = None,
) -> Move | None:
    """Engine choice for *side*, which must be on turn; None if it cannot move."""
    engine = MinimaxSearchEngine(rng)
    return engine.search(game, config or SearchLimits(), side=side).best_move


def is_defeated(game: Game, side: Loyalty) -> bool:
    return Rules.is_defeated(game, side)


def is_complete(game: Game) -> bool:
    return Rules.is_complete(game)
