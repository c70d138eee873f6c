"""Static evaluation: material balance with a tempo term."""

from __future__ import annotations

import sys

from boardwise.core.enums import Loyalty
from boardwise.core.game import Game
from boardwise.core.rules import Rules

WIN_SCORE = sys.float_info.max
LOSS_SCORE = -sys.float_info.max
TEMPO_BONUS = 3


def function_val(game: Game, side: Loyalty) -> float:
    """Score *game* from *side*'s point of view.

    Extremal when either side is defeated; otherwise own worth minus the
    opponent's, plus ``TEMPO_BONUS`` if *side* is to move (minus if not).
    """
    if Rules.is_defeated(game, side.opposite):
        return WIN_SCORE
    if Rules.is_defeated(game, side):
        return LOSS_SCORE

    score = float(TEMPO_BONUS if game.turn == side else -TEMPO_BONUS)
    score += game.material(side)
    score -= game.material(side.opposite)
    return score
