"""Core enumerations for the game domain."""

from __future__ import annotations

import random
from enum import IntEnum, auto


class Loyalty(IntEnum):
    """The side a piece or player belongs to."""

    RED = 0
    BLACK = 1

    @property
    def opposite(self) -> Loyalty:
        return Loyalty(1 - self.value)

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Loyalty:
        """Pick a side uniformly at random."""
        return (rng or random).choice((cls.RED, cls.BLACK))

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Every piece variant known to the engine."""

    SOLDIER = auto()
    CHECKER_KING = auto()
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()

    @property
    def is_checkers(self) -> bool:
        return self in (PieceKind.SOLDIER, PieceKind.CHECKER_KING)


class GameType(IntEnum):
    """Supported game variants."""

    CHECKERS = auto()
    CHESS = auto()


class GameResult(IntEnum):
    """Outcome of a game. Draws are not modeled."""

    IN_PROGRESS = 0
    RED_WINS = 1
    BLACK_WINS = 2
    NO_SURVIVOR = 3
