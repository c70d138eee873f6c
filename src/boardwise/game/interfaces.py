"""Abstract interfaces for the game layer.

The controller only talks to players through :class:`IPlayer`, so a side
can be driven by a person, an in-process engine or a Qt worker alike.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from boardwise.core.enums import GameType, Loyalty

if TYPE_CHECKING:
    from boardwise.core.game import Game
    from boardwise.core.move import Move


# ── Phases ───────────────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Where the controller is in the turn cycle."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # engine side is searching
    GAME_OVER = auto()


# ── Participants and orchestration ───────────────────────────────────────────


class IPlayer(ABC):
    """One of the two sides of a game."""

    @property
    @abstractmethod
    def loyalty(self) -> Loyalty: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, game: Game) -> None:
        """Called when this side is on turn.

        *game* is a private copy; the player may search it freely and
        answers later through ``IGameController.submit_move``.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Abandon a pending ``request_move`` (meaningful for engines only)."""


class IGameController(ABC):
    """Drives a game between two players."""

    @abstractmethod
    def new_game(
        self,
        red: IPlayer,
        black: IPlayer,
        game_type: GameType = GameType.CHECKERS,
        first: Loyalty | None = None,
    ) -> None:
        """Start a game; *first* defaults to a random side in checkers."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Play *move* for the side on turn; False if it is not legal now."""

    @abstractmethod
    def resign(self, loyalty: Loyalty) -> None:
        """End the game in favour of the other side."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Take back the last ply; False when there is nothing to undo."""
