"""The two kinds of seat at the table: a person or the minimax engine."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from boardwise.core.enums import Loyalty
from boardwise.engine.minimax_search import MinimaxSearchEngine
from boardwise.engine.search import IEngine, SearchLimits
from boardwise.game.interfaces import IPlayer

if TYPE_CHECKING:
    from boardwise.core.game import Game
    from boardwise.core.move import Move

_LOGGER = logging.getLogger(__name__)

DEFAULT_SEARCH_DEPTH = 4


class _Seat(IPlayer):
    """Side and display name shared by both player kinds."""

    __slots__ = ("_loyalty", "_name")

    def __init__(self, loyalty: Loyalty, name: str) -> None:
        self._loyalty = loyalty
        self._name = name

    @property
    def loyalty(self) -> Loyalty:
        return self._loyalty

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._loyalty}, {self._name!r})"


class HumanPlayer(_Seat):
    """Moves come from the front end via ``GameController.submit_move``."""

    __slots__ = ()

    def __init__(self, loyalty: Loyalty, name: str = "") -> None:
        super().__init__(loyalty, name or f"Player ({loyalty})")

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, game: Game) -> None:
        # Nothing to compute; the controller waits in AWAITING_MOVE.
        return None

    def cancel(self) -> None:
        return None


class AIPlayer(_Seat):
    """A side played by minimax search down to a fixed ply depth.

    By default the player searches the requested game itself with its own
    engine and hands the chosen move to *on_move_ready*; the caller then
    passes it to ``GameController.submit_move``.  When *on_request_move* is
    given the player searches nothing and forwards the game instead, e.g.
    to an ``EngineWorker`` living in a ``QThread``.

    Args:
        loyalty: Side the engine plays.
        name: Display name.
        limits: Search limits; fixed depth ``DEFAULT_SEARCH_DEPTH`` if omitted.
        engine: Searcher to use; a fresh :class:`MinimaxSearchEngine` if omitted.
        on_move_ready: Receives the move chosen by the player's own search
            (``None`` when the side has nothing to play).
        on_request_move: Receives the copied ``Game`` for an external search.
        on_cancel: Called by :meth:`cancel` to abort an external search.
    """

    __slots__ = (
        "_limits",
        "_engine",
        "_stop",
        "_on_move_ready",
        "_on_request_move",
        "_on_cancel",
    )

    def __init__(
        self,
        loyalty: Loyalty,
        name: str = "Engine",
        limits: SearchLimits | None = None,
        engine: IEngine | None = None,
        on_move_ready: Callable[[Move | None], None] | None = None,
        on_request_move: Callable[[Game], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(loyalty, name)
        self._limits = limits or SearchLimits(max_depth=DEFAULT_SEARCH_DEPTH)
        self._engine = engine if engine is not None else MinimaxSearchEngine()
        self._stop = threading.Event()
        self._on_move_ready = on_move_ready
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def is_human(self) -> bool:
        return False

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @limits.setter
    def limits(self, value: SearchLimits) -> None:
        self._limits = value

    def choose_move(self, game: Game) -> Move | None:
        """Search *game* for this player's side and return the chosen move."""
        if game.turn != self._loyalty:
            raise ValueError(f"{self._name} plays {self._loyalty}, not {game.turn}")
        self._stop.clear()
        result = self._engine.search(game, self._limits, is_cancelled=self._stop.is_set)
        _LOGGER.debug(
            "%s chose %s at depth %d (score %s, %d nodes)",
            self._name,
            result.best_move,
            result.depth,
            result.score,
            result.nodes,
        )
        return result.best_move

    def request_move(self, game: Game) -> None:
        if self._on_request_move is not None:
            self._on_request_move(game)
            return
        move = self.choose_move(game)
        if self._on_move_ready is not None:
            self._on_move_ready(move)

    def cancel(self) -> None:
        """Stop the running search, local or external."""
        self._stop.set()
        if self._on_cancel is not None:
            self._on_cancel()
