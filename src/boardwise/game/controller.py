"""GameController: runs a game between two players.

Validates submitted moves against the rules, keeps :class:`GameState`
current and reports progress through plain callbacks.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from boardwise.core.enums import GameResult, GameType, Loyalty
from boardwise.core.game import Game
from boardwise.core.move import Move
from boardwise.core.rules import IllegalMoveError, Rules
from boardwise.game.interfaces import GamePhase, IGameController, IPlayer
from boardwise.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Subscriber lists; every handler of an event is called in order."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


class GameController(IGameController):
    """Turn loop for a checkers or chess game.

    All methods are meant for one thread.  An engine running elsewhere
    answers through ``submit_move`` (for Qt, via a queued connection from
    ``EngineWorker.best_move_ready``).

    Args:
        rng: Random source for the starting side of checkers games.
    """

    __slots__ = ("_state", "_players", "_rng", "events")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._state = GameState()
        self._players: dict[Loyalty, IPlayer] = {}
        self._rng = rng
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        """Player whose side is on turn, if players are set."""
        return self._players.get(self._state.side_to_move)

    def player(self, loyalty: Loyalty) -> IPlayer | None:
        return self._players.get(loyalty)

    # ── Turn cycle ───────────────────────────────────────────────────────

    def new_game(
        self,
        red: IPlayer,
        black: IPlayer,
        game_type: GameType = GameType.CHECKERS,
        first: Loyalty | None = None,
        game: Game | None = None,
    ) -> None:
        """Start a game; an explicit *game* replaces the standard layout."""
        self._players = {Loyalty.RED: red, Loyalty.BLACK: black}
        self._state = GameState()
        self._state.setup(game_type, first, self._rng, game=game)
        _LOGGER.info(
            "New %s game: %s vs %s, %s to move",
            self._state.game.game_type.name.lower(),
            red.name,
            black.name,
            self._state.side_to_move,
        )
        self._advance()

    def submit_move(self, move: Move) -> bool:
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False
        try:
            Rules.check_legal(self._state.game, move)
        except IllegalMoveError as exc:
            _LOGGER.debug("Rejected move: %s", exc)
            return False

        record = self._state.apply_move(move)
        for cb in self.events.on_move:
            cb(record, self._state)
        self._advance()
        return True

    def resign(self, loyalty: Loyalty) -> None:
        if self._state.is_game_over:
            return
        self._cancel_engine()
        self._state.resign(loyalty)
        _LOGGER.info("%s resigned", loyalty)
        self._finish()

    def undo_move(self) -> bool:
        if self._state.is_game_over or not self._state.move_history:
            return False
        self._cancel_engine()
        self._state.undo_last_move()
        self._advance()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _advance(self) -> None:
        """Finish the game or hand the turn to the side to move."""
        if self._state.is_game_over:
            _LOGGER.info(
                "Game over after %d plies: %s",
                self._state.ply_count,
                self._state.result.name,
            )
            self._finish()
            return

        cp = self.current_player
        if cp is None or cp.is_human:
            self._set_phase(GamePhase.AWAITING_MOVE)
            return
        self._set_phase(GamePhase.THINKING)
        cp.request_move(self._state.game.clone())

    def _cancel_engine(self) -> None:
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()

    def _finish(self) -> None:
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(self._state.result)

    def _set_phase(self, phase: GamePhase) -> None:
        self._state.phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
