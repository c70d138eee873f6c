"""Game state machine: tracks phase transitions and move history."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from boardwise.core.enums import GameResult, GameType, Loyalty
from boardwise.core.game import Game
from boardwise.core.move import Move
from boardwise.core.rules import Rules
from boardwise.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    mover: Loyalty
    captured: int = 0
    promoted: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: phase, result and move history.

    This is a pure data/logic class without threading or UI.  Undo restores
    the snapshot taken before each move.
    """

    game: Game = field(init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    _snapshots: list[Game] = field(default_factory=list, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        game_type: GameType = GameType.CHECKERS,
        first: Loyalty | None = None,
        rng: random.Random | None = None,
        game: Game | None = None,
    ) -> None:
        """Initialise (or reset) the game, optionally from an existing *game*."""
        self.game = game if game is not None else Game.new(game_type, first, rng)
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._snapshots.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        mover = self.game.turn
        board = self.game.board
        moving = board.piece_at(move.start)
        kind_before = moving.kind if moving is not None else None

        self._snapshots.append(self.game.clone())
        self.game.apply_move(move)

        landed = board.piece_at(move.end)
        record = MoveRecord(
            move=move,
            mover=mover,
            captured=len(move.captured),
            promoted=landed is not None and landed.kind != kind_before,
        )
        self.move_history.append(record)
        self._check_game_over()
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.game = self._snapshots.pop()

        if self.result != GameResult.IN_PROGRESS:
            self.result = GameResult.IN_PROGRESS
            self.phase = GamePhase.AWAITING_MOVE

        return record.move

    def resign(self, loyalty: Loyalty) -> None:
        self.result = (
            GameResult.BLACK_WINS if loyalty == Loyalty.RED else GameResult.RED_WINS
        )
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Loyalty:
        return self.game.turn

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return self.game.legal_moves()

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.game)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
