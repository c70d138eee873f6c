"""High-level rules: defeat, completion and result detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from boardwise.core.enums import GameResult, GameType, Loyalty, PieceKind
from boardwise.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from boardwise.core.game import Game
    from boardwise.core.move import Move


class IllegalMoveError(ValueError):
    """Raised when a move is not legal for the side to move."""


class Rules:
    """Static rule-checker that operates on a :class:`Game`.

    Nothing is cached: defeat is recomputed from the position every time.
    """

    @staticmethod
    def legal_moves(game: Game, side: Loyalty) -> list[Move]:
        return MoveGenerator(game.board).generate_for_side(side)

    @staticmethod
    def is_defeated(game: Game, side: Loyalty) -> bool:
        """No pieces, no legal moves or (chess) no king.

        A side with pieces but nothing to play counts as defeated; there is
        no separate stalemate outcome.
        """
        if not game.board.pieces(side):
            return True
        if game.game_type == GameType.CHESS and not game.board.has_piece(
            side, PieceKind.KING
        ):
            return True
        return not Rules.legal_moves(game, side)

    @staticmethod
    def is_complete(game: Game) -> bool:
        """At most one side left undefeated."""
        alive = sum(1 for side in Loyalty if not Rules.is_defeated(game, side))
        return alive <= 1

    @staticmethod
    def winner(game: Game) -> Loyalty | None:
        """The only undefeated side, if exactly one remains."""
        alive = [side for side in Loyalty if not Rules.is_defeated(game, side)]
        return alive[0] if len(alive) == 1 else None

    @staticmethod
    def game_result(game: Game) -> GameResult:
        alive = [side for side in Loyalty if not Rules.is_defeated(game, side)]
        if len(alive) > 1:
            return GameResult.IN_PROGRESS
        if not alive:
            return GameResult.NO_SURVIVOR
        return GameResult.RED_WINS if alive[0] == Loyalty.RED else GameResult.BLACK_WINS

    @staticmethod
    def check_legal(game: Game, move: Move) -> None:
        """Raise :class:`IllegalMoveError` unless *move* is legal right now."""
        if move not in Rules.legal_moves(game, game.turn):
            raise IllegalMoveError(f"Illegal move for {game.turn}: {move}")
