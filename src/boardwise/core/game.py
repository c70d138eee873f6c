"""Game - board, side to move and captured-piece record."""

from __future__ import annotations

import random

from boardwise.core.board import Board
from boardwise.core.enums import GameType, Loyalty, PieceKind
from boardwise.core.move import Move
from boardwise.core.move_generator import MoveGenerator
from boardwise.core.piece import Piece

_PROMOTIONS: dict[PieceKind, PieceKind] = {
    PieceKind.SOLDIER: PieceKind.CHECKER_KING,
    PieceKind.PAWN: PieceKind.QUEEN,
}


class Game:
    """Complete game state: board + side to move + captures.

    A cloned game shares nothing mutable with its source, which is what
    lets the search hand one clone to each branch (and thread).
    """

    __slots__ = ("board", "turn", "game_type", "captured")

    def __init__(
        self,
        board: Board,
        turn: Loyalty = Loyalty.RED,
        game_type: GameType = GameType.CHECKERS,
    ) -> None:
        self.board = board
        self.turn = turn
        self.game_type = game_type
        # Pieces taken *by* each side.
        self.captured: dict[Loyalty, list[Piece]] = {
            Loyalty.RED: [],
            Loyalty.BLACK: [],
        }

    @classmethod
    def new(
        cls,
        game_type: GameType = GameType.CHECKERS,
        first: Loyalty | None = None,
        rng: random.Random | None = None,
    ) -> Game:
        """Fresh game; checkers opens with a random side unless *first* is given."""
        if game_type == GameType.CHESS:
            return cls(Board.chess(), first if first is not None else Loyalty.RED, game_type)
        turn = first if first is not None else Loyalty.random(rng)
        return cls(Board.checkers(), turn, game_type)

    # ── Move operations ──────────────────────────────────────────────────

    def legal_moves(self, side: Loyalty | None = None) -> list[Move]:
        """Moves for *side* (default: the side to move)."""
        return MoveGenerator(self.board).generate_for_side(
            self.turn if side is None else side
        )

    def apply_move(self, move: Move) -> Piece:
        """Apply *move* in one step and pass the turn.

        The move must come from :meth:`legal_moves` on this position; the
        only check made here is that the start cell holds a piece.
        """
        board = self.board
        mover = board.piece_at(move.start)
        if mover is None:
            raise ValueError(f"No piece on {move.start}")

        for loc in move.captured:
            taken = board.remove(loc)
            if taken is not None:
                self.captured[mover.loyalty].append(taken)

        piece = board.move_piece(move.start, move.end)
        self._promote(piece)
        self.turn = self.turn.opposite
        return piece

    def _promote(self, piece: Piece) -> None:
        promoted = _PROMOTIONS.get(piece.kind)
        loc = piece.location
        if promoted is None or loc is None:
            return
        last_row = self.board.height - 1 if piece.loyalty == Loyalty.RED else 0
        if loc.row == last_row:
            crowned = Piece(piece.loyalty, promoted, has_moved=True)
            self.board.place(crowned, loc)
            piece.location = None

    # ── Utilities ────────────────────────────────────────────────────────

    def clone(self) -> Game:
        """Deep copy of board and pieces."""
        game = Game(self.board.clone(), self.turn, self.game_type)
        game.captured = {side: [p.copy() for p in taken] for side, taken in self.captured.items()}
        return game

    def material(self, side: Loyalty) -> int:
        """Sum of worths of *side*'s pieces still on the board."""
        return sum(p.worth for p in self.board.pieces(side))

    def __repr__(self) -> str:
        return f"Game({self.game_type.name}, turn={self.turn})\n{self.board!r}"
