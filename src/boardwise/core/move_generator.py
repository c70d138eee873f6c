"""Per-piece move generation: steps, leaps, slides and checkers jump chains."""

from __future__ import annotations

from boardwise.core.board import Board
from boardwise.core.enums import Loyalty, PieceKind
from boardwise.core.move import Move
from boardwise.core.piece import Piece
from boardwise.core.types import (
    DIAGONALS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ORTHOGONALS,
    Location,
    forward,
)

_SLIDING_DIRS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.BISHOP: DIAGONALS,
    PieceKind.ROOK: ORTHOGONALS,
    PieceKind.QUEEN: DIAGONALS + ORTHOGONALS,
}

_LEAPING_OFFSETS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.KNIGHT: KNIGHT_OFFSETS,
    PieceKind.KING: KING_OFFSETS,
}


def _soldier_dirs(loyalty: Loyalty) -> tuple[tuple[int, int], ...]:
    dr = forward(loyalty)
    return ((dr, -1), (dr, 1))


class MoveGenerator:
    """Generates candidate moves against a board snapshot.

    The board is only read; moves are returned as pure data and applied
    later by :meth:`Game.apply_move`.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_for_side(self, loyalty: Loyalty) -> list[Move]:
        """All moves of *loyalty*'s pieces, piece by piece in row-major order.

        Forced capture is applied to each checkers piece's own candidates,
        so a piece without a capture keeps its steps even when a teammate
        could capture.
        """
        moves: list[Move] = []
        for piece in self._board.pieces(loyalty):
            moves.extend(self.generate_moves(piece))
        return moves

    def generate_moves(self, piece: Piece) -> list[Move]:
        """Moves available to *piece* from its current cell."""
        if piece.location is None:
            return []

        kind = piece.kind
        if kind == PieceKind.SOLDIER:
            return self._gen_checker(piece, _soldier_dirs(piece.loyalty))
        if kind == PieceKind.CHECKER_KING:
            return self._gen_checker(piece, DIAGONALS)
        if kind == PieceKind.PAWN:
            return self._gen_pawn(piece)
        if kind in _SLIDING_DIRS:
            return self._gen_sliding(piece, _SLIDING_DIRS[kind])
        return self._gen_leaping(piece, _LEAPING_OFFSETS[kind])

    # -- Chess families -----------------------------------------------------

    def _is_opponent(self, piece: Piece, loc: Location) -> bool:
        target = self._board.piece_at(loc)
        return target is not None and target.loyalty != piece.loyalty

    def _gen_leaping(
        self,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
    ) -> list[Move]:
        board = self._board
        start = piece.location
        assert start is not None
        moves: list[Move] = []
        for dr, dc in offsets:
            dest = start.offset(dr, dc)
            if not board.is_valid(dest):
                continue
            if board.is_empty(dest):
                moves.append(Move.step(start, dest))
            elif self._is_opponent(piece, dest):
                moves.append(Move.step(start, dest, (dest,)))
        return moves

    def _gen_sliding(
        self,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Move]:
        board = self._board
        start = piece.location
        assert start is not None
        moves: list[Move] = []
        for dr, dc in directions:
            dest = start.offset(dr, dc)
            while board.is_valid(dest):
                if board.is_empty(dest):
                    moves.append(Move.step(start, dest))
                    dest = dest.offset(dr, dc)
                    continue
                if self._is_opponent(piece, dest):
                    moves.append(Move.step(start, dest, (dest,)))
                break
        return moves

    def _gen_pawn(self, piece: Piece) -> list[Move]:
        board = self._board
        start = piece.location
        assert start is not None
        dr = forward(piece.loyalty)
        moves: list[Move] = []

        one = start.offset(dr, 0)
        if board.is_valid(one) and board.is_empty(one):
            moves.append(Move.step(start, one))
            two = one.offset(dr, 0)
            if not piece.has_moved and board.is_valid(two) and board.is_empty(two):
                moves.append(Move.step(start, two))

        for dc in (-1, 1):
            dest = start.offset(dr, dc)
            if board.is_valid(dest) and self._is_opponent(piece, dest):
                moves.append(Move.step(start, dest, (dest,)))
        return moves

    # -- Checkers family ----------------------------------------------------

    def _gen_checker(
        self,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Move]:
        board = self._board
        start = piece.location
        assert start is not None

        jumps = [
            Move.jump(path)
            for path in self._next_jumps(piece, start, directions, frozenset())
            if len(path) > 1
        ]
        # Forced capture: a piece that can jump may not step.
        if jumps:
            return jumps

        moves: list[Move] = []
        for dr, dc in directions:
            dest = start.offset(dr, dc)
            if board.is_valid(dest) and board.is_empty(dest):
                moves.append(Move.step(start, dest))
        return moves

    def _next_jumps(
        self,
        piece: Piece,
        loc: Location,
        directions: tuple[tuple[int, int], ...],
        jumped: frozenset[Location],
    ) -> list[list[Location]]:
        """Every jump path starting at *loc*.

        A location with no further jump yields the single path ``[loc]``.
        Cells already in *jumped* cannot be jumped again within one chain.
        """
        board = self._board
        landings: list[tuple[Location, Location]] = []
        for dr, dc in directions:
            over = loc.offset(dr, dc)
            land = loc.offset(2 * dr, 2 * dc)
            if over in jumped:
                continue
            if not board.is_valid(land) or not board.is_empty(land):
                continue
            if self._is_opponent(piece, over):
                landings.append((over, land))

        if not landings:
            return [[loc]]

        paths: list[list[Location]] = []
        for over, land in landings:
            for suffix in self._next_jumps(piece, land, directions, jumped | {over}):
                paths.append([loc, *suffix])
        return paths
