"""Piece model: loyalty, kind, coordinate and move history flag."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from boardwise.core.enums import Loyalty, PieceKind
from boardwise.core.types import Location

if TYPE_CHECKING:
    from boardwise.core.board import Board
    from boardwise.core.move import Move

# Diagram character ↔ PieceKind (uppercase = red, lowercase = black)
_CHAR_MAP: dict[str, PieceKind] = {
    "M": PieceKind.SOLDIER,
    "C": PieceKind.CHECKER_KING,
    "P": PieceKind.PAWN,
    "N": PieceKind.KNIGHT,
    "B": PieceKind.BISHOP,
    "R": PieceKind.ROOK,
    "Q": PieceKind.QUEEN,
    "K": PieceKind.KING,
}

_KIND_CHARS: dict[PieceKind, str] = {v: k for k, v in _CHAR_MAP.items()}

_WORTH: dict[PieceKind, int] = {
    PieceKind.SOLDIER: 3,
    PieceKind.CHECKER_KING: 5,
    PieceKind.PAWN: 1,
    PieceKind.KNIGHT: 3,
    PieceKind.BISHOP: 3,
    PieceKind.ROOK: 5,
    PieceKind.QUEEN: 9,
    PieceKind.KING: 100,
}


@dataclass(slots=True)
class Piece:
    """A piece owned by at most one board cell.

    The piece stores the coordinate of the cell holding it; the board keeps
    that coordinate in sync on every mutation.  A detached (captured) piece
    has ``location is None``.
    """

    loyalty: Loyalty
    kind: PieceKind
    location: Location | None = field(default=None, compare=False)
    has_moved: bool = field(default=False, compare=False)

    @property
    def worth(self) -> int:
        """Material value used by the evaluation."""
        return _WORTH[self.kind]

    def generate_moves(self, board: Board) -> list[Move]:
        """Candidate moves of this piece on *board*."""
        from boardwise.core.move_generator import MoveGenerator

        return MoveGenerator(board).generate_moves(self)

    def copy(self) -> Piece:
        return Piece(self.loyalty, self.kind, self.location, self.has_moved)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        char = _KIND_CHARS[self.kind]
        return char if self.loyalty == Loyalty.RED else char.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a diagram character, e.g. 'm' → black soldier."""
        try:
            kind = _CHAR_MAP[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        loyalty = Loyalty.RED if char.isupper() else Loyalty.BLACK
        return cls(loyalty, kind)
