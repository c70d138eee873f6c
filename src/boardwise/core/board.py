"""Board - rectangular grid of cells, each holding at most one piece."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from boardwise.core.enums import Loyalty, PieceKind
from boardwise.core.piece import Piece
from boardwise.core.types import Location

_CHESS_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable grid that owns every piece placed on it.

    Each piece's ``location`` always matches the cell that holds it.
    """

    __slots__ = ("_height", "_width", "_cells")

    def __init__(self, height: int = 8, width: int | None = None) -> None:
        width = height if width is None else width
        if height <= 0 or width <= 0:
            raise ValueError(f"Invalid board size: {height}x{width}")
        self._height = height
        self._width = width
        self._cells: list[list[Piece | None]] = [[None] * width for _ in range(height)]

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    # -- Element access -----------------------------------------------------

    def is_valid(self, loc: Location) -> bool:
        """Whether *loc* lies inside the grid."""
        return 0 <= loc.row < self._height and 0 <= loc.col < self._width

    def _check(self, loc: Location) -> None:
        if not self.is_valid(loc):
            raise ValueError(f"Location {loc} is off the {self._height}x{self._width} board")

    def piece_at(self, loc: Location) -> Piece | None:
        self._check(loc)
        return self._cells[loc.row][loc.col]

    def is_empty(self, loc: Location) -> bool:
        return self.piece_at(loc) is None

    def locations(self) -> Iterator[Location]:
        """All cells in row-major order."""
        for row in range(self._height):
            for col in range(self._width):
                yield Location(row, col)

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece | None, loc: Location) -> None:
        """Put *piece* (or nothing) on *loc*, rebinding the piece's location."""
        self._check(loc)
        if piece is not None:
            piece.location = loc
        self._cells[loc.row][loc.col] = piece

    def remove(self, loc: Location) -> Piece | None:
        """Detach and return the occupant of *loc*."""
        piece = self.piece_at(loc)
        self.place(None, loc)
        if piece is not None:
            piece.location = None
        return piece

    def move_piece(self, start: Location, end: Location) -> Piece:
        """Move the occupant of *start* to *end* and mark it as moved."""
        piece = self.remove(start)
        if piece is None:
            raise ValueError(f"No piece on {start}")
        self.place(piece, end)
        piece.has_moved = True
        return piece

    def clear(self) -> None:
        for row in self._cells:
            for col, piece in enumerate(row):
                if piece is not None:
                    piece.location = None
                row[col] = None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, loyalty: Loyalty | None = None) -> list[Piece]:
        """Pieces on the board (row-major), optionally only *loyalty*'s."""
        found: list[Piece] = []
        for row in self._cells:
            for piece in row:
                if piece is not None and (loyalty is None or piece.loyalty == loyalty):
                    found.append(piece)
        return found

    def has_piece(self, loyalty: Loyalty, kind: PieceKind) -> bool:
        return any(p.kind == kind for p in self.pieces(loyalty))

    # -- Copying ------------------------------------------------------------

    def clone(self) -> Board:
        """Deep copy: new grid, new pieces bound to the new grid."""
        b = Board(self._height, self._width)
        for row_idx, row in enumerate(self._cells):
            for col_idx, piece in enumerate(row):
                if piece is not None:
                    b.place(piece.copy(), Location(row_idx, col_idx))
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def checkers(cls, size: int = 8) -> Board:
        """Standard draughts layout: soldiers on the dark cells of three rows."""
        b = cls(size)
        filled_rows = max(1, (size - 2) // 2)
        for row in range(size):
            if filled_rows <= row < size - filled_rows:
                continue
            loyalty = Loyalty.RED if row < filled_rows else Loyalty.BLACK
            for col in range(size):
                if (row + col) % 2 == 1:
                    b.place(Piece(loyalty, PieceKind.SOLDIER), Location(row, col))
        return b

    @classmethod
    def chess(cls) -> Board:
        """Standard chess layout with RED on rows 0 and 1."""
        b = cls(8)
        for col, kind in enumerate(_CHESS_BACK_RANK):
            b.place(Piece(Loyalty.RED, kind), Location(0, col))
            b.place(Piece(Loyalty.RED, PieceKind.PAWN), Location(1, col))
            b.place(Piece(Loyalty.BLACK, PieceKind.PAWN), Location(6, col))
            b.place(Piece(Loyalty.BLACK, kind), Location(7, col))
        return b

    @classmethod
    def from_diagram(cls, rows: Sequence[str]) -> Board:
        """Build a board from text rows, row 0 first; ``.`` marks an empty cell.

        Example::

            Board.from_diagram([
                "M...",
                ".m..",
                "....",
            ])
        """
        if not rows or any(len(r) != len(rows[0]) for r in rows):
            raise ValueError(f"Diagram rows must be non-empty and equal width: {rows!r}")
        b = cls(len(rows), len(rows[0]))
        for row_idx, text in enumerate(rows):
            for col_idx, char in enumerate(text):
                if char != ".":
                    b.place(Piece.from_char(char), Location(row_idx, col_idx))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._height == other._height
            and self._width == other._width
            and self._cells == other._cells
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx in range(self._height - 1, -1, -1):
            cells = [str(p) if p else "." for p in self._cells[row_idx]]
            rows.append(f"{row_idx:>2} {' '.join(cells)}")
        rows.append("   " + " ".join(str(c % 10) for c in range(self._width)))
        return "\n".join(rows)
