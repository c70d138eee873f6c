"""Location value type and direction tables.

Rows grow away from RED's home edge: RED advances towards higher rows,
BLACK towards row 0.
"""

from __future__ import annotations

from dataclasses import dataclass

from boardwise.core.enums import Loyalty


@dataclass(frozen=True, slots=True)
class Location:
    """Immutable (row, column) grid coordinate."""

    row: int
    col: int

    def offset(self, dr: int, dc: int) -> Location:
        return Location(self.row + dr, self.col + dc)

    def midpoint(self, other: Location) -> Location:
        """Cell halfway between two locations (integer division)."""
        return Location((self.row + other.row) // 2, (self.col + other.col) // 2)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def forward(loyalty: Loyalty) -> int:
    """Row direction *loyalty* advances in."""
    return 1 if loyalty == Loyalty.RED else -1


DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ORTHOGONALS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = DIAGONALS + ORTHOGONALS
