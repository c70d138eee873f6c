"""Move value object: an ordered path of locations plus captured cells."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from boardwise.core.types import Location


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single ply.

    ``path`` holds the start, every intermediate stop and the end.
    ``captured`` holds the cells whose occupants are removed when the move
    is applied (jumped-over pieces, or the piece landed on in chess).
    """

    path: tuple[Location, ...]
    captured: frozenset[Location] = frozenset()

    def __post_init__(self) -> None:
        if len(self.path) < 2:
            raise ValueError(f"Move path needs at least two locations: {self.path!r}")

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def step(
        cls,
        start: Location,
        end: Location,
        captured: Iterable[Location] = (),
    ) -> Move:
        """Single-hop move."""
        return cls((start, end), frozenset(captured))

    @classmethod
    def jump(cls, path: Iterable[Location]) -> Move:
        """Chain of diagonal jumps; each hop captures the cell it passes over."""
        stops = tuple(path)
        jumped = frozenset(a.midpoint(b) for a, b in zip(stops, stops[1:]))
        return cls(stops, jumped)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def start(self) -> Location:
        return self.path[0]

    @property
    def end(self) -> Location:
        return self.path[-1]

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)

    def __str__(self) -> str:
        return "-".join(str(loc) for loc in self.path)
