"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from boardwise.core.game import Game
    from boardwise.core.move import Move

CancelCheck = Callable[[], bool]


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation.

    ``time_limit_ms`` switches the engine to iterative deepening: one more
    ply per pass until the budget elapses or ``max_depth`` is reached.  A
    pass still running at the deadline is cut short and its result
    dropped, except for the first pass, which always completes its root
    moves; the budget may be overrun by that first pass.  Timed search
    runs on the calling thread, so ``parallel`` has no effect with it.

    ``parallel`` evaluates the root moves of a fixed-depth search on a
    thread pool of ``max_workers`` threads (default: one per root move).
    """

    max_depth: int = 4
    time_limit_ms: int | None = None
    parallel: bool = False
    max_workers: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("Search depth must be >= 1")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")

    @classmethod
    def fixed_depth(cls, depth: int, *, parallel: bool = False) -> SearchLimits:
        return cls(max_depth=depth, parallel=parallel)

    @classmethod
    def timed(cls, time_limit_ms: int, max_depth: int = 64) -> SearchLimits:
        """Deadline-bound search; *max_depth* only caps small endgames."""
        return cls(max_depth=max_depth, time_limit_ms=time_limit_ms)


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: float
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(
        self,
        game: Game,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult: ...
