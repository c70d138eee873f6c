"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from boardwise.core.game import Game
from boardwise.engine.minimax_search import MinimaxSearchEngine
from boardwise.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Move it to a ``QThread`` and connect ``request_move``; results come
    back through the signals as ``(request_id, move, score, depth, nodes)``.
    """

    best_move_ready = pyqtSignal(int, object, float, int, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int, float, int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int = 4,
        time_limit_ms: int | None = None,
        parallel: bool = False,
    ) -> None:
        super().__init__()
        self._engine = MinimaxSearchEngine()
        self._limits = SearchLimits(
            max_depth=max_depth,
            time_limit_ms=time_limit_ms,
            parallel=parallel,
        )
        self._cancel_event = threading.Event()

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @pyqtSlot(object, int)
    def request_move(self, game_obj: object, request_id: int) -> None:
        """Search for the best move of the side to move in *game_obj*."""
        if not isinstance(game_obj, Game):
            self.search_error.emit(request_id, "Engine received invalid game")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(
                game_obj,
                self._limits,
                is_cancelled=self._cancel_event.is_set,
            )
        except Exception as exc:
            _LOGGER.exception("Engine search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(
                request_id,
                result.score,
                result.depth,
                result.nodes,
            )
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int, int, bool)
    def set_limits(self, max_depth: int, time_limit_ms: int, parallel: bool) -> None:
        """Update search limits (takes effect on the next search).

        A non-positive *time_limit_ms* means fixed-depth search.
        """
        self._limits = SearchLimits(
            max_depth=max_depth,
            time_limit_ms=time_limit_ms if time_limit_ms > 0 else None,
            parallel=parallel,
        )
