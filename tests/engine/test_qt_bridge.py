"""Tests for Qt engine bridge worker."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from boardwise.core.board import Board
from boardwise.core.enums import Loyalty
from boardwise.core.game import Game
from boardwise.engine.qt_bridge import EngineWorker
from boardwise.engine.search import CancelCheck, SearchLimits, SearchResult


class _CancellingEngine:
    def __init__(self, worker: EngineWorker) -> None:
        self._worker = worker

    def search(
        self,
        game: Game,
        _limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        del is_cancelled
        self._worker.cancel()
        return SearchResult(best_move=game.legal_moves()[0], score=0.0, depth=1, nodes=1)


class _NoMoveEngine:
    def search(
        self,
        _game: Game,
        _limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        del is_cancelled
        return SearchResult(best_move=None, score=-1.0, depth=0, nodes=1)


class _FailingEngine:
    def search(
        self,
        _game: Game,
        _limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        del is_cancelled
        raise RuntimeError("boom")


@pytest.mark.usefixtures("qapp")
class TestEngineWorker:
    def test_emits_best_move(self) -> None:
        game = Game(Board.checkers(6), Loyalty.RED)
        worker = EngineWorker(max_depth=2)

        best_moves = QSignalSpy(worker.best_move_ready)
        worker.request_move(game, 3)

        assert len(best_moves) == 1
        request_id, move, _score, depth, nodes = best_moves[0]
        assert request_id == 3
        assert move in game.legal_moves()
        assert depth == 2
        assert nodes > 0

    def test_emits_cancelled_when_search_is_cancelled(self) -> None:
        worker = EngineWorker()
        worker._engine = _CancellingEngine(worker)

        cancelled = QSignalSpy(worker.search_cancelled)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(Game(Board.checkers(), Loyalty.RED), 7)

        assert len(cancelled) == 1
        assert cancelled[0][0] == 7
        assert len(best_moves) == 0

    def test_emits_no_move_when_search_returns_none(self) -> None:
        worker = EngineWorker()
        worker._engine = _NoMoveEngine()

        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(Game(Board.checkers(), Loyalty.RED), 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(best_moves) == 0
        assert len(errors) == 0

    def test_emits_error_on_engine_failure(self) -> None:
        worker = EngineWorker()
        worker._engine = _FailingEngine()

        errors = QSignalSpy(worker.search_error)
        worker.request_move(Game(Board.checkers(), Loyalty.RED), 5)

        assert len(errors) == 1
        assert errors[0][0] == 5
        assert errors[0][1] == "boom"

    def test_rejects_non_game_payload(self) -> None:
        worker = EngineWorker()
        errors = QSignalSpy(worker.search_error)

        worker.request_move("not a game", 9)

        assert len(errors) == 1
        assert errors[0][0] == 9

    def test_new_request_clears_previous_cancel(self) -> None:
        worker = EngineWorker(max_depth=1)
        worker.cancel()

        best_moves = QSignalSpy(worker.best_move_ready)
        worker.request_move(Game(Board.checkers(6), Loyalty.RED), 1)

        assert len(best_moves) == 1

    def test_set_limits(self) -> None:
        worker = EngineWorker()
        worker.set_limits(3, 0, True)
        assert worker.limits == SearchLimits(max_depth=3, parallel=True)

        worker.set_limits(5, 250, False)
        assert worker.limits.time_limit_ms == 250
