"""Tests for HumanPlayer and AIPlayer."""

import random

import pytest

from boardwise.core.board import Board
from boardwise.core.enums import Loyalty
from boardwise.core.game import Game
from boardwise.core.move import Move
from boardwise.core.types import Location
from boardwise.engine import MinimaxSearchEngine, SearchLimits
from boardwise.engine.search import CancelCheck, SearchResult
from boardwise.game.player import DEFAULT_SEARCH_DEPTH, AIPlayer, HumanPlayer


def _last_black_piece() -> Game:
    """Red jumps black's only soldier and wins."""
    return Game(Board.from_diagram(["M...", ".m..", "....", "...."]), Loyalty.RED)


class _RecordingEngine:
    """Stands in for the searcher; remembers what it was asked."""

    def __init__(self, on_search=None) -> None:
        self.calls: list[SearchLimits] = []
        self.cancel_checks: list[bool] = []
        self._on_search = on_search

    def search(
        self,
        game: Game,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        assert is_cancelled is not None
        self.calls.append(limits)
        self.cancel_checks.append(is_cancelled())
        if self._on_search is not None:
            self._on_search()
            self.cancel_checks.append(is_cancelled())
        return SearchResult(game.legal_moves()[0], 0.0, limits.max_depth, 1)


class TestHumanPlayer:
    def test_identity(self) -> None:
        p = HumanPlayer(Loyalty.RED, "Alice")
        assert (p.loyalty, p.name, p.is_human) == (Loyalty.RED, "Alice", True)

    def test_name_falls_back_to_side(self) -> None:
        assert HumanPlayer(Loyalty.BLACK).name == "Player (black)"

    def test_request_leaves_game_alone(self) -> None:
        game = Game(Board.checkers(), Loyalty.RED)
        snapshot = game.clone()
        HumanPlayer(Loyalty.RED).request_move(game)
        HumanPlayer(Loyalty.RED).cancel()
        assert game.board == snapshot.board


class TestAIPlayerSearch:
    def test_defaults(self) -> None:
        p = AIPlayer(Loyalty.BLACK)
        assert p.name == "Engine"
        assert not p.is_human
        assert p.limits == SearchLimits(max_depth=DEFAULT_SEARCH_DEPTH)

    def test_chooses_winning_jump(self) -> None:
        p = AIPlayer(
            Loyalty.RED,
            limits=SearchLimits(max_depth=3),
            engine=MinimaxSearchEngine(random.Random(1)),
        )
        move = p.choose_move(_last_black_piece())
        assert move is not None
        assert move.captured == frozenset({Location(1, 1)})

    def test_request_reports_own_choice(self) -> None:
        chosen: list[Move | None] = []
        game = Game(Board.checkers(6), Loyalty.RED)
        p = AIPlayer(
            Loyalty.RED,
            limits=SearchLimits(max_depth=2),
            engine=MinimaxSearchEngine(random.Random(3)),
            on_move_ready=chosen.append,
        )
        p.request_move(game)
        assert len(chosen) == 1
        assert chosen[0] in game.legal_moves()

    def test_limits_reach_engine(self) -> None:
        engine = _RecordingEngine()
        p = AIPlayer(Loyalty.RED, engine=engine)
        p.limits = SearchLimits(max_depth=6)
        p.choose_move(Game(Board.checkers(6), Loyalty.RED))
        assert engine.calls == [SearchLimits(max_depth=6)]

    def test_defeated_side_reports_none(self) -> None:
        chosen: list[Move | None] = []
        game = Game(Board.from_diagram(["...", "...", "M.m"]), Loyalty.RED)
        AIPlayer(Loyalty.RED, on_move_ready=chosen.append).request_move(game)
        assert chosen == [None]

    def test_wrong_side_raises(self) -> None:
        with pytest.raises(ValueError, match="plays black"):
            AIPlayer(Loyalty.BLACK).choose_move(Game(Board.checkers(6), Loyalty.RED))

    def test_cancel_reaches_running_search(self) -> None:
        holder: list[AIPlayer] = []
        engine = _RecordingEngine(on_search=lambda: holder[0].cancel())
        p = AIPlayer(Loyalty.RED, engine=engine)
        holder.append(p)

        p.choose_move(Game(Board.checkers(6), Loyalty.RED))
        assert engine.cancel_checks == [False, True]

        # The next search starts with a clear flag.
        p.choose_move(Game(Board.checkers(6), Loyalty.RED))
        assert engine.cancel_checks[2] is False


class TestAIPlayerForwarding:
    def test_forwards_instead_of_searching(self) -> None:
        engine = _RecordingEngine()
        forwarded: list[Game] = []
        chosen: list[Move | None] = []
        p = AIPlayer(
            Loyalty.RED,
            engine=engine,
            on_request_move=forwarded.append,
            on_move_ready=chosen.append,
        )
        game = Game(Board.checkers(), Loyalty.RED)
        p.request_move(game)
        assert forwarded == [game]
        assert engine.calls == []
        assert chosen == []

    def test_cancel_calls_external_hook(self) -> None:
        cancelled: list[bool] = []
        AIPlayer(Loyalty.RED, on_cancel=lambda: cancelled.append(True)).cancel()
        assert cancelled == [True]
