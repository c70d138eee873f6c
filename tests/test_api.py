"""Tests for the top-level engine API."""

import random

import pytest

import boardwise
from boardwise import (
    Board,
    Game,
    GameType,
    IllegalMoveError,
    Location,
    Loyalty,
    Move,
    SearchLimits,
)


class TestApi:
    def test_new_game_variants(self) -> None:
        checkers = boardwise.new_game(first=Loyalty.BLACK)
        assert checkers.turn == Loyalty.BLACK
        assert checkers.board == Board.checkers()

        chess = boardwise.new_game(GameType.CHESS)
        assert chess.board == Board.chess()

    def test_new_game_with_rng(self) -> None:
        a = boardwise.new_game(rng=random.Random(3))
        b = boardwise.new_game(rng=random.Random(3))
        assert a.turn == b.turn

    def test_legal_moves(self) -> None:
        game = boardwise.new_game(first=Loyalty.RED)
        assert len(boardwise.legal_moves(game, Loyalty.RED)) == 7
        assert len(boardwise.legal_moves(game, Loyalty.BLACK)) == 7

    def test_apply_legal_move(self) -> None:
        game = boardwise.new_game(first=Loyalty.RED)
        move = boardwise.legal_moves(game, Loyalty.RED)[0]
        boardwise.apply_move(game, move)
        assert game.turn == Loyalty.BLACK
        assert game.board.piece_at(move.end) is not None

    def test_apply_illegal_move_leaves_game_untouched(self) -> None:
        game = boardwise.new_game(first=Loyalty.RED)
        before = game.clone()
        with pytest.raises(IllegalMoveError):
            boardwise.apply_move(game, Move.step(Location(2, 1), Location(4, 3)))
        assert game.board == before.board
        assert game.turn == Loyalty.RED

    def test_best_move(self) -> None:
        game = Game(Board.from_diagram(["M..", ".m.", "..."]))
        move = boardwise.best_move(game, Loyalty.RED, SearchLimits(max_depth=2))
        assert move is not None
        assert move.captured == frozenset({Location(1, 1)})

    def test_best_move_none_when_defeated(self) -> None:
        game = Game(Board.from_diagram(["...", "...", "M.m"]))
        assert boardwise.best_move(game, Loyalty.RED, rng=random.Random(0)) is None

    def test_best_move_for_wrong_side_raises(self) -> None:
        game = boardwise.new_game(first=Loyalty.RED)
        with pytest.raises(ValueError):
            boardwise.best_move(game, Loyalty.BLACK, SearchLimits(max_depth=1))

    def test_defeat_and_completion(self) -> None:
        game = Game(Board.from_diagram(["M..", "...", "..."]))
        assert boardwise.is_defeated(game, Loyalty.BLACK)
        assert not boardwise.is_defeated(game, Loyalty.RED)
        assert boardwise.is_complete(game)

        assert not boardwise.is_complete(boardwise.new_game(GameType.CHESS))

    def test_version(self) -> None:
        assert boardwise.__version__
