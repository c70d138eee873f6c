"""Tests for the iterative-deepening search tree."""

import math

import pytest

from boardwise.core.board import Board
from boardwise.core.enums import Loyalty
from boardwise.core.game import Game
from boardwise.engine.minimax import minimax
from boardwise.engine.node import MinimaxNode
from boardwise.engine.search_tree import SearchTree


def _small_game() -> Game:
    return Game(Board.checkers(6), Loyalty.RED)


class TestSearchTree:
    def test_each_pass_matches_plain_minimax(self) -> None:
        tree = SearchTree(_small_game())
        for depth in (1, 2, 3):
            value = tree.increase_depth()
            expected = minimax(
                MinimaxNode(_small_game()), Loyalty.RED, depth, prune=False
            )
            assert tree.depth == depth
            assert value == expected
            assert tree.root.value == expected

    def test_best_moves_are_exactly_the_tied_root_moves(self) -> None:
        tree = SearchTree(_small_game())
        tree.increase_depth()
        tree.increase_depth()

        exact = {}
        root = MinimaxNode(_small_game())
        for move in root.game.legal_moves():
            exact[move] = minimax(root.next_node(move), Loyalty.RED, 2, prune=False)
        best = max(exact.values())

        assert set(tree.best_moves()) == {m for m, v in exact.items() if v == best}

    def test_tree_is_kept_between_passes(self) -> None:
        tree = SearchTree(_small_game())
        tree.increase_depth()
        first_children = tree.root.children()
        nodes_after_first = tree.nodes

        tree.increase_depth()

        assert set(map(id, tree.root.children())) == set(map(id, first_children))
        assert tree.nodes > nodes_after_first

    def test_root_reordered_best_first(self) -> None:
        tree = SearchTree(_small_game())
        tree.increase_depth()
        tree.increase_depth()
        previous = {id(c): c.value for c in tree.root.children()}

        tree.increase_depth()

        ordered = [previous[id(c)] for c in tree.root.children()]
        assert ordered == sorted(ordered, reverse=True)

    def test_best_moves_empty_before_first_pass(self) -> None:
        assert SearchTree(_small_game()).best_moves() == []

    def test_side_defaults_to_turn(self) -> None:
        game = Game(Board.checkers(6), Loyalty.BLACK)
        tree = SearchTree(game)
        value = tree.increase_depth()
        assert value == minimax(MinimaxNode(game.clone()), Loyalty.BLACK, 1, prune=False)

    def test_original_game_untouched(self) -> None:
        game = _small_game()
        snapshot = game.clone()
        tree = SearchTree(game)
        tree.increase_depth()
        tree.increase_depth()
        assert game.board == snapshot.board
        assert game.turn == snapshot.turn


def _capture_or_quiet() -> Game:
    """Red's first piece can only step; its second jumps a soldier.

    Generation order puts the quiet step first, the previous pass ranks the
    capture first.
    """
    board = Board.from_diagram(
        [
            "M.....",
            "......",
            "..M...",
            "...m..",
            "......",
            ".m....",
        ]
    )
    return Game(board, Loyalty.RED)


def _unsorted(children, maximizing):
    del maximizing
    return children


class TestMoveOrdering:
    def test_min_nodes_reordered_worst_first(self) -> None:
        tree = SearchTree(_small_game())
        for _ in range(3):
            tree.increase_depth()
        previous = {
            id(grandchild): grandchild.value if grandchild.value is not None else math.inf
            for child in tree.root.children()
            for grandchild in child.children()
        }

        tree.increase_depth()

        for child in tree.root.children():
            assert child.game.turn == Loyalty.BLACK
            ordered = [previous[id(g)] for g in child.children()]
            assert ordered == sorted(ordered)

    def test_ordering_visits_fewer_nodes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        ordered = SearchTree(_capture_or_quiet())
        ordered.increase_depth()
        before = ordered.nodes
        ordered_value = ordered.increase_depth()
        ordered_nodes = ordered.nodes - before

        monkeypatch.setattr(SearchTree, "_heuristic_sort", staticmethod(_unsorted))
        plain = SearchTree(_capture_or_quiet())
        plain.increase_depth()
        before = plain.nodes
        plain_value = plain.increase_depth()
        plain_nodes = plain.nodes - before

        assert ordered_value == plain_value
        assert ordered.best_moves() == plain.best_moves()
        assert ordered_nodes < plain_nodes


class TestStopCheck:
    def test_stop_still_values_every_root_move(self) -> None:
        tree = SearchTree(_small_game())
        tree.increase_depth()
        tree.increase_depth(should_stop=lambda: True)

        assert tree.interrupted
        assert all(c.value is not None for c in tree.root.children())
        assert tree.best_moves()

    def test_uninterrupted_pass_is_not_flagged(self) -> None:
        tree = SearchTree(_small_game())
        tree.increase_depth(should_stop=lambda: False)
        assert not tree.interrupted
        tree.increase_depth()
        assert not tree.interrupted

    def test_stop_halts_descent(self) -> None:
        stopped, full = SearchTree(_small_game()), SearchTree(_small_game())
        for _ in range(2):
            stopped.increase_depth()
            full.increase_depth()
        before_stopped, before_full = stopped.nodes, full.nodes

        stopped.increase_depth(should_stop=lambda: True)
        full.increase_depth()

        assert stopped.nodes - before_stopped < full.nodes - before_full
