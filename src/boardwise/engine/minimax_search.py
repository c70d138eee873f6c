"""Minimax engine: serial, parallel-root and iterative-deepening search."""

from __future__ import annotations

import logging
import math
import random
from concurrent.futures import ThreadPoolExecutor
from time import perf_counter
from typing import TYPE_CHECKING

from boardwise.core.rules import Rules
from boardwise.engine.evaluation import function_val
from boardwise.engine.minimax import SearchStats, minimax
from boardwise.engine.node import MinimaxNode
from boardwise.engine.search import CancelCheck, IEngine, SearchLimits, SearchResult
from boardwise.engine.search_tree import SearchTree

if TYPE_CHECKING:
    from boardwise.core.enums import Loyalty
    from boardwise.core.game import Game
    from boardwise.core.move import Move

_LOGGER = logging.getLogger(__name__)


def _never_cancelled() -> bool:
    return False


def _evaluate_branch(
    node: MinimaxNode,
    side: Loyalty,
    max_depth: int,
    should_stop: CancelCheck,
) -> tuple[float, int]:
    """Worker task: full-window search of one root child on its own clone."""
    stats = SearchStats()
    value = minimax(node, side, max_depth, stats=stats, should_stop=should_stop)
    return value, stats.nodes


class MinimaxSearchEngine(IEngine):
    """Adversarial searcher choosing uniformly among equally scored moves.

    Args:
        rng: Source of randomness for tie-breaks (seed it for repeatable
            games).
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def search(
        self,
        game: Game,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
        side: Loyalty | None = None,
    ) -> SearchResult:
        side = game.turn if side is None else side
        if side != game.turn:
            raise ValueError(f"Cannot search for {side}: {game.turn} is to move")

        cancel = is_cancelled or _never_cancelled
        root = MinimaxNode(game.clone())
        root_moves = root.game.legal_moves()
        if not root_moves or Rules.is_defeated(root.game, side):
            return SearchResult(None, function_val(root.game, side), 0, 1)
        if cancel():
            return SearchResult(root_moves[0], function_val(root.game, side), 0, 1)

        if limits.time_limit_ms is not None:
            if limits.parallel:
                _LOGGER.debug("timed search runs serially; ignoring parallel")
            return self._search_iterative(root.game, side, limits, cancel)

        if limits.parallel:
            scored, nodes = self._search_parallel(root, root_moves, side, limits, cancel)
        else:
            scored, nodes = self._search_serial(root, root_moves, side, limits, cancel)

        best_move, best_score = self._select(scored)
        _LOGGER.debug(
            "depth %d search for %s: %s scored %s (%d nodes)",
            limits.max_depth,
            side,
            best_move,
            best_score,
            nodes,
        )
        return SearchResult(best_move, best_score, limits.max_depth, nodes)

    # ── Root strategies ──────────────────────────────────────────────────

    def _search_serial(
        self,
        root: MinimaxNode,
        root_moves: list[Move],
        side: Loyalty,
        limits: SearchLimits,
        cancel: CancelCheck,
    ) -> tuple[list[tuple[Move, float]], int]:
        stats = SearchStats(nodes=1)
        alpha = -math.inf
        scored: list[tuple[Move, float]] = []

        for move in root_moves:
            if scored and cancel():
                break
            child = root.next_node(move)
            # Just below alpha, so a child tying with the best stays exact.
            value = minimax(
                child,
                side,
                limits.max_depth,
                math.nextafter(alpha, -math.inf),
                math.inf,
                stats=stats,
                should_stop=cancel,
            )
            scored.append((move, value))
            alpha = max(alpha, value)

        return scored, stats.nodes

    def _search_parallel(
        self,
        root: MinimaxNode,
        root_moves: list[Move],
        side: Loyalty,
        limits: SearchLimits,
        cancel: CancelCheck,
    ) -> tuple[list[tuple[Move, float]], int]:
        children = [root.next_node(move) for move in root_moves]
        workers = limits.max_workers or len(children)

        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="boardwise-root"
        ) as pool:
            futures = [
                pool.submit(
                    _evaluate_branch, child.clone(), side, limits.max_depth, cancel
                )
                for child in children
            ]
            results = [future.result() for future in futures]

        scored = [(move, value) for move, (value, _) in zip(root_moves, results)]
        nodes = 1 + sum(n for _, n in results)
        return scored, nodes

    def _search_iterative(
        self,
        game: Game,
        side: Loyalty,
        limits: SearchLimits,
        cancel: CancelCheck,
    ) -> SearchResult:
        assert limits.time_limit_ms is not None
        deadline = perf_counter() + max(limits.time_limit_ms, 1) / 1000.0

        def should_stop() -> bool:
            return cancel() or perf_counter() >= deadline

        tree = SearchTree(game, side)
        best_moves: list[Move] = []
        best_score = function_val(game, side)
        depth = 0

        while tree.depth < limits.max_depth:
            score = tree.increase_depth(should_stop)
            if tree.interrupted and best_moves:
                # A cut-short pass only stands in when no pass finished.
                break
            best_moves = tree.best_moves()
            best_score = score
            depth = tree.depth
            _LOGGER.debug(
                "iterative depth %d for %s: score %s, %d tied, %d nodes",
                depth,
                side,
                score,
                len(best_moves),
                tree.nodes,
            )
            if tree.interrupted or should_stop():
                break

        best_move = self._rng.choice(best_moves) if best_moves else None
        return SearchResult(best_move, best_score, depth, tree.nodes)

    # ── Tie-break ────────────────────────────────────────────────────────

    def _select(self, scored: list[tuple[Move, float]]) -> tuple[Move, float]:
        """Uniform choice among the moves sharing the running maximum."""
        best_score = -math.inf
        tied: list[Move] = []
        for move, score in scored:
            if score > best_score:
                best_score = score
                tied = [move]
            elif score == best_score:
                tied.append(move)
        return self._rng.choice(tied), best_score
