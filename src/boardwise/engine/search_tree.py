"""Persistent search tree for iterative deepening."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from boardwise.engine.evaluation import function_val
from boardwise.engine.minimax import SearchStats, is_leaf
from boardwise.engine.node import MinimaxNode

if TYPE_CHECKING:
    from boardwise.core.enums import Loyalty
    from boardwise.core.game import Game
    from boardwise.core.move import Move
    from boardwise.engine.search import CancelCheck


class SearchTree:
    """Minimax tree that grows by one ply per :meth:`increase_depth` call.

    Expanded nodes are kept between passes.  Before a node's children are
    searched again they are ordered by the value they got on the previous
    pass: best-first for the searching side, worst-first for the opponent,
    which lets alpha-beta cut more of the deeper pass.

    The caller owns the time budget: it stops deepening by no longer
    calling :meth:`increase_depth`, or cuts a pass short through
    *should_stop*.
    """

    __slots__ = ("_root", "_side", "_depth", "_stats", "_interrupted")

    def __init__(self, game: Game, side: Loyalty | None = None) -> None:
        self._root = MinimaxNode(game.clone())
        self._side = game.turn if side is None else side
        self._depth = 0
        self._stats = SearchStats()
        self._interrupted = False

    @property
    def root(self) -> MinimaxNode:
        return self._root

    @property
    def depth(self) -> int:
        """Depth of the last pass, finished or not."""
        return self._depth

    @property
    def nodes(self) -> int:
        return self._stats.nodes

    @property
    def interrupted(self) -> bool:
        """True when *should_stop* cut the last pass short."""
        return self._interrupted

    def increase_depth(self, should_stop: CancelCheck | None = None) -> float:
        """Run one more pass, one ply deeper; return the root value.

        Once *should_stop* fires, nodes below the root are scored
        statically, so every root child still gets a value.
        """
        self._depth += 1
        self._interrupted = False
        return self._search(self._root, -math.inf, math.inf, should_stop)

    def best_moves(self) -> list[Move]:
        """Root moves sharing the highest value of the last pass."""
        scored = [c for c in self._root.children() if c.value is not None]
        if not scored:
            return []
        best = max(c.value for c in scored)  # type: ignore[type-var]
        return [c.move for c in scored if c.value == best and c.move is not None]

    def _search(
        self,
        node: MinimaxNode,
        alpha: float,
        beta: float,
        should_stop: CancelCheck | None,
    ) -> float:
        self._stats.nodes += 1

        if is_leaf(node, self._depth):
            node.value = function_val(node.game, self._side)
            return node.value
        if node is not self._root and (
            self._interrupted or (should_stop is not None and should_stop())
        ):
            self._interrupted = True
            node.value = function_val(node.game, self._side)
            return node.value

        maximizing = node.game.turn == self._side
        children = node.children()
        if node.depth + 1 < self._depth:
            children = self._heuristic_sort(children, maximizing)
            node.set_children(children)

        best = -math.inf if maximizing else math.inf
        for child in children:
            child_alpha = alpha
            if node is self._root:
                # Keep root children tying with the best exact.
                child_alpha = math.nextafter(alpha, -math.inf)
            value = self._search(child, child_alpha, beta, should_stop)
            if maximizing:
                best = max(best, value)
                alpha = max(alpha, value)
            else:
                best = min(best, value)
                beta = min(beta, value)
            if alpha >= beta:
                break

        node.value = best
        return best

    @staticmethod
    def _heuristic_sort(
        children: list[MinimaxNode],
        maximizing: bool,
    ) -> list[MinimaxNode]:
        if maximizing:
            return sorted(
                children,
                key=lambda c: c.value if c.value is not None else -math.inf,
                reverse=True,
            )
        return sorted(
            children,
            key=lambda c: c.value if c.value is not None else math.inf,
        )
