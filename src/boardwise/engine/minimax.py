"""Depth-limited minimax with alpha-beta pruning."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from boardwise.core.enums import Loyalty
from boardwise.core.rules import Rules
from boardwise.engine.evaluation import function_val
from boardwise.engine.node import MinimaxNode
from boardwise.engine.search import CancelCheck


@dataclass(slots=True)
class SearchStats:
    """Per-search counters; each worker thread owns its own instance."""

    nodes: int = 0


def is_leaf(node: MinimaxNode, max_depth: int) -> bool:
    """Depth bound reached, or the side to move is already defeated."""
    if node.depth >= max_depth:
        return True
    return Rules.is_defeated(node.game, node.game.turn)


def _transient_children(node: MinimaxNode) -> Iterator[MinimaxNode]:
    # Children are built one at a time and dropped after use.
    for move in node.game.legal_moves():
        yield node.next_node(move)


def minimax(
    node: MinimaxNode,
    side: Loyalty,
    max_depth: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
    *,
    prune: bool = True,
    stats: SearchStats | None = None,
    should_stop: CancelCheck | None = None,
) -> float:
    """Value of *node* for *side*, searched down to *max_depth*.

    Max nodes are those where *side* is to move, min nodes the others.
    With ``prune=False`` every child is visited (plain minimax).  When
    *should_stop* fires, the remaining nodes are scored statically.
    """
    if stats is not None:
        stats.nodes += 1

    if is_leaf(node, max_depth) or (should_stop is not None and should_stop()):
        node.value = function_val(node.game, side)
        return node.value

    maximizing = node.game.turn == side
    best = -math.inf if maximizing else math.inf

    for child in _transient_children(node):
        value = minimax(
            child,
            side,
            max_depth,
            alpha,
            beta,
            prune=prune,
            stats=stats,
            should_stop=should_stop,
        )
        if maximizing:
            if value > best:
                best = value
            if value > alpha:
                alpha = value
        else:
            if value < best:
                best = value
            if value < beta:
                beta = value
        if prune and alpha >= beta:
            break

    node.value = best
    return best
