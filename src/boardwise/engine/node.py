"""Search tree node wrapping a game snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boardwise.core.game import Game
    from boardwise.core.move import Move


class MinimaxNode:
    """A position in the search tree.

    Children are expanded one level at a time and cached, so repeated passes
    (iterative deepening) reuse earlier work.  Every child owns its own
    clone of the game.
    """

    __slots__ = ("game", "move", "depth", "value", "_children")

    def __init__(self, game: Game, move: Move | None = None, depth: int = 0) -> None:
        self.game = game
        self.move = move
        self.depth = depth
        self.value: float | None = None
        self._children: list[MinimaxNode] | None = None

    @property
    def is_expanded(self) -> bool:
        return self._children is not None

    def children(self) -> list[MinimaxNode]:
        """Child per legal move of the side to move (expanded on first call)."""
        if self._children is None:
            self._children = [self.next_node(move) for move in self.game.legal_moves()]
        return self._children

    def set_children(self, children: list[MinimaxNode]) -> None:
        """Replace the cached child order (used by move ordering)."""
        self._children = children

    def next_node(self, move: Move) -> MinimaxNode:
        game = self.game.clone()
        game.apply_move(move)
        return MinimaxNode(game, move, self.depth + 1)

    def clone(self) -> MinimaxNode:
        """Detached copy (fresh game clone, no children) for another thread."""
        return MinimaxNode(self.game.clone(), self.move, self.depth)

    def __repr__(self) -> str:
        return f"MinimaxNode(move={self.move}, depth={self.depth}, value={self.value})"
