"""Search engine package: minimax search, iterative deepening and Qt worker bridge."""

from boardwise.engine.evaluation import LOSS_SCORE, TEMPO_BONUS, WIN_SCORE, function_val
from boardwise.engine.minimax import SearchStats, minimax
from boardwise.engine.minimax_search import MinimaxSearchEngine
from boardwise.engine.node import MinimaxNode
from boardwise.engine.search import CancelCheck, IEngine, SearchLimits, SearchResult
from boardwise.engine.search_tree import SearchTree

DefaultEngine: type[IEngine] = MinimaxSearchEngine

__all__ = [
    "CancelCheck",
    "DefaultEngine",
    "IEngine",
    "LOSS_SCORE",
    "MinimaxNode",
    "MinimaxSearchEngine",
    "SearchLimits",
    "SearchResult",
    "SearchStats",
    "SearchTree",
    "TEMPO_BONUS",
    "WIN_SCORE",
    "function_val",
    "minimax",
]
