"""MCTS module: Tree search for card placement.

The dealt card is placed where sampled futures score best.
Deck futures are resampled every batch.
Random rollouts finish the grid.
The point system provides the terminal reward.
The root's children remember what worked.
"""

from .node import SearchNode
from .tree import MCTSTree
from .ucb import ucb_select, ucb_score, select_best_mean
from .rollout import rollout
from .backprop import backpropagate_path
from .search import MCTSPlayer, SearchConfig, iterate

__all__ = [
    "SearchNode",
    "MCTSTree",
    "ucb_select",
    "ucb_score",
    "select_best_mean",
    "rollout",
    "backpropagate_path",
    "MCTSPlayer",
    "SearchConfig",
    "iterate"
]
