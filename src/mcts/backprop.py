"""Backpropagation for placement MCTS.

Each iteration updates, for every node on its path:
- Visit count
- Total (and hence mean) outcome
"""

from typing import List

from .node import SearchNode


def backpropagate_path(path: List[SearchNode], value: float) -> None:
    """Backpropagate along the explicit root-to-leaf path.

    Args:
        path: Nodes visited this iteration, root first
        value: Outcome of the iteration's rollouts
    """
    for node in path:
        node.update(value)
