"""UCB selection for placement MCTS."""

import math
from typing import Optional

import numpy as np

from .node import SearchNode


def ucb_score(
    child: SearchNode,
    parent: SearchNode,
    c: float = 10.0,
    epsilon: float = 1e-6,
    noise: float = 0.0
) -> float:
    """Compute UCB score.

    UCB = W/(N+eps) + c * sqrt(ln(N_parent + 1) / (N_child + eps)) + noise

    Args:
        child: Child node
        parent: Parent node
        c: Exploration constant
        epsilon: Keeps unvisited children finite
        noise: Tie-break perturbation, smaller than any real difference

    Returns:
        UCB score
    """
    exploitation = child.mean_value(epsilon)
    exploration = c * math.sqrt(
        math.log(parent.visit_count + 1) / (child.visit_count + epsilon)
    )

    return exploitation + exploration + noise


def ucb_select(
    node: SearchNode,
    c: float = 10.0,
    epsilon: float = 1e-6,
    rng: Optional[np.random.Generator] = None
) -> SearchNode:
    """Pick the child of ``node`` with the highest UCB score.

    When ``rng`` is given each score gets ``U[0, 1) * epsilon`` added
    so unvisited children do not always resolve to the first one.

    Args:
        node: Expanded node
        c: Exploration constant
        epsilon: Division guard and noise scale
        rng: Source of tie-break noise (None disables noise)

    Returns:
        Selected child
    """
    if not node.children:
        raise ValueError("Cannot select from a node without children")

    best_child = None
    best_score = float('-inf')

    for child in node.children:
        noise = rng.random() * epsilon if rng is not None else 0.0
        score = ucb_score(child, node, c, epsilon, noise)
        if score > best_score:
            best_score = score
            best_child = child

    return best_child


def select_best_mean(node: SearchNode, epsilon: float = 1e-6) -> SearchNode:
    """Select the child with the highest mean outcome (final decision).

    Ties, including the all-unvisited case, go to the first child.
    """
    if not node.children:
        raise ValueError("Cannot select from a node without children")

    return max(node.children, key=lambda child: child.mean_value(epsilon))
