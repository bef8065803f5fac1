"""Random completion of a partially filled grid."""

from typing import Callable, Sequence

import numpy as np

from ..core.board.card import Card
from ..core.board.grid import Grid

Scorer = Callable[[Grid], float]


def rollout(
    grid: Grid,
    deck_future: Sequence[Card],
    scorer: Scorer,
    rng: np.random.Generator
) -> float:
    """Fill every empty cell and score the finished grid.

    Cards are used in ``deck_future`` order; only the order in which
    empty cells receive them is randomized. Works on a private copy
    of the grid.

    Args:
        grid: Grid to complete (not modified)
        deck_future: Exactly one card per empty cell
        scorer: Terminal scoring function
        rng: Shared generator for the search

    Returns:
        Scorer output for the completed grid
    """
    empty = grid.empty_cells()
    if len(deck_future) != len(empty):
        raise ValueError(
            f"Deck future has {len(deck_future)} cards for {len(empty)} empty cells"
        )

    filled = grid.copy()
    for index, card in zip(rng.permutation(len(empty)), deck_future):
        row, col = empty[index]
        filled.place(row, col, card)

    return scorer(filled)
