"""Rollouts assign deck-future cards to empty cells one-to-one."""

import numpy as np
import pytest
from scipy.stats import chisquare
from src.core.board.grid import Grid
from src.mcts.rollout import rollout


@pytest.mark.parametrize("prefilled", [0, 1, 7, 13, 24])
def test_rollout_is_bijection(prefilled, full_deck):
    rng = np.random.default_rng(prefilled)
    for trial in range(20):
        grid = Grid(size=5)
        order = rng.permutation(25)
        for index, card in zip(order[:prefilled], full_deck):
            grid.place(index // 5, index % 5, card)
        empty = grid.empty_cells()
        future = full_deck[prefilled:25]
        captured = []

        def scorer(filled):
            captured.append(filled)
            return 0.0

        rollout(grid, future, scorer, rng)
        filled = captured[0]

        assert filled.is_full()
        assert len(set(filled.cards())) == 25
        assert sorted(filled.cards()) == sorted(full_deck[:25])
        assert {filled.get(*cell) for cell in empty} == set(future)
        assert grid.num_filled == prefilled


def test_fill_order_is_uniform(full_deck):
    """The first deck-future card lands in each empty cell equally often."""
    rng = np.random.default_rng(123)
    grid = Grid(size=2)
    grid.place(0, 0, full_deck[0])
    empty = grid.empty_cells()
    future = full_deck[1:4]
    counts = dict.fromkeys(empty, 0)

    def scorer(filled):
        for cell in empty:
            if filled.get(*cell) == future[0]:
                counts[cell] += 1
        return 0.0

    for _ in range(3000):
        rollout(grid, future, scorer, rng)

    _, p_value = chisquare(list(counts.values()))
    assert p_value > 0.001


def test_scorer_idempotent_under_fixed_rollout(full_deck, american):
    grid = Grid(size=5)
    for index, card in enumerate(full_deck[:12]):
        grid.place(index // 5, index % 5, card)
    future = full_deck[12:25]

    first = rollout(grid, future, american, np.random.default_rng(8))
    second = rollout(grid, future, american, np.random.default_rng(8))
    assert first == second
