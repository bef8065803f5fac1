"""Test random grid completion."""

import numpy as np
import pytest
from src.core.board.card import Card
from src.core.board.grid import Grid
from src.mcts.rollout import rollout


@pytest.fixture
def partial_grid(full_deck):
    grid = Grid(size=5)
    for index, card in enumerate(full_deck[:10]):
        grid.place(index // 5, index % 5, card)
    return grid


def test_rollout_fills_every_empty_cell(partial_grid, full_deck, rng):
    future = full_deck[10:25]
    captured = []

    def scorer(grid):
        captured.append(grid)
        return 1.0

    assert rollout(partial_grid, future, scorer, rng) == 1.0
    (filled,) = captured
    assert filled.is_full()
    assert sorted(filled.cards()) == sorted(full_deck[:25])
    # Pre-filled cells kept their cards
    for row, col in [(0, 0), (1, 4)]:
        assert filled.get(row, col) == partial_grid.get(row, col)


def test_rollout_does_not_mutate_inputs(partial_grid, full_deck, rng):
    before = partial_grid.copy()
    future = list(full_deck[10:25])
    rollout(partial_grid, future, lambda g: 0.0, rng)
    assert partial_grid == before
    assert future == full_deck[10:25]


def test_rollout_returns_scorer_value_unchanged(partial_grid, full_deck, rng, american):
    captured = []

    def scorer(grid):
        captured.append(grid)
        return american.score(grid)

    value = rollout(partial_grid, full_deck[10:25], scorer, rng)
    assert value == american.score(captured[0])


def test_rollout_length_mismatch_raises(partial_grid, full_deck, rng):
    with pytest.raises(ValueError):
        rollout(partial_grid, full_deck[10:24], lambda g: 0.0, rng)
    with pytest.raises(ValueError):
        rollout(partial_grid, full_deck[10:26], lambda g: 0.0, rng)


def test_rollout_on_full_grid_scores_directly(full_deck, rng, american):
    grid = Grid(size=5)
    for index, card in enumerate(full_deck[:25]):
        grid.place(index // 5, index % 5, card)
    assert rollout(grid, [], american, rng) == american.score(grid)


def test_rollout_reproducible_with_seed(partial_grid, full_deck, american):
    future = full_deck[10:25]
    a = [rollout(partial_grid, future, american, np.random.default_rng(3)) for _ in range(5)]
    b = [rollout(partial_grid, future, american, np.random.default_rng(3)) for _ in range(5)]
    assert a == b
