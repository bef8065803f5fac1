"""Pytest fixtures for testing."""

import pytest
import numpy as np


class FakeClock:
    """Deterministic clock: returns the current time, then advances by ``step`` seconds."""

    def __init__(self, start: float = 0.0, step: float = 0.0):
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        self.calls += 1
        return value


@pytest.fixture
def seed():
    """Seed for reproducible generators."""
    return 42


@pytest.fixture
def rng(seed):
    """Seeded generator."""
    return np.random.default_rng(seed)


@pytest.fixture
def make_clock():
    """Factory for deterministic clocks."""
    return FakeClock


@pytest.fixture
def frozen_clock():
    """Clock that never advances (searches stop on max_batches)."""
    return FakeClock()


@pytest.fixture
def american():
    from src.core.scoring.point_system import get_point_system
    return get_point_system("american")


@pytest.fixture
def full_deck():
    from src.core.board.card import Card
    return Card.get_all_cards()


@pytest.fixture
def shuffled_deck(full_deck, rng):
    return [full_deck[i] for i in rng.permutation(len(full_deck))]


@pytest.fixture
def rank_scorer():
    """Pure scorer for any grid size: position-weighted rank sum."""
    def score(grid):
        total = 0.0
        for index, card in enumerate(grid.cells.flat):
            if card is not None:
                total += (index + 1) * (card.rank + 1)
        return total
    return score


@pytest.fixture
def fast_config():
    """Search bounded by batch count rather than wall time."""
    from src.mcts.search import SearchConfig
    return SearchConfig(trials_per_deck=5, max_batches=2, safety_margin_millis=0)
