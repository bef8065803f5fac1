"""Baseline players."""

from typing import Optional, Tuple

import numpy as np

from ..core.board.card import Card
from ..core.board.grid import Grid
from ..core.scoring.point_system import PointSystem


class RandomPlayer:
    """Places each card in a uniformly random empty cell."""

    def __init__(self, size: int = 5, rng: Optional[np.random.Generator] = None):
        self.grid = Grid(size)
        self.rng = rng if rng is not None else np.random.default_rng()

    @property
    def name(self) -> str:
        return "Random Player"

    def init(self) -> None:
        self.grid.clear()

    def set_point_system(self, system: PointSystem, millis: float) -> None:
        pass

    def get_play(self, card: Card, millis_remaining: float) -> Tuple[int, int]:
        empty = self.grid.empty_cells()
        row, col = empty[self.rng.integers(len(empty))]
        self.grid.place(row, col, card)
        return row, col
