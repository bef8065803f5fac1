"""Square placement grid (Poker Squares board).

Cells hold a Card or None. Once a cell is filled it is never
overwritten during a game; search trees work on copies.
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np

from .card import Card

Cell = Tuple[int, int]


class Grid:
    """Fixed-size square grid of optional cards.

    Args:
        size: Number of rows (and columns)
    """

    def __init__(self, size: int = 5):
        if size <= 0:
            raise ValueError("Grid size must be positive")
        self.size = size
        self.cells = np.full((size, size), None, dtype=object)
        self.num_filled = 0

    @property
    def num_cells(self) -> int:
        return self.size * self.size

    def is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Optional[Card]:
        return self.cells[row, col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row, col] is None

    def place(self, row: int, col: int, card: Card) -> None:
        """Put a card into an empty cell."""
        if not self.is_valid_position(row, col):
            raise ValueError(f"Cell ({row}, {col}) outside {self.size}x{self.size} grid")
        if self.cells[row, col] is not None:
            raise ValueError(
                f"Cell ({row}, {col}) already holds {self.cells[row, col]}"
            )
        self.cells[row, col] = card
        self.num_filled += 1

    def empty_cells(self) -> List[Cell]:
        """Empty cells in row-major order."""
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.cells[row, col] is None
        ]

    def is_full(self) -> bool:
        return self.num_filled == self.num_cells

    def rows(self) -> Iterator[List[Optional[Card]]]:
        for row in range(self.size):
            yield list(self.cells[row, :])

    def columns(self) -> Iterator[List[Optional[Card]]]:
        for col in range(self.size):
            yield list(self.cells[:, col])

    def cards(self) -> List[Card]:
        """Placed cards in row-major order."""
        return [card for card in self.cells.flat if card is not None]

    def diff(self, other: 'Grid') -> List[Cell]:
        """Cells whose contents differ between the two grids."""
        if other.size != self.size:
            raise ValueError("Cannot diff grids of different sizes")
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.cells[row, col] != other.cells[row, col]
        ]

    def clear(self) -> None:
        self.cells[:, :] = None
        self.num_filled = 0

    def copy(self) -> 'Grid':
        """Independent copy of the cell storage (cards are shared)."""
        grid = Grid.__new__(Grid)
        grid.size = self.size
        grid.cells = self.cells.copy()
        grid.num_filled = self.num_filled
        return grid

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return False
        return self.size == other.size and not self.diff(other)

    def __str__(self) -> str:
        lines = []
        for row in self.rows():
            lines.append(" ".join("--" if card is None else str(card) for card in row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, filled={self.num_filled}/{self.num_cells})"
