"""MCTS node for card placement search."""

from dataclasses import dataclass
from typing import List, Optional

from ..core.board.card import Card
from ..core.board.grid import Grid


@dataclass
class SearchNode:
    """MCTS node for placement search.

    State is the grid reached after ``placements`` cards have been
    placed. Nodes own their children; there is no parent pointer.
    Each iteration records the path it walked and backpropagates
    along it instead.

    Attributes:
        grid: Grid snapshot represented by this node
        placements: Number of cards on the grid
        children: Child nodes, None until expanded
        visit_count: N - number of times visited
        total_value: W - sum of backpropagated outcomes
    """
    grid: Grid
    placements: int
    children: Optional[List['SearchNode']] = None
    visit_count: int = 0
    total_value: float = 0.0

    @classmethod
    def root(cls, grid: Grid) -> 'SearchNode':
        """Root for the current real grid (copied)."""
        return cls(grid=grid.copy(), placements=grid.num_filled)

    def mean_value(self, epsilon: float = 1e-6) -> float:
        """Average outcome W / (N + eps); 0 for unvisited nodes."""
        return self.total_value / (self.visit_count + epsilon)

    @property
    def Q(self) -> float:
        """Average value (Q = W / N)."""
        if self.visit_count == 0:
            return 0.0
        return self.total_value / self.visit_count

    def is_terminal(self) -> bool:
        """Check if every cell of the grid is filled."""
        return self.placements == self.grid.num_cells

    def is_leaf(self) -> bool:
        """Check if node has not been expanded."""
        return self.children is None

    def expand(self, card: Card) -> None:
        """Create one child per empty cell holding ``card``.

        Children follow row-major order of the cell they fill.
        Expanding a terminal node leaves it childless.
        """
        if self.children is not None:
            raise ValueError("Node already expanded")
        if self.is_terminal():
            return

        children = []
        for row, col in self.grid.empty_cells():
            grid = self.grid.copy()
            grid.place(row, col, card)
            children.append(SearchNode(grid=grid, placements=self.placements + 1))
        self.children = children

    def prune_children(self) -> None:
        """Drop everything below this node, keeping its own statistics."""
        self.children = None

    def update(self, value: float) -> None:
        self.visit_count += 1
        self.total_value += value

    def __repr__(self) -> str:
        arity = 0 if self.children is None else len(self.children)
        return (f"SearchNode(placements={self.placements}, visits={self.visit_count}, "
                f"Q={self.Q:.3f}, children={arity})")
