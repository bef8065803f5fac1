"""MCTS tree structure for placement search."""

from typing import Iterator

from .node import SearchNode


class MCTSTree:
    """Wraps a search root for maintenance and diagnostics."""

    def __init__(self, root: SearchNode):
        self.root = root

    def iter_nodes(self) -> Iterator[SearchNode]:
        """Depth-first walk over every live node."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(node.children)

    def prune_grandchildren(self) -> None:
        """Discard all state below the root's children.

        Statistics of the root and its children survive, so they keep
        accumulating across batches.
        """
        if self.root.children is None:
            return
        for child in self.root.children:
            child.prune_children()

    def count_nodes(self) -> int:
        """Count total nodes."""
        return sum(1 for _ in self.iter_nodes())

    def count_terminal(self) -> int:
        """Count terminal (full grid) nodes."""
        return sum(1 for node in self.iter_nodes() if node.is_terminal())

    def max_depth(self) -> int:
        """Deepest placement count below the root."""
        return max(node.placements for node in self.iter_nodes()) - self.root.placements

    def get_statistics(self) -> dict:
        """Get tree statistics."""
        return {
            "total_nodes": self.count_nodes(),
            "terminal_nodes": self.count_terminal(),
            "max_depth": self.max_depth(),
            "root_visits": self.root.visit_count,
            "root_Q": self.root.Q
        }
