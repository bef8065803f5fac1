"""Test tree maintenance and statistics."""

from src.core.board.card import Card
from src.core.board.grid import Grid
from src.mcts.node import SearchNode
from src.mcts.tree import MCTSTree


def build_tree():
    root = SearchNode.root(Grid(size=2))
    root.expand(Card.from_string("AS"))
    for child in root.children:
        child.expand(Card.from_string("KS"))
        child.update(1.0)
    root.children[0].children[0].expand(Card.from_string("QS"))
    return root


def test_count_nodes():
    tree = MCTSTree(build_tree())
    # 1 root + 4 children + 12 grandchildren + 2 great-grandchildren
    assert tree.count_nodes() == 19
    assert tree.max_depth() == 3
    assert tree.count_terminal() == 0


def test_prune_grandchildren_keeps_child_stats():
    root = build_tree()
    tree = MCTSTree(root)
    tree.prune_grandchildren()

    assert tree.count_nodes() == 5
    assert all(child.is_leaf() for child in root.children)
    assert all(child.visit_count == 1 for child in root.children)


def test_prune_unexpanded_root_is_noop():
    root = SearchNode.root(Grid(size=2))
    MCTSTree(root).prune_grandchildren()
    assert root.is_leaf()


def test_statistics():
    stats = MCTSTree(build_tree()).get_statistics()
    assert stats["total_nodes"] == 19
    assert stats["root_visits"] == 0
    assert stats["max_depth"] == 3
