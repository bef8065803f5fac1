"""Test backpropagation along the visited path."""

from src.core.board.card import Card
from src.core.board.grid import Grid
from src.mcts.backprop import backpropagate_path
from src.mcts.node import SearchNode


def test_every_path_node_updated_once():
    root = SearchNode.root(Grid(size=2))
    root.expand(Card.from_string("AS"))
    child = root.children[2]
    child.expand(Card.from_string("KS"))
    leaf = child.children[0]

    backpropagate_path([root, child, leaf], 12.0)
    backpropagate_path([root, child, leaf], 4.0)

    for node in (root, child, leaf):
        assert node.visit_count == 2
        assert node.total_value == 16.0

    # Siblings untouched
    assert root.children[0].visit_count == 0
    assert child.children[1].visit_count == 0
