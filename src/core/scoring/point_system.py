"""Point systems mapping hand categories to scores.

Grid score = sum of hand scores over every row and every column.
"""

from typing import Callable, Dict, Mapping, Optional, Sequence, Union

from ..board.card import Card
from ..board.grid import Grid
from .hands import PokerHand, classify_hand


class PointSystem:
    """Table of points per hand category.

    A point system is a pure function of grid contents, so the
    search may call it once per rollout.

    Args:
        points: Points for each PokerHand (missing hands score 0)
        name: Human-readable name
    """

    def __init__(self, points: Mapping[PokerHand, int], name: str = "custom"):
        self.points = {hand: int(points.get(hand, 0)) for hand in PokerHand}
        self.name = name

    @classmethod
    def from_dict(cls, table: Mapping[str, int], name: str = "custom") -> 'PointSystem':
        """Build from hand names, e.g. loaded from YAML."""
        return cls({PokerHand.from_name(key): value for key, value in table.items()}, name=name)

    def hand_score(self, cards: Sequence[Optional[Card]]) -> int:
        return self.points[classify_hand(cards)]

    def score(self, grid: Grid) -> float:
        """Total score over rows and columns."""
        total = 0
        for hand in grid.rows():
            total += self.hand_score(hand)
        for hand in grid.columns():
            total += self.hand_score(hand)
        return float(total)

    def __call__(self, grid: Grid) -> float:
        return self.score(grid)

    def __repr__(self) -> str:
        table = ", ".join(f"{hand.name}={pts}" for hand, pts in self.points.items())
        return f"PointSystem({self.name}: {table})"


def american() -> PointSystem:
    return PointSystem({
        PokerHand.HIGH_CARD: 0,
        PokerHand.ONE_PAIR: 2,
        PokerHand.TWO_PAIR: 5,
        PokerHand.THREE_OF_A_KIND: 10,
        PokerHand.STRAIGHT: 15,
        PokerHand.FLUSH: 20,
        PokerHand.FULL_HOUSE: 25,
        PokerHand.FOUR_OF_A_KIND: 50,
        PokerHand.STRAIGHT_FLUSH: 75,
        PokerHand.ROYAL_FLUSH: 100,
    }, name="american")


def british() -> PointSystem:
    return PointSystem({
        PokerHand.HIGH_CARD: 0,
        PokerHand.ONE_PAIR: 1,
        PokerHand.TWO_PAIR: 3,
        PokerHand.THREE_OF_A_KIND: 6,
        PokerHand.STRAIGHT: 12,
        PokerHand.FLUSH: 5,
        PokerHand.FULL_HOUSE: 10,
        PokerHand.FOUR_OF_A_KIND: 16,
        PokerHand.STRAIGHT_FLUSH: 30,
        PokerHand.ROYAL_FLUSH: 30,
    }, name="british")


POINT_SYSTEMS: Dict[str, Callable[[], PointSystem]] = {
    "american": american,
    "british": british,
}


def get_point_system(name: Union[str, Mapping[str, int]]) -> PointSystem:
    """Look up a preset point system by name, or build one from a table."""
    if isinstance(name, Mapping):
        return PointSystem.from_dict(name)
    try:
        return POINT_SYSTEMS[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown point system: {name!r} (choose from {sorted(POINT_SYSTEMS)})"
        ) from None
