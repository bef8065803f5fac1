"""Shuffled dealing order for one game."""

from typing import List, Optional, Sequence

import numpy as np

from .card import Card


class Deck:
    """Deck dealt front to back.

    Args:
        rng: Generator used to shuffle; ignored when ``order`` is given
        order: Explicit dealing order (used for replaying a fixed deal)
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        order: Optional[Sequence[Card]] = None
    ):
        if order is not None:
            self._cards = list(order)
        else:
            cards = Card.get_all_cards()
            rng = rng if rng is not None else np.random.default_rng()
            self._cards = [cards[i] for i in rng.permutation(len(cards))]
        if len(set(self._cards)) != len(self._cards):
            raise ValueError("Deck contains duplicate cards")
        self._position = 0

    def deal(self) -> Card:
        """Deal the next card."""
        if self._position >= len(self._cards):
            raise ValueError("Deck is empty")
        card = self._cards[self._position]
        self._position += 1
        return card

    @property
    def remaining(self) -> int:
        return len(self._cards) - self._position

    def dealt(self) -> List[Card]:
        return self._cards[:self._position]

    def __len__(self) -> int:
        return len(self._cards)
