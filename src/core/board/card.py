"""Playing card representation.

Ranks are indexed 0..12 (ace low in storage), suits 0..3.
Cards are immutable, hashable and ordered suit-major so that
``Card.get_all_cards()`` is a stable enumeration of the deck.
"""

from dataclasses import dataclass
from typing import List

RANK_NAMES = "A23456789TJQK"
SUIT_NAMES = "CDHS"
NUM_RANKS = len(RANK_NAMES)
NUM_SUITS = len(SUIT_NAMES)
NUM_CARDS = NUM_RANKS * NUM_SUITS


@dataclass(frozen=True, order=True)
class Card:
    """A single playing card.

    Attributes:
        suit: Suit index into SUIT_NAMES
        rank: Rank index into RANK_NAMES (0 = ace)
    """
    suit: int
    rank: int

    def __post_init__(self):
        if not 0 <= self.rank < NUM_RANKS:
            raise ValueError(f"Invalid rank index: {self.rank}")
        if not 0 <= self.suit < NUM_SUITS:
            raise ValueError(f"Invalid suit index: {self.suit}")

    @property
    def card_id(self) -> int:
        """Dense index in [0, NUM_CARDS)."""
        return self.suit * NUM_RANKS + self.rank

    @classmethod
    def from_id(cls, card_id: int) -> 'Card':
        if not 0 <= card_id < NUM_CARDS:
            raise ValueError(f"Invalid card id: {card_id}")
        return cls(suit=card_id // NUM_RANKS, rank=card_id % NUM_RANKS)

    @classmethod
    def from_string(cls, text: str) -> 'Card':
        """Parse a two-character card like ``"TS"`` or ``"ah"``."""
        text = text.strip().upper()
        if len(text) != 2 or text[0] not in RANK_NAMES or text[1] not in SUIT_NAMES:
            raise ValueError(f"Cannot parse card: {text!r}")
        return cls(suit=SUIT_NAMES.index(text[1]), rank=RANK_NAMES.index(text[0]))

    @staticmethod
    def get_all_cards() -> List['Card']:
        """All 52 cards, suit-major."""
        return [Card.from_id(i) for i in range(NUM_CARDS)]

    def __str__(self) -> str:
        return RANK_NAMES[self.rank] + SUIT_NAMES[self.suit]

    def __repr__(self) -> str:
        return f"Card({self})"
