"""Poker hand classification for rows and columns of the grid."""

from collections import Counter
from enum import IntEnum
from typing import Optional, Sequence

from ..board.card import Card

HAND_SIZE = 5

# Rank indices are ace-low (A=0 ... K=12); ten through king plus ace
_BROADWAY = frozenset({0, 9, 10, 11, 12})


class PokerHand(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @classmethod
    def from_name(cls, name: str) -> 'PokerHand':
        key = name.strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown poker hand: {name!r}") from None


def _is_straight(ranks: Sequence[int]) -> bool:
    unique = set(ranks)
    if len(unique) != HAND_SIZE:
        return False
    if unique == _BROADWAY:
        return True
    return max(unique) - min(unique) == HAND_SIZE - 1


def classify_hand(cards: Sequence[Optional[Card]]) -> PokerHand:
    """Classify a hand of up to five cards.

    Empty slots (None) are ignored. Straights and flushes need all
    five cards; ace plays low (A-2-3-4-5) or high (T-J-Q-K-A).

    Args:
        cards: Row or column of the grid

    Returns:
        Best category the hand makes
    """
    present = [card for card in cards if card is not None]
    if len(present) > HAND_SIZE:
        raise ValueError(f"Hand has {len(present)} cards, expected at most {HAND_SIZE}")

    ranks = [card.rank for card in present]
    counts = sorted(Counter(ranks).values(), reverse=True)

    if len(present) == HAND_SIZE:
        flush = len({card.suit for card in present}) == 1
        straight = _is_straight(ranks)
        if flush and straight:
            if set(ranks) == _BROADWAY:
                return PokerHand.ROYAL_FLUSH
            return PokerHand.STRAIGHT_FLUSH
    else:
        flush = straight = False

    if not counts:
        return PokerHand.HIGH_CARD
    if counts[0] == 4:
        return PokerHand.FOUR_OF_A_KIND
    if counts[0] == 3 and len(counts) > 1 and counts[1] == 2:
        return PokerHand.FULL_HOUSE
    if flush:
        return PokerHand.FLUSH
    if straight:
        return PokerHand.STRAIGHT
    if counts[0] == 3:
        return PokerHand.THREE_OF_A_KIND
    if counts[0] == 2 and len(counts) > 1 and counts[1] == 2:
        return PokerHand.TWO_PAIR
    if counts[0] == 2:
        return PokerHand.ONE_PAIR
    return PokerHand.HIGH_CARD
