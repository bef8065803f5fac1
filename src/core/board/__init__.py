"""Board primitives: cards, deck and the placement grid."""

from .card import Card, NUM_CARDS, RANK_NAMES, SUIT_NAMES
from .deck import Deck
from .grid import Grid

__all__ = [
    "Card",
    "NUM_CARDS",
    "RANK_NAMES",
    "SUIT_NAMES",
    "Deck",
    "Grid",
]
