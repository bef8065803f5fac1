"""Poker Squares scoring: hand classification and point systems."""

from .hands import PokerHand, classify_hand
from .point_system import PointSystem, get_point_system, POINT_SYSTEMS

__all__ = [
    "PokerHand",
    "classify_hand",
    "PointSystem",
    "get_point_system",
    "POINT_SYSTEMS",
]
