"""Game loop and baseline players."""

from .poker_squares import PokerSquares, GameResult, IllegalPlayError, Player
from .players import RandomPlayer

__all__ = [
    "PokerSquares",
    "GameResult",
    "IllegalPlayError",
    "Player",
    "RandomPlayer",
]
