"""Multi-game player comparison."""

from .statistical_tests import statistical_significance_test
from .player_comparison import compare_players, play_games

__all__ = [
    "statistical_significance_test",
    "compare_players",
    "play_games",
]
