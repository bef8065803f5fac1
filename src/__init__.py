"""MCTS player for Poker Squares.

Each dealt card is placed by Monte Carlo Tree Search under a
per-game time budget.
Core loop per decision:
1. Sample: Shuffle the unseen cards behind the dealt card
2. Grow: UCB-select down the tree, expand one level
3. Rollout: Fill the rest of the grid at random and score it
4. Backprop: Update statistics along the visited path
5. Decide: Take the root child with the best mean score

Components:
- core/ - Cards, grid, point systems
- mcts/ - Tree, UCB selection, rollout, backprop, player
- game/ - Game loop and baseline players
- comparison/ - Multi-game evaluation
"""

__version__ = "0.1.0"

from .mcts.search import MCTSPlayer, SearchConfig, iterate
from .core.board.card import Card
from .core.board.grid import Grid
from .core.scoring.point_system import PointSystem, get_point_system
from .game.poker_squares import PokerSquares, GameResult

__all__ = [
    "MCTSPlayer",
    "SearchConfig",
    "iterate",
    "Card",
    "Grid",
    "PointSystem",
    "get_point_system",
    "PokerSquares",
    "GameResult",
    "play_game",
]


def play_game(point_system: str = "american", millis_per_game: float = 60000.0, **kwargs):
    """High-level API to play one game with the MCTS player.

    Args:
        point_system: Preset name ("american", "british")
        millis_per_game: Player's total time budget
        **kwargs: SearchConfig options

    Returns:
        GameResult
    """
    from .utils.seed import spawn_rngs

    config = SearchConfig(**kwargs)
    player_rng, deal_rng = spawn_rngs(config.seed, 2)
    player = MCTSPlayer(config=config, rng=player_rng)
    game = PokerSquares(
        player,
        get_point_system(point_system),
        millis_per_game=millis_per_game,
        size=config.size,
        rng=deal_rng
    )
    return game.play()
