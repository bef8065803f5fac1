"""Play two players on identical deals and compare their scores."""

import logging
import time
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from ..core.board.card import Card
from ..core.scoring.point_system import PointSystem
from ..game.poker_squares import Player, PokerSquares
from ..utils.seed import spawn_rngs
from .statistical_tests import statistical_significance_test

logger = logging.getLogger(__name__)

PlayerFactory = Callable[[np.random.Generator], Player]


def play_games(
    player: Player,
    point_system: PointSystem,
    deals: Sequence[Sequence[Card]],
    millis_per_game: float = 60000.0,
    size: int = 5
) -> List[float]:
    """Score of ``player`` on each fixed deal."""
    game = PokerSquares(player, point_system, millis_per_game=millis_per_game, size=size)
    scores = []
    for i, deal in enumerate(deals):
        result = game.play(deck_order=deal)
        scores.append(result.score)
        logger.info("%s game %d/%d: %.0f", player.name, i + 1, len(deals), result.score)
    return scores


def compare_players(
    candidate_factory: PlayerFactory,
    baseline_factory: PlayerFactory,
    point_system: PointSystem,
    num_games: int = 30,
    millis_per_game: float = 60000.0,
    seed: Optional[int] = None,
    size: int = 5,
    test_type: str = "mannwhitney"
) -> Dict:
    """Compare a candidate player against a baseline.

    Both players see the same sequence of shuffled decks so the
    comparison is paired on deal luck.

    Args:
        candidate_factory: Builds the candidate from a generator
        baseline_factory: Builds the baseline from a generator
        point_system: Scoring used for both players
        num_games: Games per player
        millis_per_game: Time budget per game
        seed: Master seed for deals and both players

    Returns:
        Significance summary plus raw scores
    """
    deal_rng, candidate_rng, baseline_rng = spawn_rngs(seed, 3)
    cards = Card.get_all_cards()
    deals = [[cards[i] for i in deal_rng.permutation(len(cards))] for _ in range(num_games)]

    start = time.time()
    candidate = candidate_factory(candidate_rng)
    baseline = baseline_factory(baseline_rng)
    candidate_scores = play_games(candidate, point_system, deals, millis_per_game, size)
    baseline_scores = play_games(baseline, point_system, deals, millis_per_game, size)

    summary = statistical_significance_test(
        candidate_scores,
        baseline_scores,
        min_samples=min(30, num_games),
        test_type=test_type
    )
    summary.update({
        'candidate': candidate.name,
        'baseline': baseline.name,
        'point_system': point_system.name,
        'candidate_scores': candidate_scores,
        'baseline_scores': baseline_scores,
        'elapsed_s': time.time() - start
    })
    return summary
