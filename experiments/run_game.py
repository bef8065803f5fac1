#!/usr/bin/env python3
"""Play Poker Squares games with the MCTS player.

Usage:
    python experiments/run_game.py \
        --config configs/default.yaml \
        --num_games 10 \
        --seed 42
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.scoring.point_system import get_point_system
from src.game.poker_squares import PokerSquares
from src.mcts.search import MCTSPlayer, SearchConfig
from src.utils.config import GameConfig, load_config
from src.utils.logging import setup_logging
from src.utils.seed import spawn_rngs

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Play Poker Squares with MCTS")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--num_games", type=int, default=None, help="Override number of games")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log_level", type=str, default="INFO", help="Logging level")
    parser.add_argument("--log_file", type=str, default=None, help="Optional log file")
    args = parser.parse_args()

    setup_logging(args.log_level, args.log_file)

    if args.config:
        search_config, game_config = load_config(args.config)
    else:
        search_config, game_config = SearchConfig(), GameConfig()
    num_games = args.num_games or game_config.num_games
    seed = args.seed if args.seed is not None else game_config.seed

    point_system = get_point_system(game_config.point_system)
    logger.info("Point system: %s", point_system)

    player_rng, deal_rng = spawn_rngs(seed, 2)
    player = MCTSPlayer(config=search_config, rng=player_rng)
    game = PokerSquares(
        player,
        point_system,
        millis_per_game=game_config.millis_per_game,
        size=search_config.size,
        rng=deal_rng
    )

    scores = []
    for i in range(num_games):
        result = game.play()
        scores.append(result.score)
        logger.info("Game %d/%d: score=%.0f%s\n%s", i + 1, num_games, result.score,
                    " (timed out)" if result.timed_out else "", result.grid)

    logger.info("Mean score over %d games: %.2f (std %.2f)",
                num_games, np.mean(scores), np.std(scores))


if __name__ == "__main__":
    main()
