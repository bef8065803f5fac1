#!/usr/bin/env python3
"""Compare the MCTS player against the random baseline.

Usage:
    python experiments/compare_players.py \
        --num_games 30 \
        --millis_per_game 10000 \
        --point_system american
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.comparison.player_comparison import compare_players
from src.core.scoring.point_system import get_point_system
from src.game.players import RandomPlayer
from src.mcts.search import MCTSPlayer, SearchConfig
from src.utils.config import GameConfig, load_config
from src.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="MCTS vs random Poker Squares comparison")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--num_games", type=int, default=30, help="Games per player")
    parser.add_argument("--millis_per_game", type=float, default=None, help="Time budget per game")
    parser.add_argument("--point_system", type=str, default=None, help="american or british")
    parser.add_argument("--test", type=str, default="mannwhitney", choices=["welch", "mannwhitney"])
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output", type=str, default=None, help="Write summary JSON here")
    args = parser.parse_args()

    setup_logging(logging.INFO)

    if args.config:
        search_config, game_config = load_config(args.config)
    else:
        search_config, game_config = SearchConfig(), GameConfig()
    point_system = get_point_system(args.point_system or game_config.point_system)
    millis = args.millis_per_game or game_config.millis_per_game

    summary = compare_players(
        candidate_factory=lambda rng: MCTSPlayer(config=search_config, rng=rng),
        baseline_factory=lambda rng: RandomPlayer(size=search_config.size, rng=rng),
        point_system=point_system,
        num_games=args.num_games,
        millis_per_game=millis,
        seed=args.seed,
        size=search_config.size,
        test_type=args.test
    )

    logger.info("%s mean %.2f vs %s mean %.2f, p=%.4g, d=%.2f",
                summary['candidate'], summary.get('candidate_mean', float('nan')),
                summary['baseline'], summary.get('baseline_mean', float('nan')),
                summary['p_value'], summary['effect_size'])

    if args.output:
        with open(args.output, "w") as f:
            json.dump(summary, f, indent=2)
        logger.info("Saved summary to %s", args.output)


if __name__ == "__main__":
    main()
