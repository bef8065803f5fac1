"""Main MCTS search for card placement.

One decision per dealt card, under a wall-clock budget:

def get_play(card):
    root = SearchNode(current grid)
    while time remains:
        deck = [card] + shuffled(unseen cards)
        repeat trials_per_deck times:
            path = select from root, popping one card per level
            expand the first leaf with the next card
            value = mean of rollouts from one new child
            backprop(path, value)
        prune everything below the root's children
    return cell of the root child with the best mean outcome

The tree never sees the true order of undealt cards; each batch
samples a fresh deck future and only the statistics at the root's
children persist across batches.
"""

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, Sequence, Tuple

import numpy as np

from .node import SearchNode
from .tree import MCTSTree
from .ucb import ucb_select, select_best_mean
from .rollout import rollout, Scorer
from .backprop import backpropagate_path

from ..core.board.card import Card
from ..core.board.grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for the MCTS player."""
    size: int = 5
    # Tree-growth iterations run against each sampled deck future
    trials_per_deck: int = 10
    # Rollouts averaged per iteration
    simulations_per_rollout: int = 1
    selection_constant: float = 10.0
    epsilon: float = 1e-6
    # Held back from the game budget before it is split across turns
    safety_margin_millis: float = 1000.0
    # Optional cap on batches per decision (None = deadline only)
    max_batches: Optional[int] = None
    seed: Optional[int] = None

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError("size must be positive")
        if self.trials_per_deck < 1:
            raise ValueError("trials_per_deck must be at least 1")
        if self.simulations_per_rollout < 1:
            raise ValueError("simulations_per_rollout must be at least 1")
        if self.epsilon <= 0:
            raise ValueError("epsilon must be positive")
        if self.max_batches is not None and self.max_batches < 0:
            raise ValueError("max_batches must be non-negative")


def _pop(deck: Deque[Card]) -> Card:
    if not deck:
        raise ValueError("Deck future exhausted before the tree path ended")
    return deck.popleft()


def iterate(
    root: SearchNode,
    deck_future: Sequence[Card],
    scorer: Scorer,
    config: SearchConfig,
    rng: np.random.Generator
) -> float:
    """Single MCTS iteration against one deck future.

    1. UCB select from root while the node is expanded, one card per level
    2. Expand the first unexpanded node with the next card
    3. UCB select one of the new children as the evaluation node
    4. Average ``simulations_per_rollout`` rollouts from it
    5. Backpropagate along the visited path

    A terminal node reached in step 1 is scored directly.

    Returns:
        Outcome backpropagated this iteration
    """
    deck = deque(deck_future)
    path: List[SearchNode] = [root]
    node = root

    # 1. Selection
    while not node.is_leaf():
        node = ucb_select(node, config.selection_constant, config.epsilon, rng)
        _pop(deck)
        path.append(node)

    # 2-3. Expansion, then pick the evaluation node
    if node.is_terminal():
        leaf = node
    else:
        node.expand(_pop(deck))
        leaf = ucb_select(node, config.selection_constant, config.epsilon, rng)
        path.append(leaf)

    # 4. Rollout
    remaining = list(deck)
    total = 0.0
    for _ in range(config.simulations_per_rollout):
        total += rollout(leaf.grid, remaining, scorer, rng)
    value = total / config.simulations_per_rollout

    # 5. Backpropagate
    backpropagate_path(path, value)

    return value


class MCTSPlayer:
    """Poker Squares player choosing each placement with MCTS.

    The first card always goes to the top-left cell and the last card
    to the only empty cell; every other turn is searched.

    Args:
        config: Search configuration
        deck: Full deck the game deals from (default: 52 cards)
        rng: Shared generator for every random choice in the search
        clock: Monotonic clock in seconds, polled between batches
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        deck: Optional[Sequence[Card]] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Callable[[], float]] = None
    ):
        self.config = config or SearchConfig()
        self.deck = list(deck) if deck is not None else Card.get_all_cards()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.clock = clock or time.monotonic
        self.scorer: Optional[Scorer] = None

        self.grid = Grid(self.config.size)
        self.num_plays = 0
        self.dealt: List[Card] = []
        self.root: Optional[SearchNode] = None
        self.last_search_stats: dict = {}

    @property
    def name(self) -> str:
        return "MCTS Player"

    def init(self) -> None:
        """Reset for a new game."""
        self.grid.clear()
        self.num_plays = 0
        self.dealt = []
        self.root = None
        self.last_search_stats = {}

    def set_point_system(self, system: Scorer, millis: float = 0) -> None:
        self.scorer = system

    def get_play(self, card: Card, millis_remaining: float) -> Tuple[int, int]:
        """Choose a cell for ``card``.

        Args:
            card: Card just dealt
            millis_remaining: Time left for all of this game's remaining turns

        Returns:
            (row, col) of the chosen empty cell
        """
        num_cells = self.grid.num_cells

        if self.num_plays == 0:
            cell = (0, 0)
        elif self.num_plays < num_cells - 1:
            cell = self._search(card, millis_remaining)
        else:
            cell = self.grid.empty_cells()[0]

        self.grid.place(cell[0], cell[1], card)
        self.dealt.append(card)
        self.num_plays += 1
        return cell

    def _draw_deck_future(self, card: Card, num_empty: int) -> List[Card]:
        """Revealed card followed by a random sample of unseen cards."""
        seen = set(self.dealt)
        seen.add(card)
        unseen = [c for c in self.deck if c not in seen]
        order = self.rng.permutation(len(unseen))[:num_empty - 1]
        return [card] + [unseen[i] for i in order]

    def _search(self, card: Card, millis_remaining: float) -> Tuple[int, int]:
        if self.scorer is None:
            raise RuntimeError("set_point_system() must be called before searching")

        config = self.config
        num_empty = self.grid.num_cells - self.num_plays
        millis_per_play = (millis_remaining - config.safety_margin_millis) / num_empty
        start = self.clock()
        end = start + millis_per_play / 1000.0

        root = SearchNode.root(self.grid)
        tree = MCTSTree(root)
        self.root = root

        batches = 0
        iterations = 0
        while self.clock() < end:
            if config.max_batches is not None and batches >= config.max_batches:
                break

            deck_future = self._draw_deck_future(card, num_empty)
            for _ in range(config.trials_per_deck):
                iterate(root, deck_future, self.scorer, config, self.rng)
                iterations += 1

            tree.prune_grandchildren()
            batches += 1

        if root.is_leaf():
            # Out of time before the first batch: any legal cell will do
            root.expand(card)
        best = select_best_mean(root, config.epsilon)

        changed = root.grid.diff(best.grid)
        if len(changed) != 1:
            raise ValueError(f"Best child differs from root in {len(changed)} cells")

        self.last_search_stats = {
            "batches": batches,
            "iterations": iterations,
            "elapsed_ms": (self.clock() - start) * 1000.0,
            "budget_ms": millis_per_play,
            "root_visits": root.visit_count,
            "best_visits": best.visit_count,
            "best_mean": best.mean_value(config.epsilon),
        }
        logger.debug(
            "play %d: %s -> %s after %d batches (%d iterations), mean=%.2f",
            self.num_plays, card, changed[0], batches, iterations,
            self.last_search_stats["best_mean"]
        )
        return changed[0]
