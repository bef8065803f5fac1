"""Poker Squares game loop.

Deals one card per turn to a single player, who must place it in an
empty cell of the grid. The player's clock covers the whole game.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

import numpy as np

from ..core.board.card import Card
from ..core.board.deck import Deck
from ..core.board.grid import Grid
from ..core.scoring.point_system import PointSystem

logger = logging.getLogger(__name__)


class IllegalPlayError(ValueError):
    """Player returned a cell outside the grid or already filled."""


class Player(Protocol):
    """Interface the game loop drives."""

    @property
    def name(self) -> str: ...

    def init(self) -> None: ...

    def set_point_system(self, system: PointSystem, millis: float) -> None: ...

    def get_play(self, card: Card, millis_remaining: float) -> Tuple[int, int]: ...


@dataclass
class GameResult:
    """Outcome of one game."""
    score: float
    grid: Grid
    plays: List[Tuple[Card, Tuple[int, int]]] = field(default_factory=list)
    timed_out: bool = False
    millis_used: float = 0.0


class PokerSquares:
    """Single-player Poker Squares game.

    Args:
        player: Player choosing each placement
        point_system: Scores the finished grid
        millis_per_game: Player's total time budget
        size: Grid side length
        rng: Shuffles the deck when no explicit order is given
        clock: Monotonic clock in seconds
    """

    def __init__(
        self,
        player: Player,
        point_system: PointSystem,
        millis_per_game: float = 60000.0,
        size: int = 5,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Callable[[], float]] = None
    ):
        self.player = player
        self.point_system = point_system
        self.millis_per_game = millis_per_game
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock or time.monotonic

    def play(self, deck_order: Optional[Sequence[Card]] = None) -> GameResult:
        """Play one game and return its result.

        Args:
            deck_order: Fixed dealing order (default: freshly shuffled deck)
        """
        deck = Deck(rng=self.rng, order=deck_order)
        grid = Grid(self.size)
        if len(deck) < grid.num_cells:
            raise ValueError(f"Deck of {len(deck)} cards cannot fill {grid.num_cells} cells")

        self.player.init()
        self.player.set_point_system(self.point_system, self.millis_per_game)

        millis_remaining = self.millis_per_game
        plays = []
        for _ in range(grid.num_cells):
            card = deck.deal()
            start = self.clock()
            row, col = self.player.get_play(card, millis_remaining)
            millis_remaining -= (self.clock() - start) * 1000.0

            if millis_remaining < 0:
                logger.warning("%s ran out of time after %d plays",
                               self.player.name, len(plays))
                return GameResult(
                    score=0.0,
                    grid=grid,
                    plays=plays,
                    timed_out=True,
                    millis_used=self.millis_per_game - millis_remaining
                )

            if not grid.is_valid_position(row, col) or not grid.is_empty(row, col):
                logger.warning("%s made an illegal play: %s -> (%s, %s)",
                               self.player.name, card, row, col)
                raise IllegalPlayError(f"Illegal play of {card} at ({row}, {col})")

            grid.place(row, col, card)
            plays.append((card, (row, col)))

        score = self.point_system.score(grid)
        logger.info("%s scored %.0f (%s)", self.player.name, score, self.point_system.name)
        return GameResult(
            score=score,
            grid=grid,
            plays=plays,
            millis_used=self.millis_per_game - millis_remaining
        )
