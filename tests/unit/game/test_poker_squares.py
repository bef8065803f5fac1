"""Test the game loop and baseline player."""

import numpy as np
import pytest
from src.game.players import RandomPlayer
from src.game.poker_squares import IllegalPlayError, PokerSquares


class StubbornPlayer:
    """Always plays the top-left cell."""
    name = "Stubborn"

    def init(self):
        pass

    def set_point_system(self, system, millis):
        pass

    def get_play(self, card, millis_remaining):
        return 0, 0


def test_random_player_full_game(american, shuffled_deck):
    player = RandomPlayer(rng=np.random.default_rng(1))
    game = PokerSquares(player, american)
    result = game.play(deck_order=shuffled_deck)

    assert not result.timed_out
    assert result.grid.is_full()
    assert len(result.plays) == 25
    assert [card for card, _ in result.plays] == shuffled_deck[:25]
    assert result.score == american.score(result.grid)


def test_random_game_shuffles_with_rng(american):
    a = PokerSquares(RandomPlayer(rng=np.random.default_rng(0)), american,
                     rng=np.random.default_rng(5)).play()
    b = PokerSquares(RandomPlayer(rng=np.random.default_rng(0)), american,
                     rng=np.random.default_rng(5)).play()
    assert a.plays == b.plays
    assert a.score == b.score


def test_illegal_play_raises(american, shuffled_deck):
    game = PokerSquares(StubbornPlayer(), american)
    with pytest.raises(IllegalPlayError):
        game.play(deck_order=shuffled_deck)


def test_timeout_scores_zero(american, shuffled_deck, make_clock):
    game = PokerSquares(RandomPlayer(), american, millis_per_game=5000,
                        clock=make_clock(step=1.0))
    result = game.play(deck_order=shuffled_deck)

    assert result.timed_out
    assert result.score == 0.0
    # 1 s per call: the sixth play exceeds 5 s
    assert len(result.plays) == 5


def test_short_deck_rejected(american, shuffled_deck):
    game = PokerSquares(RandomPlayer(), american)
    with pytest.raises(ValueError):
        game.play(deck_order=shuffled_deck[:24])


def test_player_reset_between_games(american, shuffled_deck):
    player = RandomPlayer(rng=np.random.default_rng(2))
    game = PokerSquares(player, american)
    game.play(deck_order=shuffled_deck)
    result = game.play(deck_order=shuffled_deck[::-1])
    assert result.grid.is_full()
