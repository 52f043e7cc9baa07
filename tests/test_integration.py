"""
Integration tests for the public fp_elo API and the invariants of the model.
"""

import numpy as np
import pytest

import fp_elo
from fp_elo import EloRating, EloConfig, Outcome, expected_score, update_ratings
from fp_elo.core import SCALE


@pytest.fixture
def rng():
    """Seeded generator so every run checks the same samples."""
    return np.random.default_rng(1234)


@pytest.fixture
def rating_pairs(rng):
    """Random rating pairs across the usual Elo range."""
    return rng.integers(0, 3000, size=(500, 2)).tolist()


def test_public_api():
    """Test that the package exposes the whole public surface."""
    for name in fp_elo.__all__:
        assert hasattr(fp_elo, name)
    
    assert fp_elo.elo is fp_elo.update_ratings
    assert fp_elo.new_rating() == EloRating(1000)
    assert fp_elo.default_config() == EloConfig(32)


@pytest.mark.parametrize("outcome", list(Outcome))
def test_zero_sum_conservation(rating_pairs, rng, outcome):
    """The sum of both ratings never changes."""
    for r1, r2 in rating_pairs:
        config = EloConfig(int(rng.integers(0, 65)))
        new_one, new_two = update_ratings(r1, r2, outcome, config)
        
        assert new_one.rating + new_two.rating == r1 + r2
        assert new_one.rating >= 0
        assert new_two.rating >= 0


def test_draw_between_equals_changes_nothing(rng):
    """Equal ratings and a draw leave both ratings alone."""
    for rating in rng.integers(0, 3000, size=50).tolist():
        for k in (0, 10, 16, 24, 32, 40):
            result = update_ratings(rating, rating, Outcome.DRAW, EloConfig(k))
            assert result == (EloRating(rating), EloRating(rating))


def test_monotonic_reward(rating_pairs):
    """A win never lowers player one's rating, a loss never raises it."""
    config = EloConfig()
    for r1, r2 in rating_pairs:
        won, _ = update_ratings(r1, r2, Outcome.WIN, config)
        lost, _ = update_ratings(r1, r2, Outcome.LOSS, config)
        
        assert won.rating >= r1
        assert lost.rating <= r1


def test_expected_score_symmetry(rating_pairs):
    """Both players' expected scores add up to one."""
    for r1, r2 in rating_pairs:
        total = expected_score(r1, r2) + expected_score(r2, r1)
        assert abs(total - SCALE) <= 1


def test_expected_score_bounds(rating_pairs):
    """Expected scores are fixed-point probabilities."""
    for r1, r2 in rating_pairs:
        assert 0 <= expected_score(r1, r2) <= SCALE


def test_expected_score_midpoint(rng):
    """Equal ratings always give exactly one half."""
    for rating in rng.integers(0, 5000, size=100).tolist():
        assert expected_score(rating, rating) == SCALE // 2


def test_expected_score_tracks_logistic_curve(rating_pairs):
    """The integer model stays within one percent of the float formula."""
    for r1, r2 in rating_pairs:
        exact = 1.0 / (1.0 + np.power(10.0, (r2 - r1) / 400.0))
        assert abs(expected_score(r1, r2) / SCALE - exact) < 0.01


def test_upset_amplification():
    """Beating a stronger opponent earns more than beating a weaker one."""
    config = EloConfig()
    player = EloRating(1000)
    
    vs_strong, _ = update_ratings(player, EloRating(1400), Outcome.WIN, config)
    vs_weak, _ = update_ratings(player, EloRating(1100), Outcome.WIN, config)
    
    assert vs_strong.rating - player.rating == 29
    assert vs_weak.rating - player.rating == 20
    assert vs_strong.rating > vs_weak.rating


def test_repeated_matches_conserve_pool():
    """A sequence of matches keeps the pool total constant."""
    ratings = [EloRating(), EloRating(1200), EloRating(800)]
    pool = sum(int(r) for r in ratings)
    
    schedule = [
        (0, 1, Outcome.WIN),
        (1, 2, Outcome.DRAW),
        (2, 0, Outcome.LOSS),
        (0, 2, Outcome.WIN),
        (1, 0, Outcome.WIN),
    ]
    for a, b, outcome in schedule:
        ratings[a], ratings[b] = update_ratings(ratings[a], ratings[b], outcome)
    
    assert sum(int(r) for r in ratings) == pool
