"""
FP Elo - Deterministic, integer-only Elo ratings.
"""

from .core import EloRating, EloConfig, Outcome, expected_score, expected_percentage, update_ratings, elo
from .core.elo_rating import (
    new_rating,
    rating_from_integer,
    rating_to_integer,
    default_config,
    outcome_to_score,
)

__all__ = [
    "EloRating",
    "EloConfig",
    "Outcome",
    "new_rating",
    "rating_from_integer",
    "rating_to_integer",
    "default_config",
    "outcome_to_score",
    "expected_score",
    "expected_percentage",
    "update_ratings",
    "elo",
]
