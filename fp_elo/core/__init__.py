"""
Core fixed-point Elo rating functionality.
"""

from .fixed_point import PRECISION, SCALE, LN10, E, fp_exp, fp_exp_int, fp_pow10
from .elo_rating import (
    EloRating,
    EloConfig,
    Outcome,
    expected_score,
    expected_percentage,
    update_ratings,
    elo,
)
