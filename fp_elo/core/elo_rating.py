"""
Core implementation of the integer-only Elo rating system.

Ratings are plain integers. Expected and actual scores are fixed-point
fractions of SCALE, see fixed_point.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .fixed_point import PRECISION, SCALE, fp_pow10, to_fixed, from_fixed

logger = logging.getLogger(__name__)

DEFAULT_RATING = 1000
DEFAULT_K_FACTOR = 32

# Rating gap that corresponds to a factor of ten in the odds
ELO_SPREAD = 400


def _check_non_negative_int(value, name: str) -> None:
    # bool is an int subclass
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


class Outcome(enum.Enum):
    """
    The possible outcomes of a match, always from player one's perspective.

    WIN is a win for player one, LOSS is a win for player two.
    """

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"

    def to_chess_points(self) -> int:
        """
        Convert the outcome into chess points (1, 0.5, 0) at fixed-point scale.

        Returns:
            SCALE for a win, SCALE / 2 for a draw, 0 for a loss
        """
        if self is Outcome.WIN:
            return SCALE
        if self is Outcome.DRAW:
            return SCALE >> 1
        return 0

    @classmethod
    def from_winner(cls, winner: str) -> "Outcome":
        """
        Convert a comparison verdict into an outcome for player one.

        Args:
            winner: "A" if player one won, "B" if player two won, "TIE" otherwise

        Returns:
            The matching Outcome
        """
        label = str(winner).strip().upper()
        if label == "A":
            return cls.WIN
        elif label == "B":
            return cls.LOSS
        elif label == "TIE":
            return cls.DRAW
        raise ValueError(f"Unknown winner label: {winner!r}")


@dataclass(frozen=True)
class EloRating:
    """
    The Elo rating of a player. The default rating is 1000.

    Ratings are immutable, an update always produces new EloRating values.
    """

    rating: int = DEFAULT_RATING

    def __post_init__(self):
        _check_non_negative_int(self.rating, "rating")

    @classmethod
    def new(cls) -> "EloRating":
        """Create a rating with the default value of 1000."""
        return cls()

    @classmethod
    def from_int(cls, rating: int) -> "EloRating":
        return cls(rating)

    def __int__(self) -> int:
        return self.rating


@dataclass(frozen=True)
class EloConfig:
    """
    Constants used in the Elo calculation.

    k is the maximum rating change from a single match. In chess, values from
    40 down to 10 are used, most commonly 32, 24, 16 or 10. The higher the
    number, the more volatile the ranking.
    """

    k: int = DEFAULT_K_FACTOR

    def __post_init__(self):
        _check_non_negative_int(self.k, "k")

    @classmethod
    def new(cls) -> "EloConfig":
        """Create a config with the default k of 32."""
        return cls()


RatingLike = Union[EloRating, int]


def _as_rating(value: RatingLike) -> EloRating:
    if isinstance(value, EloRating):
        return value
    return EloRating(value)


def new_rating() -> EloRating:
    """Return a fresh rating of 1000."""
    return EloRating.new()


def rating_from_integer(n: int) -> EloRating:
    return EloRating.from_int(n)


def rating_to_integer(rating: EloRating) -> int:
    return int(rating)


def default_config() -> EloConfig:
    """Return the default config, k = 32."""
    return EloConfig.new()


def outcome_to_score(outcome: Outcome) -> int:
    """Fixed-point chess points for an outcome."""
    return outcome.to_chess_points()


def expected_score(player_one: RatingLike, player_two: RatingLike) -> int:
    """
    Calculate the expected score of player one against player two.

    The classic logistic model 1 / (1 + 10^((R2 - R1) / 400)), evaluated with
    fixed-point integers only.

    Args:
        player_one: Rating of player one
        player_two: Rating of player two

    Returns:
        Probability of victory for player one as a fixed-point value in
        [0, SCALE]. SCALE / 2 means both players are even.
    """
    r1 = _as_rating(player_one).rating
    r2 = _as_rating(player_two).rating

    diff = abs(r1 - r2)
    exponent_term = fp_pow10(to_fixed(diff) // ELO_SPREAD)

    # Expected score of the lower rated player
    exp_lower = (1 << (PRECISION + PRECISION)) // (SCALE + exponent_term)

    if r2 >= r1:
        return exp_lower
    return SCALE - exp_lower


def expected_percentage(expected: int) -> int:
    """
    Render a fixed-point expected score as a whole percentage.

    Args:
        expected: Value returned by expected_score

    Returns:
        The percentage, rounded down
    """
    return from_fixed(expected * 100)


def update_ratings(
    player_one: RatingLike,
    player_two: RatingLike,
    outcome: Outcome,
    config: Optional[EloConfig] = None,
) -> Tuple[EloRating, EloRating]:
    """
    Calculate the new ratings of two players from their old ratings and the
    outcome of their match.

    The outcome is from the perspective of player one. Player two's rating is
    derived from the zero-sum identity, so the sum of both ratings never
    changes.

    If the update would push player one below zero (or player two below zero),
    the new rating of player one is clamped into [0, R1 + R2] first.

    Args:
        player_one: Rating of player one
        player_two: Rating of player two
        outcome: Outcome of the match for player one
        config: Elo constants, defaults to k = 32

    Returns:
        Tuple of (new rating for player one, new rating for player two)
    """
    if not isinstance(outcome, Outcome):
        raise TypeError(f"outcome must be an Outcome, got {type(outcome).__name__}")

    if config is None:
        config = default_config()

    r1 = _as_rating(player_one).rating
    r2 = _as_rating(player_two).rating

    expected = expected_score(r1, r2)
    actual = outcome.to_chess_points()

    new_r1 = from_fixed(to_fixed(r1) + config.k * actual - config.k * expected)

    total = r1 + r2
    if new_r1 < 0 or new_r1 > total:
        logger.warning(
            "Rating update out of range (%d for a total of %d), clamping", new_r1, total
        )
        new_r1 = max(0, min(total, new_r1))

    new_r2 = total - new_r1

    logger.debug(
        "elo %d vs %d (%s, k=%d): expected=%d -> %d, %d",
        r1, r2, outcome.value, config.k, expected, new_r1, new_r2,
    )

    return EloRating(new_r1), EloRating(new_r2)


# Short name for the update function
elo = update_ratings
