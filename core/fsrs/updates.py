"""
Memory Updates

Implements the FSRS stability, difficulty and interval formulas.

Every function takes the weight vector explicitly so alternative parameter
sets can be tested; the default is the fixed DEFAULT_WEIGHTS tuple.

Key principles:
- The first rating bootstraps S and D straight from the weights
- Difficulty reverts toward the baseline w[4] to prevent runaway drift
- Failure never increases stability
- Success grows stability more for easy cards, weak memories, and
  surprising recalls (low R)
"""

from __future__ import annotations
import math
from typing import Sequence

from core.fsrs.constants import (
    Rating,
    DEFAULT_WEIGHTS,
    WEIGHT_COUNT,
    REQUEST_RETENTION,
    S_MIN,
    D_MIN,
    D_MAX,
)


def validate_weights(weights: Sequence[float]) -> Sequence[float]:
    """Reject weight vectors of the wrong length."""
    if len(weights) != WEIGHT_COUNT:
        raise ValueError(
            f"Expected {WEIGHT_COUNT} weights, got {len(weights)}"
        )
    return weights


def clamp_difficulty(difficulty: float) -> float:
    """Clip difficulty to [D_MIN, D_MAX]."""
    return min(max(D_MIN, difficulty), D_MAX)


def init_stability(
    rating: Rating,
    weights: Sequence[float] = DEFAULT_WEIGHTS
) -> float:
    """
    Initial stability after the first review.

    Formula: S0(r) = max(S_MIN, w[r-1])
    """
    return max(S_MIN, weights[rating - 1])


def init_difficulty(
    rating: Rating,
    weights: Sequence[float] = DEFAULT_WEIGHTS
) -> float:
    """
    Initial difficulty after the first review.

    Formula: D0(r) = clip(w[4] - (r-3) * w[5], 1, 10)
    """
    return clamp_difficulty(weights[4] - (rating - 3) * weights[5])


def next_difficulty(
    difficulty: float,
    rating: Rating,
    weights: Sequence[float] = DEFAULT_WEIGHTS
) -> float:
    """
    Update difficulty with mean reversion toward w[4].

    Formula:
        D' = D - w[6] * (r - 3)
        D_new = clip(w[7] * w[4] + (1 - w[7]) * D', 1, 10)

    Args:
        difficulty: Difficulty before the review
        rating: User rating
        weights: Weight vector

    Returns:
        New difficulty value (clipped to [1, 10])
    """
    shifted = difficulty - weights[6] * (rating - 3)
    reverted = weights[7] * weights[4] + (1 - weights[7]) * shifted
    return clamp_difficulty(reverted)


def next_interval(stability: float) -> int:
    """
    Whole-day interval at which retrievability reaches REQUEST_RETENTION.

    Formula: I = max(1, round(S * 9 * (1/R_target - 1)))

    Rounds half up.
    """
    raw = stability * 9 * (1 / REQUEST_RETENTION - 1)
    return max(1, math.floor(raw + 0.5))


def update_stability_on_failure(
    stability: float,
    difficulty: float,
    retrievability: float,
    weights: Sequence[float] = DEFAULT_WEIGHTS
) -> float:
    """
    Stability after a lapse (Again).

    Formula:
        S_new = min(S, w[8] * D^(-w[9]) * S^w[10] * exp(w[11] * (1 - R)))

    Capped by the old stability: failure never increases stability.
    """
    forgotten = (
        weights[8]
        * math.pow(difficulty, -weights[9])
        * math.pow(stability, weights[10])
        * math.exp(weights[11] * (1 - retrievability))
    )
    return min(stability, forgotten)


def update_stability_on_success(
    stability: float,
    difficulty: float,
    retrievability: float,
    rating: Rating,
    weights: Sequence[float] = DEFAULT_WEIGHTS
) -> float:
    """
    Stability after a successful recall (Hard/Good/Easy).

    Formula:
        S_new = S * (1 + exp(w[12]) * (11 - D) * S^(-w[13])
                       * (exp(w[14] * (1 - R)) - 1) * factor)

    Where factor is w[15] for Hard, w[16] for Easy, 1 for Good.
    """
    if rating == Rating.AGAIN:
        raise ValueError("Use update_stability_on_failure for AGAIN rating")

    if rating == Rating.HARD:
        factor = weights[15]
    elif rating == Rating.EASY:
        factor = weights[16]
    else:
        factor = 1.0

    growth = (
        math.exp(weights[12])
        * (11 - difficulty)
        * math.pow(stability, -weights[13])
        * (math.exp(weights[14] * (1 - retrievability)) - 1)
        * factor
    )
    return stability * (1 + growth)


def next_stability(
    stability: float,
    difficulty: float,
    retrievability: float,
    rating: Rating,
    weights: Sequence[float] = DEFAULT_WEIGHTS
) -> float:
    """
    Apply the stability update for any rating.

    This is the main entry point for stability updates.

    S is floored at S_MIN and D clipped to [1, 10] first, so cards loaded
    with zeroed memory parameters cannot hit a zero power term.

    Args:
        stability: Stability before the review
        difficulty: Difficulty before the review
        retrievability: Retrievability at review time
        rating: User rating
        weights: Weight vector

    Returns:
        New stability value
    """
    stability = max(stability, S_MIN)
    difficulty = clamp_difficulty(difficulty)

    if rating == Rating.AGAIN:
        return update_stability_on_failure(
            stability, difficulty, retrievability, weights
        )
    return update_stability_on_success(
        stability, difficulty, retrievability, rating, weights
    )
