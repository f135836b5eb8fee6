"""
Memory State - FSRS Card State and Retrievability

Defines the card value type, the review log record, and derived quantities.

Key concepts:
- Stability (S): Days until retrievability decays to the target (0.9)
- Difficulty (D): How hard the card is to learn (1-10 scale)
- Retrievability (R): Probability of successful recall right now

All timestamps are integer epoch milliseconds.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import time

from core.fsrs.constants import (
    Rating,
    State,
    DECAY,
    FACTOR,
    S_MIN,
    MS_PER_DAY,
)


@dataclass(frozen=True)
class Card:
    """
    Memory state for a single vocabulary item.

    Cards are immutable values: scheduling returns a new Card.
    """
    identifier: str  # The word or phrase
    state: State

    # Memory parameters (0 until the first review)
    difficulty: float  # D, range 1-10
    stability: float  # S, in days

    # Interval tracking
    elapsed_days: int  # Days since the previous review
    scheduled_days: int  # Interval chosen at the last review

    # Review tracking
    reps: int  # Total number of reviews
    last_review: int  # 0 if never reviewed
    due: int

    def __post_init__(self):
        """Coerce a stored integer state into the State enum."""
        object.__setattr__(self, "state", State(self.state))


@dataclass(frozen=True)
class ReviewLog:
    """
    Snapshot of one review, taken from the card as it was before scheduling.
    """
    identifier: str
    rating: Rating
    state: State
    due: int
    stability: float
    difficulty: float
    elapsed_days: int
    last_elapsed_days: int
    scheduled_days: int
    retrievability: Optional[float]  # None for new cards
    review: int  # Decision timestamp


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def create_empty_card(identifier: str, now: Optional[int] = None) -> Card:
    """
    Initialize state for a word that has just been saved.

    Args:
        identifier: The word or phrase
        now: Creation timestamp (defaults to now)

    Returns:
        New Card, due immediately
    """
    if now is None:
        now = now_ms()

    return Card(
        identifier=identifier,
        state=State.NEW,
        difficulty=0.0,
        stability=0.0,
        elapsed_days=0,
        scheduled_days=0,
        reps=0,
        last_review=0,
        due=now,
    )


def date_diff_in_days(start: int, end: int) -> int:
    """Whole days from start to end, never negative."""
    return max(0, (end - start) // MS_PER_DAY)


def get_elapsed_days(card: Card, now: int) -> int:
    """Days since the card's last review (0 if never reviewed)."""
    if card.last_review == 0:
        return 0
    return date_diff_in_days(card.last_review, now)


def calculate_retrievability(stability: float, elapsed_days: float) -> float:
    """
    Calculate retrievability using the FSRS power-law forgetting curve.

    Formula: R = (1 + FACTOR * t / S) ^ DECAY

    Interpretation:
    - Immediately after review: R = 1.0
    - As time passes: R decays with a heavier tail than exp(-t/S)

    Args:
        stability: Current stability in days (floored at S_MIN)
        elapsed_days: Days since the last review

    Returns:
        Retrievability between 0 and 1
    """
    return (1 + FACTOR * elapsed_days / max(stability, S_MIN)) ** DECAY
