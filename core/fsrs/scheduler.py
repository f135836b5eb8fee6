"""
Scheduler - FSRS Algorithm Logic

Pure FSRS scheduling (no database calls).

Main workflow:
1. Compute elapsed days since the last review
2. Calculate retrievability (skipped for new cards)
3. Apply the transition rules for the card's state
4. Return a new card (the input card is never modified)

This module handles ONLY the algorithm logic.
Database I/O is handled by the database module.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from core.fsrs import memory_state, updates
from core.fsrs.constants import (
    Rating,
    State,
    DEFAULT_WEIGHTS,
    MS_PER_MINUTE,
    MS_PER_DAY,
    NEW_CARD_STEPS,
    LEARNING_AGAIN_MINUTES,
    LAPSE_MINUTES,
    GRADUATING_DAYS,
)


def schedule(
    card: memory_state.Card,
    rating: Rating,
    now: Optional[int] = None,
    weights: Sequence[float] = DEFAULT_WEIGHTS
) -> memory_state.Card:
    """
    Calculate the next state of a card from a rating.

    Args:
        card: Card to schedule (any state, including a fresh new card)
        rating: User rating (AGAIN, HARD, GOOD, EASY)
        now: Decision timestamp in epoch ms (defaults to now)
        weights: 17-element weight vector

    Returns:
        New Card with memory parameters, state, interval and due updated

    Raises:
        ValueError: If the rating is not 1-4 or the weights are malformed
    """
    rating = Rating(rating)
    updates.validate_weights(weights)
    if now is None:
        now = memory_state.now_ms()

    elapsed_days, retrievability = _memory_at_review(card, now)
    return _apply_rating(card, rating, now, elapsed_days, retrievability, weights)


def process_review(
    card: memory_state.Card,
    rating: Rating,
    now: Optional[int] = None,
    weights: Sequence[float] = DEFAULT_WEIGHTS
) -> Tuple[memory_state.Card, memory_state.ReviewLog]:
    """
    Schedule a card and return the updated card + review log.

    No database calls. Caller is responsible for:
    1. Loading the card
    2. Saving the card after review
    3. Persisting the log

    The log records the same elapsed days and retrievability the
    scheduler used.

    Args:
        card: Card to schedule
        rating: User rating
        now: Decision timestamp in epoch ms (defaults to now)
        weights: 17-element weight vector

    Returns:
        Tuple of (updated_card, review_log)
    """
    rating = Rating(rating)
    updates.validate_weights(weights)
    if now is None:
        now = memory_state.now_ms()

    elapsed_days, retrievability = _memory_at_review(card, now)
    updated = _apply_rating(card, rating, now, elapsed_days, retrievability, weights)

    review_log = memory_state.ReviewLog(
        identifier=card.identifier,
        rating=rating,
        state=card.state,
        due=card.due,
        stability=card.stability,
        difficulty=card.difficulty,
        elapsed_days=elapsed_days,
        last_elapsed_days=card.elapsed_days,
        scheduled_days=card.scheduled_days,
        retrievability=retrievability,
        review=now,
    )

    return updated, review_log


def _memory_at_review(
    card: memory_state.Card,
    now: int
) -> Tuple[int, Optional[float]]:
    """Elapsed days and retrievability at decision time (R is None for new cards)."""
    elapsed_days = memory_state.get_elapsed_days(card, now)
    if card.state == State.NEW:
        return elapsed_days, None
    return elapsed_days, memory_state.calculate_retrievability(
        card.stability, elapsed_days
    )


def _apply_rating(
    card: memory_state.Card,
    rating: Rating,
    now: int,
    elapsed_days: int,
    retrievability: Optional[float],
    weights: Sequence[float]
) -> memory_state.Card:
    if card.state == State.NEW:
        state, difficulty, stability, scheduled_days, due = _schedule_new(
            rating, now, weights
        )
    elif card.state == State.REVIEW:
        state, difficulty, stability, scheduled_days, due = _schedule_review(
            card, rating, retrievability, now, weights
        )
    else:
        state, difficulty, stability, scheduled_days, due = _schedule_learning(
            card, rating, retrievability, now, weights
        )

    return replace(
        card,
        state=state,
        difficulty=difficulty,
        stability=stability,
        elapsed_days=elapsed_days,
        scheduled_days=scheduled_days,
        reps=card.reps + 1,
        last_review=now,
        due=due,
    )


def _schedule_new(
    rating: Rating,
    now: int,
    weights: Sequence[float]
) -> Tuple[State, float, float, int, int]:
    """
    First-ever review: bootstrap S and D from the weights.

    Again/Hard/Good stay in minute-scale learning steps.
    Only Easy jumps straight to day-scale review.
    """
    difficulty = updates.init_difficulty(rating, weights)
    stability = updates.init_stability(rating, weights)

    if rating == Rating.EASY:
        scheduled_days = updates.next_interval(stability)
        return State.REVIEW, difficulty, stability, scheduled_days, now + scheduled_days * MS_PER_DAY

    due = now + NEW_CARD_STEPS[rating] * MS_PER_MINUTE
    return State.LEARNING, difficulty, stability, 0, due


def _schedule_learning(
    card: memory_state.Card,
    rating: Rating,
    retrievability: float,
    now: int,
    weights: Sequence[float]
) -> Tuple[State, float, float, int, int]:
    """
    Learning or relearning step.

    Again keeps drilling in the same state. Hard and Good both graduate
    with a one-day interval; Easy graduates with the full interval.
    """
    difficulty = updates.next_difficulty(card.difficulty, rating, weights)
    stability = updates.next_stability(
        card.stability, card.difficulty, retrievability, rating, weights
    )

    if rating == Rating.AGAIN:
        return card.state, difficulty, stability, 0, now + LEARNING_AGAIN_MINUTES * MS_PER_MINUTE

    if rating == Rating.EASY:
        scheduled_days = updates.next_interval(stability)
    else:
        scheduled_days = GRADUATING_DAYS

    return State.REVIEW, difficulty, stability, scheduled_days, now + scheduled_days * MS_PER_DAY


def _schedule_review(
    card: memory_state.Card,
    rating: Rating,
    retrievability: float,
    now: int,
    weights: Sequence[float]
) -> Tuple[State, float, float, int, int]:
    """
    Long-term review.

    Both formulas read the pre-update difficulty and stability.
    Again is a lapse: relearn in 5 minutes.
    """
    difficulty = updates.next_difficulty(card.difficulty, rating, weights)
    stability = updates.next_stability(
        card.stability, card.difficulty, retrievability, rating, weights
    )

    if rating == Rating.AGAIN:
        return State.RELEARNING, difficulty, stability, 0, now + LAPSE_MINUTES * MS_PER_MINUTE

    scheduled_days = updates.next_interval(stability)
    return State.REVIEW, difficulty, stability, scheduled_days, now + scheduled_days * MS_PER_DAY
