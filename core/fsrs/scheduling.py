"""
Scheduling - Main FSRS API for Review Management

This module ties the scheduler to the database and provides the main API
for rating a card during a review session.

Main workflow:
1. User rates a due card
2. Load the card (or start a new one)
3. Schedule it
4. Save state and log the review
"""

from __future__ import annotations
from typing import Optional

from core.fsrs import database, memory_state, scheduler
from core.fsrs.constants import Rating


def review_card(
    word: str,
    rating: Rating,
    now: Optional[int] = None
) -> memory_state.Card:
    """
    Rate a card, persist the new state and log the review.

    This is the main entry point for review sessions.

    Args:
        word: Word identifier
        rating: User rating (AGAIN, HARD, GOOD, EASY)
        now: Review timestamp in epoch ms (defaults to now)

    Returns:
        The updated Card as saved

    Raises:
        ValueError: If the rating is not 1-4 (nothing is written)
    """
    rating = Rating(rating)
    if now is None:
        now = memory_state.now_ms()

    card = database.load_card(word)
    if card is None:
        # Word reviewed before it was saved - start from an empty card
        card = memory_state.create_empty_card(word, now)

    updated, review_log = scheduler.process_review(card, rating, now)

    database.save_card(updated)
    database.log_review_event(review_log)

    return updated
