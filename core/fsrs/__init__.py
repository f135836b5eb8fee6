"""
FSRS - Free Spaced Repetition Scheduler

Main API for the vocabulary review system.

This module implements the FSRS v4.5 scheduling rules with:
- Four-state card lifecycle (New, Learning, Review, Relearning)
- Power-law forgetting curve: R = (1 + 0.9 * t / S) ^ -0.5
- Fixed 17-weight parameter vector for stability and difficulty updates
- Minute-scale learning steps and day-scale review intervals

Quick start:
    from core import fsrs

    # Initialize database
    fsrs.init_db()

    # Schedule a card (algorithm only, no DB calls)
    card = fsrs.create_empty_card("serendipity")
    card = fsrs.schedule(card, fsrs.Rating.GOOD)

    # Rate a stored card and persist the result
    card = fsrs.review_card("serendipity", fsrs.Rating.GOOD)

    # Get due cards
    due_cards = fsrs.get_due_cards()
"""

# Core scheduler API (algorithm logic)
from core.fsrs.scheduler import schedule, process_review

# Review workflow (algorithm + database)
from core.fsrs.scheduling import review_card

# Database API
from core.fsrs.database import (
    init_db,
    reset_db,
    is_test_mode,
    add_vocab_entry,
    get_vocab_entry,
    list_vocabulary,
    get_vocabulary_stats,
    delete_vocab_entry,
    load_card,
    save_card,
    get_due_cards,
    log_review_event,
    get_recent_events
)

# Constants and parameters
from core.fsrs.constants import (
    Rating,
    State,
    DEFAULT_WEIGHTS,
    REQUEST_RETENTION,
    DECAY,
    FACTOR,
    S_MIN,
    D_MIN,
    D_MAX,
    MS_PER_MINUTE,
    MS_PER_DAY
)

# Memory state
from core.fsrs.memory_state import (
    Card,
    ReviewLog,
    create_empty_card,
    calculate_retrievability,
    date_diff_in_days
)


__all__ = [
    # Core algorithm
    "schedule",
    "process_review",
    "review_card",

    # Database operations
    "init_db",
    "reset_db",
    "is_test_mode",
    "add_vocab_entry",
    "get_vocab_entry",
    "list_vocabulary",
    "get_vocabulary_stats",
    "delete_vocab_entry",
    "load_card",
    "save_card",
    "get_due_cards",
    "log_review_event",
    "get_recent_events",

    # Enums
    "Rating",
    "State",

    # Memory state
    "Card",
    "ReviewLog",
    "create_empty_card",
    "calculate_retrievability",
    "date_diff_in_days",

    # Parameters
    "DEFAULT_WEIGHTS",
    "REQUEST_RETENTION",
    "DECAY",
    "FACTOR",
    "S_MIN",
    "D_MIN",
    "D_MAX",
    "MS_PER_MINUTE",
    "MS_PER_DAY",
]
