"""
FSRS Constants and Parameters

All fixed parameters for the scheduler in one place.
The weight vector is the standard free-spaced-repetition-scheduler default
(FSRS v4.5) and is never trained.
"""

from enum import IntEnum


# ---- Ratings ----

class Rating(IntEnum):
    """User self-assessment of a recall attempt."""
    AGAIN = 1   # Recall failed
    HARD = 2    # Recalled with high effort
    GOOD = 3    # Recalled normally
    EASY = 4    # Recalled fluently


# ---- Lifecycle ----

class State(IntEnum):
    """Lifecycle stage of a card."""
    NEW = 0
    LEARNING = 1
    REVIEW = 2
    RELEARNING = 3


# ---- Default Weights ----
# Indices 0-3   : initial stability per rating (AGAIN..EASY)
# Indices 4-5   : initial difficulty intercept and slope
# Indices 6-7   : difficulty step and mean-reversion weight
# Indices 8-11  : stability after a lapse
# Indices 12-14 : stability after a successful recall
# Indices 15-16 : hard penalty and easy bonus

DEFAULT_WEIGHTS = (
    0.4, 0.6, 2.4, 5.8,
    4.93, 0.94,
    0.86, 0.01,
    1.49, 0.14, 0.94, 2.18,
    0.05, 0.34, 1.26,
    0.29, 2.61,
)

WEIGHT_COUNT = 17


# ---- Forgetting Curve ----

REQUEST_RETENTION = 0.9  # Target recall probability at the scheduled interval
DECAY = -0.5
FACTOR = 0.9

S_MIN = 0.1      # Minimum stability (days)
D_MIN = 1.0      # Minimum difficulty
D_MAX = 10.0     # Maximum difficulty


# ---- Time Units (epoch milliseconds) ----

MS_PER_MINUTE = 60 * 1000
MS_PER_DAY = 24 * 60 * MS_PER_MINUTE


# ---- Short-Term Steps (minutes) ----

NEW_CARD_STEPS = {
    Rating.AGAIN: 1,
    Rating.HARD: 5,
    Rating.GOOD: 10,
}

LEARNING_AGAIN_MINUTES = 1   # Failed again while learning/relearning
LAPSE_MINUTES = 5            # Failed from long-term review
GRADUATING_DAYS = 1          # Hard/Good out of learning/relearning


# ---- Due Queue ----

DEFAULT_DUE_CARD_LIMIT = 25
