"""
SQLAlchemy ORM Models for FSRS Database

Defines VocabItem and ReviewLogRecord models for persistence.
Timestamps are stored as epoch milliseconds.
"""

from sqlalchemy import BigInteger, Column, Float, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class VocabItem(Base):
    """
    A saved word together with its FSRS card state.

    The queue of cards to review is selected by the indexed due column.
    """
    __tablename__ = 'vocabulary'

    word = Column(String(255), primary_key=True, nullable=False)

    # Lexical content
    definition = Column(Text, nullable=False, default="")
    translation = Column(Text, nullable=False, default="")
    context = Column(Text, nullable=False, default="")
    example = Column(Text, nullable=False, default="")
    timestamp = Column(BigInteger, nullable=False)  # When the word was saved

    # Memory parameters
    stability = Column(Float, nullable=False, default=0.0)
    difficulty = Column(Float, nullable=False, default=0.0)

    # Scheduling
    elapsed_days = Column(Integer, nullable=False, default=0)
    scheduled_days = Column(Integer, nullable=False, default=0)
    reps = Column(Integer, nullable=False, default=0)
    state = Column(Integer, nullable=False, default=0, index=True)  # 0=New, 1=Learning, 2=Review, 3=Relearning
    last_review = Column(BigInteger, nullable=False, default=0)
    due = Column(BigInteger, nullable=False, index=True)

    def __repr__(self):
        return f"<VocabItem({self.word}, state={self.state}, due={self.due})>"


class ReviewLogRecord(Base):
    """
    Log entry for a single review.

    Captures the card as it was before the review plus the rating given.
    """
    __tablename__ = 'review_logs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    word = Column(String(255), nullable=False, index=True)

    rating = Column(Integer, nullable=False)  # 1=AGAIN, 2=HARD, 3=GOOD, 4=EASY
    state = Column(Integer, nullable=False)
    due = Column(BigInteger, nullable=False)
    stability = Column(Float, nullable=False)
    difficulty = Column(Float, nullable=False)
    elapsed_days = Column(Integer, nullable=False)
    last_elapsed_days = Column(Integer, nullable=False)
    scheduled_days = Column(Integer, nullable=False)
    retrievability = Column(Float, nullable=True)  # NULL for new cards
    review = Column(BigInteger, nullable=False, index=True)

    def __repr__(self):
        return f"<ReviewLogRecord(id={self.id}, {self.word}, rating={self.rating})>"
