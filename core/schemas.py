"""
Pydantic models for saved vocabulary.

These models describe the lexical content stored next to each card
when a word is added from the reader.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class VocabEntry(BaseModel):
    """A word or phrase saved for review."""
    word: str = Field(..., min_length=1, description="The word or phrase (unique key)")
    definition: str = Field(default="", description="Dictionary definition")
    translation: str = Field(default="", description="Translation in the learner's language")
    context: str = Field(default="", description="Sentence the word was saved from")
    example: str = Field(default="", description="Example sentence")
