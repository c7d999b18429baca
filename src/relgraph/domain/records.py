"""Relationship records — the already-parsed input to every engine.

Frozen Pydantic models. Parsing raw text into these is the caller's job.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class AssertionType(StrEnum):
    """How two entities in an :class:`Assertion` relate in time."""

    ONE_DIRECTIONAL = "one_directional"  # A precedes B
    SIMULTANEOUS = "simultaneous"  # A coincides with B


class CoAuthorship(BaseModel):
    """A paper and its ordered, duplicate-free author list."""

    model_config = {"frozen": True}

    paper: str
    authors: tuple[str, ...] = Field(min_length=1)

    @field_validator("authors")
    @classmethod
    def _distinct_authors(cls, authors: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(authors)) != len(authors):
            msg = "authors must not contain duplicates"
            raise ValueError(msg)
        return authors


class Assertion(BaseModel):
    """An ordering or simultaneity claim about two entities."""

    model_config = {"frozen": True}

    person_a: str
    person_b: str
    type: AssertionType

    @property
    def symmetric(self) -> bool:
        return self.type is AssertionType.SIMULTANEOUS


class Contact(BaseModel):
    """Two entities met at an integer timestamp."""

    model_config = {"frozen": True}

    person1: str
    person2: str
    time: int
