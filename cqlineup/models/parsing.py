"""
Parse result models for cq-lineup.

Parsing never raises for bad user input. Every parse returns a
ParseResult holding either the parsed value or a ParseFailure
describing what went wrong, so callers decide whether to re-prompt.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from cqlineup.models.monster import Monster

T = TypeVar("T")


class ParseFailureKind(str, Enum):
    """Why a lineup, hero or quest token could not be parsed."""

    UNKNOWN_MONSTER = "unknown_monster"
    UNKNOWN_HERO = "unknown_hero"
    INVALID_LEVEL = "invalid_level"
    INVALID_QUEST = "invalid_quest"  # Malformed quest reference
    UNKNOWN_QUEST = "unknown_quest"  # Quest number not in the database
    INVALID_TIER = "invalid_tier"
    ARMY_FULL = "army_full"
    EMPTY_LINEUP = "empty_lineup"


class ParseFailure(BaseModel):
    """Description of a failed parse."""

    kind: ParseFailureKind
    token: str = Field(description="The offending token")
    message: str = ""

    model_config = {"frozen": True}


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed value or a failure, never both."""

    value: T | None = None
    failure: ParseFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ParseFailureKind, token: str, message: str = "") -> ParseResult[T]:
        return cls(failure=ParseFailure(kind=kind, token=token, message=message))


class HeroEntryOutcome(str, Enum):
    """What happened to one line of hero level input."""

    ACCEPTED = "accepted"
    BLANK = "blank"
    REJECTED = "rejected"
    DONE = "done"


class HeroEntry(BaseModel):
    """One line of hero level input and its outcome."""

    raw: str
    outcome: HeroEntryOutcome
    hero: Monster | None = None
    failure: ParseFailure | None = None


class HeroCollection(BaseModel):
    """Result of a hero level collection run."""

    heroes: list[Monster] = Field(default_factory=list)
    entries: list[HeroEntry] = Field(default_factory=list)

    @property
    def rejected(self) -> list[HeroEntry]:
        """Entries that were not blank but failed to parse."""
        return [entry for entry in self.entries if entry.outcome == HeroEntryOutcome.REJECTED]
