"""
Core Data Models for cq-lineup.

These models describe the units, armies and solving instances a
lineup is parsed into, plus the explicit results parsing produces.
"""

from cqlineup.models.monster import (
    ARMY_MAX_SIZE,
    TOURNAMENT_LINES,
    Army,
    ArmyFullError,
    HeroRarity,
    Instance,
    Monster,
    create_hero_template,
    create_monster,
)
from cqlineup.models.parsing import (
    HeroCollection,
    HeroEntry,
    HeroEntryOutcome,
    ParseFailure,
    ParseFailureKind,
    ParseResult,
)

__all__ = [
    # Monster models
    "ARMY_MAX_SIZE",
    "TOURNAMENT_LINES",
    "Army",
    "ArmyFullError",
    "HeroRarity",
    "Instance",
    "Monster",
    "create_hero_template",
    "create_monster",
    # Parse results
    "HeroCollection",
    "HeroEntry",
    "HeroEntryOutcome",
    "ParseFailure",
    "ParseFailureKind",
    "ParseResult",
]
