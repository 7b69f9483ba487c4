"""
Database layer for cq-lineup.

Provides the interface and an implementation for the static
monster, hero and quest tables:
- MonsterRepository: Protocol describing lookups and hero registration
- InMemoryMonsterRepository: Dictionary backed, one per session
"""

from __future__ import annotations

from cqlineup.db.interfaces import MonsterRepository
from cqlineup.db.memory import InMemoryMonsterRepository, UnknownHeroError

__all__ = [
    "InMemoryMonsterRepository",
    "MonsterRepository",
    "UnknownHeroError",
]
