"""
Database interface definitions for cq-lineup.

Uses a Protocol class to define the contract for static lookups.
The monster, hero and quest tables are read-only; the only write is
registering leveled heroes, which is append-only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cqlineup.models import Monster


class MonsterRepository(Protocol):
    """
    Interface for the monster, hero and quest databases.

    Index order is stable and defines the numeric ids used by replays.
    """

    @property
    def base_monsters(self) -> list[Monster]:
        """Ordinary monsters in canonical order."""
        ...

    @property
    def base_heroes(self) -> list[Monster]:
        """Hero templates in registry order."""
        ...

    def get_monster(self, name: str) -> Monster | None:
        """Get a monster or registered leveled hero by exact name."""
        ...

    def get_base_hero(self, base_name: str) -> Monster | None:
        """Get a hero template by exact base name."""
        ...

    def monster_index(self, name: str) -> int | None:
        """Position of an ordinary monster in the canonical list."""
        ...

    def hero_index(self, base_name: str) -> int | None:
        """Position of a hero template in the registry."""
        ...

    def get_quest(self, number: int) -> list[str] | None:
        """Get the monster names of a quest lineup."""
        ...

    # Hero registration
    def add_leveled_hero(self, base: Monster, level: int) -> Monster:
        """Register a leveled hero, returning the existing one if known."""
        ...

    def get_leveled_heroes(self) -> list[Monster]:
        """All leveled heroes in registration order."""
        ...
