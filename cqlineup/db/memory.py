"""
In-memory implementation of the monster database.

Everything is stored in dictionaries and lists, so a repository is
cheap to build and each one is an independent session: leveled heroes
registered in one repository never show up in another.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from cqlineup.models import Monster

logger = logging.getLogger(__name__)


class UnknownHeroError(ValueError):
    """Raised when registering a level for a hero that is not a template."""


class InMemoryMonsterRepository:
    """
    In-memory implementation of MonsterRepository.

    Holds the canonical monster list, the hero templates and the quest
    table, plus the append-only registry of leveled heroes.
    """

    def __init__(
        self,
        monsters: Iterable[Monster] = (),
        heroes: Iterable[Monster] = (),
        quests: Mapping[int, list[str]] | None = None,
    ) -> None:
        self._monsters: list[Monster] = []
        self._heroes: list[Monster] = []
        self._quests: dict[int, list[str]] = {}

        # name -> index lookups
        self._monster_indices: dict[str, int] = {}
        self._hero_indices: dict[str, int] = {}

        # (base_name, level) -> leveled hero, insertion ordered
        self._leveled: dict[tuple[str, int], Monster] = {}

        for monster in monsters:
            self.add_monster(monster)
        for hero in heroes:
            self.add_base_hero(hero)
        for number, lineup in (quests or {}).items():
            self.add_quest(number, lineup)

    # Static data
    def add_monster(self, monster: Monster) -> None:
        """Append an ordinary monster to the canonical list."""
        if monster.is_hero:
            raise ValueError(f"'{monster.name}' is a hero, use add_base_hero")
        if monster.name in self._monster_indices:
            raise ValueError(f"Monster '{monster.name}' already exists")
        self._monster_indices[monster.name] = len(self._monsters)
        self._monsters.append(monster)

    def add_base_hero(self, hero: Monster) -> None:
        """Append a hero template to the registry."""
        if not hero.is_hero:
            raise ValueError(f"'{hero.name}' is not a hero")
        if hero.base_name in self._hero_indices:
            raise ValueError(f"Hero '{hero.base_name}' already exists")
        self._hero_indices[hero.base_name] = len(self._heroes)
        self._heroes.append(hero)

    def add_quest(self, number: int, lineup: list[str]) -> None:
        if number < 0:
            raise ValueError("Quest numbers must be non-negative")
        self._quests[number] = list(lineup)

    @property
    def base_monsters(self) -> list[Monster]:
        return list(self._monsters)

    @property
    def base_heroes(self) -> list[Monster]:
        return list(self._heroes)

    @property
    def quest_numbers(self) -> list[int]:
        return sorted(self._quests)

    def get_monster(self, name: str) -> Monster | None:
        """Get a monster or registered leveled hero by exact name."""
        index = self._monster_indices.get(name)
        if index is not None:
            return self._monsters[index]
        for hero in self._leveled.values():
            if hero.name == name:
                return hero
        return None

    def get_base_hero(self, base_name: str) -> Monster | None:
        index = self._hero_indices.get(base_name)
        return self._heroes[index] if index is not None else None

    def monster_index(self, name: str) -> int | None:
        return self._monster_indices.get(name)

    def hero_index(self, base_name: str) -> int | None:
        return self._hero_indices.get(base_name)

    def get_quest(self, number: int) -> list[str] | None:
        lineup = self._quests.get(number)
        return list(lineup) if lineup is not None else None

    # Hero registration
    def add_leveled_hero(self, base: Monster, level: int) -> Monster:
        """
        Register a leveled hero created from a template.

        Idempotent: asking for the same base name and level again returns
        the hero registered the first time.

        Args:
            base: Hero template from the registry
            level: Hero level, non-negative

        Returns:
            The leveled hero
        """
        if self.get_base_hero(base.base_name) is None:
            raise UnknownHeroError(f"Unknown hero: {base.base_name}")
        if level < 0:
            raise ValueError(f"Hero level must be non-negative, got {level}")

        key = (base.base_name, level)
        existing = self._leveled.get(key)
        if existing is not None:
            return existing

        hero = Monster(
            name=f"{base.base_name}:{level}",
            base_name=base.base_name,
            rarity=base.rarity,
            level=level,
        )
        self._leveled[key] = hero
        logger.debug(f"Registered leveled hero {hero.name}")
        return hero

    def get_leveled_heroes(self) -> list[Monster]:
        return list(self._leveled.values())
