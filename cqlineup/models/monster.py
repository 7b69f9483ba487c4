"""
Monster and Army Models for cq-lineup.

Defines the units a lineup is made of and the fixed-size army that
holds them. Heroes are monsters with a rarity other than NO_HERO and
a level; every leveled variant of a hero shares its base name.
"""

from __future__ import annotations

import json
from enum import Enum

from pydantic import BaseModel, Field, model_validator

ARMY_MAX_SIZE = 6
TOURNAMENT_LINES = 5


class HeroRarity(str, Enum):
    """Rarity tag of a unit. NO_HERO marks ordinary monsters."""

    NO_HERO = "no_hero"
    COMMON = "common"
    RARE = "rare"
    LEGENDARY = "legendary"
    ASCENDED = "ascended"


class ArmyFullError(ValueError):
    """Raised when adding a unit to an army that is already at capacity."""


class Monster(BaseModel):
    """A single game unit, immutable once constructed."""

    name: str = Field(description="Unique name, e.g. 'a3' or 'nebra:12'")
    base_name: str = Field(description="Family name shared by all level variants")
    rarity: HeroRarity = Field(default=HeroRarity.NO_HERO)
    level: int = Field(default=0, ge=0, description="Hero level, 0 for templates")

    model_config = {"frozen": True}

    @property
    def is_hero(self) -> bool:
        """Whether this unit is a hero (template or leveled)."""
        return self.rarity != HeroRarity.NO_HERO


def create_monster(name: str) -> Monster:
    """Create an ordinary, non-hero monster."""
    return Monster(name=name, base_name=name)


def create_hero_template(base_name: str, rarity: HeroRarity = HeroRarity.COMMON) -> Monster:
    """Create an unleveled hero template for the hero registry."""
    if rarity == HeroRarity.NO_HERO:
        raise ValueError("Hero templates need a hero rarity")
    return Monster(name=base_name, base_name=base_name, rarity=rarity)


class Army(BaseModel):
    """
    An ordered, bounded sequence of monsters.

    Insertion order is preserved. The army is only mutated while it is
    being built; `add` refuses units beyond `capacity`.
    """

    monsters: list[Monster] = Field(default_factory=list)
    capacity: int = Field(default=ARMY_MAX_SIZE, ge=1, le=ARMY_MAX_SIZE)

    @model_validator(mode="after")
    def check_capacity(self) -> Army:
        if len(self.monsters) > self.capacity:
            raise ArmyFullError(
                f"Army has {len(self.monsters)} units but holds at most {self.capacity}"
            )
        return self

    @property
    def monster_amount(self) -> int:
        """Number of units currently in the army."""
        return len(self.monsters)

    def add(self, monster: Monster) -> None:
        """Append a unit to the back of the army."""
        if self.monster_amount >= self.capacity:
            raise ArmyFullError(f"Army is full ({self.capacity} units)")
        self.monsters.append(monster)

    def is_empty(self) -> bool:
        return not self.monsters

    def to_string(self) -> str:
        """Human readable lineup, front unit first."""
        return "[" + ", ".join(monster.name for monster in self.monsters) + "]"

    def to_json(self) -> str:
        return json.dumps([monster.name for monster in self.monsters], separators=(",", ":"))


class Instance(BaseModel):
    """
    A solving problem: a target army and how many units may face it.

    The solution fields are filled by a solver, never by the parser.
    """

    target: Army
    max_combatants: int = Field(default=ARMY_MAX_SIZE, ge=1, le=ARMY_MAX_SIZE)
    target_size: int = Field(default=0, ge=0)

    # Filled in by the solver
    best_solution: Army = Field(default_factory=Army)
    calculation_time: float = Field(default=0.0, ge=0.0, description="Seconds")
    total_fights_simulated: int = Field(default=0, ge=0)

    @property
    def is_solved(self) -> bool:
        return not self.best_solution.is_empty()
