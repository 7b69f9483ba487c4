"""
Default Catalog for cq-lineup.

Provides a pre-built monster, hero and quest database so lineups can
be parsed and replays encoded without loading external data.
"""

from __future__ import annotations

from dataclasses import dataclass

from cqlineup.db.memory import InMemoryMonsterRepository
from cqlineup.models import HeroRarity, Monster, create_hero_template, create_monster

# Element prefixes in canonical order
ELEMENTS = ("a", "w", "e", "f")
MONSTER_TIERS = 30

HERO_TEMPLATES: list[tuple[str, HeroRarity]] = [
    ("ladyoftwilight", HeroRarity.COMMON),
    ("tiny", HeroRarity.RARE),
    ("nebra", HeroRarity.LEGENDARY),
    ("valor", HeroRarity.COMMON),
    ("rokka", HeroRarity.RARE),
    ("pyromancer", HeroRarity.LEGENDARY),
    ("bewat", HeroRarity.COMMON),
    ("hunter", HeroRarity.COMMON),
    ("shaman", HeroRarity.RARE),
    ("alpha", HeroRarity.LEGENDARY),
    ("carl", HeroRarity.COMMON),
    ("nimue", HeroRarity.RARE),
    ("athos", HeroRarity.LEGENDARY),
    ("jet", HeroRarity.COMMON),
    ("geron", HeroRarity.RARE),
    ("rei", HeroRarity.LEGENDARY),
    ("ailen", HeroRarity.COMMON),
    ("faefyr", HeroRarity.RARE),
    ("auri", HeroRarity.LEGENDARY),
    ("k41ry", HeroRarity.COMMON),
    ("t4urus", HeroRarity.RARE),
    ("tr0n1x", HeroRarity.LEGENDARY),
    ("aquortis", HeroRarity.COMMON),
    ("aeris", HeroRarity.RARE),
    ("geum", HeroRarity.LEGENDARY),
    ("forestdruid", HeroRarity.ASCENDED),
    ("ignitor", HeroRarity.ASCENDED),
    ("undine", HeroRarity.ASCENDED),
]

QUESTS: dict[int, list[str]] = {
    1: ["w5", "e5", "f5", "a5"],
    2: ["a8", "w8", "e8", "f8", "a6"],
    3: ["f10", "e10", "w10", "a10", "f9", "e9"],
    4: ["w12", "a12", "e12", "f12", "w11", "a11"],
    5: ["e15", "e14", "w14", "a14", "f14", "w13"],
    6: ["f17", "a17", "w16", "e16", "f16", "a16"],
    7: ["a20", "w19", "e19", "f19", "a19", "w18"],
    8: ["w22", "e21", "f21", "a21", "w21", "e20"],
    9: ["e24", "f24", "a23", "w23", "e23", "f22"],
    10: ["f26", "a26", "w25", "e25", "f25", "a25"],
    11: ["a28", "w28", "e27", "f27", "a27", "w26"],
    12: ["w30", "e30", "f29", "a29", "w29", "e28"],
}


@dataclass
class Catalog:
    """The default static data, before it is loaded into a repository."""

    monsters: list[Monster]
    heroes: list[Monster]
    quests: dict[int, list[str]]


def default_monsters() -> list[Monster]:
    """Tiered monsters, ordered by tier and then by element."""
    return [
        create_monster(f"{element}{tier}")
        for tier in range(1, MONSTER_TIERS + 1)
        for element in ELEMENTS
    ]


def default_heroes() -> list[Monster]:
    return [create_hero_template(name, rarity) for name, rarity in HERO_TEMPLATES]


def load_default_catalog() -> Catalog:
    return Catalog(
        monsters=default_monsters(),
        heroes=default_heroes(),
        quests={number: list(lineup) for number, lineup in QUESTS.items()},
    )


def create_default_catalog() -> InMemoryMonsterRepository:
    """
    Create a repository holding the default catalog.

    Every call returns a fresh repository, so leveled heroes registered
    in one session never leak into another.
    """
    catalog = load_default_catalog()
    return InMemoryMonsterRepository(
        monsters=catalog.monsters,
        heroes=catalog.heroes,
        quests=catalog.quests,
    )
