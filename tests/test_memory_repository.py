"""Tests for the in-memory monster repository and default catalog."""

from __future__ import annotations

import pytest

from cqlineup.content import create_default_catalog, load_default_catalog
from cqlineup.db import InMemoryMonsterRepository, UnknownHeroError
from cqlineup.engine import LineupParser
from cqlineup.models import HeroRarity, create_hero_template, create_monster


class TestInMemoryMonsterRepository:
    """Tests for lookups and hero registration."""

    def test_lookups(self, repository: InMemoryMonsterRepository):
        assert repository.get_monster("wolf").name == "wolf"
        assert repository.get_monster("missing") is None
        assert repository.monster_index("a1") == 2
        assert repository.hero_index("hero2") == 1
        assert repository.get_base_hero("hero3").rarity == HeroRarity.LEGENDARY
        assert repository.get_quest(3) == ["panda", "wolf"]
        assert repository.get_quest(5) is None

    def test_quest_copy_is_independent(self, repository: InMemoryMonsterRepository):
        repository.get_quest(3).append("a1")
        assert repository.get_quest(3) == ["panda", "wolf"]

    def test_add_leveled_hero_is_idempotent(self, repository: InMemoryMonsterRepository):
        base = repository.get_base_hero("hero1")
        first = repository.add_leveled_hero(base, 5)
        second = repository.add_leveled_hero(base, 5)
        assert first is second
        assert repository.get_leveled_heroes() == [first]

    def test_leveled_heroes_keep_registration_order(self, repository):
        hero1 = repository.get_base_hero("hero1")
        hero2 = repository.get_base_hero("hero2")
        repository.add_leveled_hero(hero2, 1)
        repository.add_leveled_hero(hero1, 9)
        repository.add_leveled_hero(hero2, 1)
        assert [h.name for h in repository.get_leveled_heroes()] == ["hero2:1", "hero1:9"]

    def test_unknown_template(self, repository: InMemoryMonsterRepository):
        with pytest.raises(UnknownHeroError):
            repository.add_leveled_hero(create_hero_template("ghost"), 1)

    def test_negative_level(self, repository: InMemoryMonsterRepository):
        with pytest.raises(ValueError):
            repository.add_leveled_hero(repository.get_base_hero("hero1"), -1)

    def test_duplicate_monster(self):
        repository = InMemoryMonsterRepository(monsters=[create_monster("a1")])
        with pytest.raises(ValueError, match="already exists"):
            repository.add_monster(create_monster("a1"))

    def test_hero_is_not_a_monster(self):
        repository = InMemoryMonsterRepository()
        with pytest.raises(ValueError):
            repository.add_monster(create_hero_template("tiny"))
        with pytest.raises(ValueError):
            repository.add_base_hero(create_monster("a1"))

    def test_sessions_do_not_share_heroes(self):
        first = create_default_catalog()
        second = create_default_catalog()
        LineupParser(first).parse_army("nebra:10")
        assert first.get_monster("nebra:10") is not None
        assert second.get_monster("nebra:10") is None


class TestDefaultCatalog:
    """Tests for the built-in catalog."""

    def test_catalog_is_consistent(self):
        catalog = load_default_catalog()
        names = {monster.name for monster in catalog.monsters}
        for lineup in catalog.quests.values():
            assert set(lineup) <= names

    def test_all_quests_parse(self):
        repository = create_default_catalog()
        parser = LineupParser(repository)
        for number in repository.quest_numbers:
            assert parser.make_instance_from_string(f"q{number}-1").ok

    def test_canonical_order(self):
        repository = create_default_catalog()
        assert [m.name for m in repository.base_monsters[:5]] == ["a1", "w1", "e1", "f1", "a2"]
        assert repository.base_heroes[0].name == "ladyoftwilight"
