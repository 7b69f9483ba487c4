"""Shared fixtures for cq-lineup tests."""

from __future__ import annotations

import io

import pytest

from cqlineup.db.memory import InMemoryMonsterRepository
from cqlineup.engine import IOConfig, LineupParser, OutputGate, OutputLevel, QueryAutomaton
from cqlineup.models import HeroRarity, create_hero_template, create_monster


def make_repository() -> InMemoryMonsterRepository:
    """A small database: four monsters, three heroes and two quests."""
    return InMemoryMonsterRepository(
        monsters=[create_monster(name) for name in ("panda", "wolf", "a1", "w1")],
        heroes=[
            create_hero_template("hero1", HeroRarity.COMMON),
            create_hero_template("hero2", HeroRarity.RARE),
            create_hero_template("hero3", HeroRarity.LEGENDARY),
        ],
        quests={
            3: ["panda", "wolf"],
            4: ["a1", "w1", "panda", "wolf", "a1", "w1"],
        },
    )


def build_automaton(
    interactive: str = "",
    macro: str | None = None,
    show_input: bool = True,
    output_level: OutputLevel = OutputLevel.BASIC_OUTPUT,
) -> tuple[QueryAutomaton, io.StringIO]:
    """An automaton reading from strings, plus the stream it writes to."""
    output = io.StringIO()
    gate = OutputGate(
        IOConfig(output_level=output_level),
        stream=output,
        input_stream=io.StringIO(interactive),
    )
    automaton = QueryAutomaton(
        gate,
        macro=io.StringIO(macro) if macro is not None else None,
        show_input=show_input,
    )
    return automaton, output


@pytest.fixture
def make_automaton():
    """Factory for automatons fed from strings."""
    return build_automaton


@pytest.fixture
def repository() -> InMemoryMonsterRepository:
    return make_repository()


@pytest.fixture
def parser(repository: InMemoryMonsterRepository) -> LineupParser:
    return LineupParser(repository)
