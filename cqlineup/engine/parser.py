"""
Lineup Parser for cq-lineup.

Parses the lineup mini-language into armies and solving instances:

    instance     := quest_ref | raw_lineup
    quest_ref    := "q" quest_number "-" tier          e.g. "q12-3"
    raw_lineup   := monster_token ("," monster_token)*
    monster_token:= name | name ":" level

Parsing never raises for bad input; every method returns a
ParseResult. Registering leveled heroes in the repository is the only
side effect.
"""

from __future__ import annotations

import logging
import re

from cqlineup.db.interfaces import MonsterRepository
from cqlineup.engine.models import (
    ELEMENT_SEPARATOR,
    HEROLEVEL_SEPARATOR,
    QUEST_NUMBER_SEPARATOR,
    QUEST_PREFIX,
)
from cqlineup.models import (
    ARMY_MAX_SIZE,
    Army,
    Instance,
    Monster,
    ParseFailureKind,
    ParseResult,
)

logger = logging.getLogger(__name__)

DIGITS_PATTERN = re.compile(r"^\d+$")


class LineupParser:
    """Turns lineup text into Monster, Army and Instance values."""

    def __init__(self, repository: MonsterRepository) -> None:
        self.repository = repository

    def parse_hero_string(self, hero_string: str) -> ParseResult[tuple[Monster, int]]:
        """
        Split a "name:level" token into its hero template and level.

        The template is looked up by exact base name; nothing is
        registered yet.
        """
        name, _, level_text = hero_string.partition(HEROLEVEL_SEPARATOR)
        base = self.repository.get_base_hero(name)
        if base is None:
            return ParseResult.fail(
                ParseFailureKind.UNKNOWN_HERO, hero_string, f"Unknown hero: {name}"
            )
        if not DIGITS_PATTERN.match(level_text):
            return ParseResult.fail(
                ParseFailureKind.INVALID_LEVEL, hero_string, f"Invalid level: {level_text!r}"
            )
        return ParseResult.success((base, int(level_text)))

    def parse_hero(self, hero_string: str) -> ParseResult[Monster]:
        """Parse a "name:level" token and register the leveled hero."""
        parsed = self.parse_hero_string(hero_string)
        if not parsed.ok:
            return ParseResult(failure=parsed.failure)
        base, level = parsed.value
        return ParseResult.success(self.repository.add_leveled_hero(base, level))

    def parse_monster(self, token: str) -> ParseResult[Monster]:
        """Resolve one lineup token, plain monster or leveled hero."""
        if HEROLEVEL_SEPARATOR in token:
            return self.parse_hero(token)
        monster = self.repository.get_monster(token)
        if monster is None:
            return ParseResult.fail(
                ParseFailureKind.UNKNOWN_MONSTER, token, f"Unknown monster: {token}"
            )
        return ParseResult.success(monster)

    def make_army_from_strings(self, names: list[str]) -> ParseResult[Army]:
        """Resolve a list of lineup tokens into an army, front unit first."""
        if not names:
            return ParseResult.fail(ParseFailureKind.EMPTY_LINEUP, "", "Lineup is empty")
        if len(names) > ARMY_MAX_SIZE:
            return ParseResult.fail(
                ParseFailureKind.ARMY_FULL,
                ELEMENT_SEPARATOR.join(names),
                f"Lineup has {len(names)} units, at most {ARMY_MAX_SIZE} fit",
            )

        army = Army()
        for name in names:
            result = self.parse_monster(name)
            if not result.ok:
                return ParseResult(failure=result.failure)
            army.add(result.value)
        return ParseResult.success(army)

    def parse_army(self, lineup: str) -> ParseResult[Army]:
        """Parse a raw lineup such as "a1,w2,nebra:5"."""
        if not lineup:
            return ParseResult.fail(ParseFailureKind.EMPTY_LINEUP, lineup, "Lineup is empty")
        return self.make_army_from_strings(lineup.split(ELEMENT_SEPARATOR))

    def _parse_quest(self, instance_string: str) -> ParseResult[Instance]:
        reference = instance_string[len(QUEST_PREFIX) :]
        number_text, separator, tier_text = reference.partition(QUEST_NUMBER_SEPARATOR)
        if not separator or not DIGITS_PATTERN.match(number_text):
            return ParseResult.fail(
                ParseFailureKind.INVALID_QUEST,
                instance_string,
                f"Expected {QUEST_PREFIX}<number>{QUEST_NUMBER_SEPARATOR}<tier>",
            )
        if not DIGITS_PATTERN.match(tier_text) or not 1 <= int(tier_text) <= ARMY_MAX_SIZE:
            return ParseResult.fail(
                ParseFailureKind.INVALID_TIER,
                instance_string,
                f"Tier must be between 1 and {ARMY_MAX_SIZE}",
            )

        lineup = self.repository.get_quest(int(number_text))
        if lineup is None:
            return ParseResult.fail(
                ParseFailureKind.UNKNOWN_QUEST, instance_string, f"Unknown quest: {number_text}"
            )

        army = self.make_army_from_strings(lineup)
        if not army.ok:
            return ParseResult(failure=army.failure)
        # Harder tiers allow fewer attackers
        return ParseResult.success(
            Instance(
                target=army.value,
                max_combatants=ARMY_MAX_SIZE - (int(tier_text) - 1),
                target_size=army.value.monster_amount,
            )
        )

    def make_instance_from_string(self, instance_string: str) -> ParseResult[Instance]:
        """
        Parse one instance token, a quest reference or a raw lineup.

        Args:
            instance_string: Lowercased token without whitespace

        Returns:
            ParseResult with the Instance, or the reason it failed
        """
        if instance_string.startswith(QUEST_PREFIX) and QUEST_NUMBER_SEPARATOR in instance_string:
            result = self._parse_quest(instance_string)
        else:
            army = self.parse_army(instance_string)
            if army.ok:
                result = ParseResult.success(
                    Instance(
                        target=army.value,
                        max_combatants=ARMY_MAX_SIZE,
                        target_size=army.value.monster_amount,
                    )
                )
            else:
                result = ParseResult(failure=army.failure)

        if not result.ok:
            logger.debug(f"Could not parse instance {instance_string!r}: {result.failure.message}")
        return result

    def parse_instances(self, line: str) -> ParseResult[list[Instance]]:
        """
        Parse every whitespace separated instance token on a line.

        Succeeds only if every token parses; no partial list is returned.
        """
        tokens = line.split()
        if not tokens:
            return ParseResult.fail(ParseFailureKind.EMPTY_LINEUP, line, "No instance given")

        instances: list[Instance] = []
        for token in tokens:
            result = self.make_instance_from_string(token)
            if not result.ok:
                return ParseResult(failure=result.failure)
            instances.append(result.value)
        return ParseResult.success(instances)
