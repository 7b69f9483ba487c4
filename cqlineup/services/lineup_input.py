"""
Lineup input service for cq-lineup.

Combines the query automaton with the lineup parser into the
commands a session runs: collecting hero levels and reading the
instances to solve. The retry loops live here, not in the parser.
"""

from __future__ import annotations

import logging

from cqlineup.engine.models import OutputLevel, QueryType
from cqlineup.engine.parser import LineupParser
from cqlineup.engine.query import QueryAutomaton
from cqlineup.models import (
    Army,
    HeroCollection,
    HeroEntry,
    HeroEntryOutcome,
    Instance,
)

logger = logging.getLogger(__name__)

DONE_COMMAND = "done"
MAX_BLANK_LINES = 2

HERO_INPUT_HELP = (
    "\n"
    "  Enter one hero per line as <name>:<level>, e.g. nebra:12\n"
    "  Type done or press enter twice when you are finished.\n"
    "\n"
)

LINEUP_INPUT_HELP = (
    "\n"
    "  Enter one or more lineups separated by spaces.\n"
    "  A lineup is either a quest like q12-3 (quest 12, tier 3)\n"
    "  or monsters separated by commas, front first, e.g. a5,w4,nebra:12\n"
    "\n"
)


class LineupInputService:
    """Session commands that read lineups and hero levels."""

    def __init__(self, automaton: QueryAutomaton, parser: LineupParser) -> None:
        self.automaton = automaton
        self.parser = parser

    @property
    def _shows_queries(self) -> bool:
        return not self.automaton.use_macro_file or self.automaton.show_queries

    def take_hero_level_input(self) -> HeroCollection:
        """
        Prompt for heroes with levels, one per line.

        Stops on "done" or after two blank lines in a row. A line that
        does not parse is reported and recorded as rejected.

        Returns:
            HeroCollection with the heroes and every entry's outcome
        """
        collection = HeroCollection()
        gate = self.automaton.gate
        if self._shows_queries:
            gate.output_message("", OutputLevel.BASIC_OUTPUT)
            gate.output_message(
                "Enter your Heroes with levels. Press enter after every Hero.",
                OutputLevel.BASIC_OUTPUT,
            )
            gate.output_message(
                "Press enter twice or type done to proceed without inputting additional Heroes.",
                OutputLevel.BASIC_OUTPUT,
            )

        blank_lines = 0
        while True:
            raw = self.automaton.get_resistant_input(
                f"Enter Hero {len(collection.heroes) + 1}: ",
                HERO_INPUT_HELP,
                QueryType.RAW_FIRST,
            )
            if raw == DONE_COMMAND:
                collection.entries.append(HeroEntry(raw=raw, outcome=HeroEntryOutcome.DONE))
                break
            if raw == "":
                blank_lines += 1
                collection.entries.append(HeroEntry(raw=raw, outcome=HeroEntryOutcome.BLANK))
                if blank_lines >= MAX_BLANK_LINES:
                    break
                continue

            blank_lines = 0
            result = self.parser.parse_hero(raw)
            if result.ok:
                collection.heroes.append(result.value)
                collection.entries.append(
                    HeroEntry(raw=raw, outcome=HeroEntryOutcome.ACCEPTED, hero=result.value)
                )
            else:
                logger.info(f"Rejected hero entry {raw!r}: {result.failure.message}")
                gate.output_message(result.failure.message, OutputLevel.BASIC_OUTPUT, indent=1)
                collection.entries.append(
                    HeroEntry(raw=raw, outcome=HeroEntryOutcome.REJECTED, failure=result.failure)
                )
        return collection

    def take_instance_input(self, prompt: str) -> list[Instance]:
        """Read lines until every instance token on one of them parses."""
        while True:
            line = self.automaton.get_resistant_input(prompt, LINEUP_INPUT_HELP, QueryType.RAW)
            result = self.parser.parse_instances(line)
            if result.ok:
                return result.value
            logger.info(f"Rejected instance input {line!r}: {result.failure.message}")

    def take_army_input(self, prompt: str, max_size: int | None = None) -> Army:
        """Read lines until one parses as a lineup of at most max_size units."""
        while True:
            line = self.automaton.get_resistant_input(
                prompt, LINEUP_INPUT_HELP, QueryType.RAW_FIRST
            )
            result = self.parser.parse_army(line)
            if not result.ok:
                logger.info(f"Rejected lineup {line!r}: {result.failure.message}")
                continue
            if max_size is not None and result.value.monster_amount > max_size:
                logger.info(f"Rejected lineup {line!r}: more than {max_size} units")
                continue
            return result.value
