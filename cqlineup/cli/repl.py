"""
Interactive session for cq-lineup.

Reads hero levels and lineups from the console or a macro file,
hands each instance to a solver and prints the result with its
battle replay.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import TextIO

from cqlineup.content import create_default_catalog
from cqlineup.db.interfaces import MonsterRepository
from cqlineup.engine import IOConfig, LineupParser, OutputGate, OutputLevel, QueryAutomaton
from cqlineup.engine.models import parse_output_level
from cqlineup.models import Instance, Monster
from cqlineup.services import (
    LineupInputService,
    ManualSolver,
    Solver,
    UnsolvedSolver,
    instance_to_json,
    instance_to_string,
)

logger = logging.getLogger(__name__)

INSTANCE_PROMPT = "Enter Enemy Lineup(s): "
CONTINUE_QUESTION = "Do you want to solve more instances?"
CONTINUE_HELP = "\n  Answer y to enter more lineups or n to quit.\n\n"


@dataclass
class SessionState:
    """Current state of a solving session."""

    heroes: list[Monster] = field(default_factory=list)
    solved: list[Instance] = field(default_factory=list)
    running: bool = True


class LineupSession:
    """
    One solving session.

    Owns the query automaton and the hero registry, so sessions never
    share input state or leveled heroes.
    """

    def __init__(
        self,
        config: IOConfig | None = None,
        *,
        repository: MonsterRepository | None = None,
        solver: Solver | None = None,
        json_output: bool = False,
        stream: TextIO | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        self.config = config or IOConfig()
        self.repository = repository or create_default_catalog()
        self.gate = OutputGate(self.config, stream=stream, input_stream=input_stream)
        self.automaton = QueryAutomaton(self.gate)
        self.parser = LineupParser(self.repository)
        self.lineup_input = LineupInputService(self.automaton, self.parser)
        self.solver: Solver = solver or UnsolvedSolver()
        self.json_output = json_output
        self.state = SessionState()

    def report(self, instance: Instance) -> None:
        if self.json_output:
            self.gate.output_message(
                instance_to_json(instance, self.repository), OutputLevel.SOLUTION_OUTPUT
            )
        else:
            self.gate.output_message(
                instance_to_string(instance, self.repository),
                OutputLevel.SOLUTION_OUTPUT,
                linebreak=False,
            )

    def solve_round(self) -> list[Instance]:
        """Read one line of instances, solve and report each of them."""
        instances = self.lineup_input.take_instance_input(INSTANCE_PROMPT)
        for instance in instances:
            logger.info(f"Solving {instance.target.to_string()}")
            self.solver.solve(instance, self.state.heroes)
            self.report(instance)
            self.state.solved.append(instance)
        return instances

    def run(self) -> SessionState:
        """Run the session until the player stops or input runs out."""
        if self.config.macro_file:
            self.automaton.init_macro_file(self.config.macro_file, self.config.show_queries)

        try:
            collection = self.lineup_input.take_hero_level_input()
            self.state.heroes = collection.heroes
            while self.state.running:
                self.solve_round()
                self.state.running = self.automaton.ask_yes_no_question(
                    CONTINUE_QUESTION, CONTINUE_HELP, OutputLevel.CMD_OUTPUT
                )
            self.gate.halt_execution()
        except (EOFError, KeyboardInterrupt):
            self.gate.write("\n")
            self.state.running = False
        finally:
            self.automaton.close()
        return self.state


def run_session(
    macro_file: str | None = None,
    show_input: bool | None = None,
    output_level: OutputLevel | None = None,
    json_output: bool = False,
    manual: bool = False,
) -> SessionState:
    """
    Run a cq-lineup session on the console.

    Args:
        macro_file: Script to read answers from before asking interactively
        show_input: Echo prompts and answers read from the macro file,
            defaults to the environment
        output_level: Console verbosity, defaults to the environment
        json_output: Print instances as JSON records
        manual: Ask for a proposed lineup against each instance
    """
    config = IOConfig.from_env(
        macro_file=macro_file, output_level=output_level, show_queries=show_input
    )
    session = LineupSession(config, json_output=json_output)
    if manual:
        session.solver = ManualSolver(session.lineup_input)
    return session.run()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cosmos Quest lineup parser and replay builder")
    parser.add_argument("--macro", default=None, help="Macro file to read answers from")
    parser.add_argument(
        "--silent-macro",
        action="store_true",
        help="Do not echo prompts and answers read from the macro file",
    )
    parser.add_argument(
        "--output-level",
        type=parse_output_level,
        default=None,
        help="no_output, solution_output, basic_output or cmd_output",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--manual",
        action="store_true",
        help="Enter your own lineup against each instance",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    run_session(
        macro_file=args.macro,
        show_input=False if args.silent_macro else None,
        output_level=args.output_level,
        json_output=args.json,
        manual=args.manual,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
