"""
Solver boundary for cq-lineup.

Finding a winning army is left to an external simulation engine. This
module defines the interface a solver implements and two solvers that
need no simulation at all.
"""

from __future__ import annotations

import logging
import time
from typing import Protocol

from cqlineup.models import Instance, Monster
from cqlineup.services.lineup_input import LineupInputService

logger = logging.getLogger(__name__)


class Solver(Protocol):
    """Fills in the solution fields of an instance."""

    def solve(self, instance: Instance, heroes: list[Monster]) -> None:
        """
        Solve an instance in place.

        Args:
            instance: Sets best_solution, calculation_time and
                total_fights_simulated on it
            heroes: Leveled heroes the player owns
        """
        ...


class UnsolvedSolver:
    """Reports every instance as unsolved."""

    def solve(self, instance: Instance, heroes: list[Monster]) -> None:
        instance.calculation_time = 0.0
        instance.total_fights_simulated = 0


class ManualSolver:
    """Asks the player for the lineup they propose against each instance."""

    def __init__(self, lineup_input: LineupInputService) -> None:
        self.lineup_input = lineup_input

    def solve(self, instance: Instance, heroes: list[Monster]) -> None:
        start = time.monotonic()
        prompt = (
            f"Enter your lineup against {instance.target.to_string()} "
            f"(max {instance.max_combatants} units): "
        )
        solution = self.lineup_input.take_army_input(prompt, max_size=instance.max_combatants)

        missing = [m.name for m in solution.monsters if m.is_hero and m not in heroes]
        if missing:
            logger.info(f"Proposed lineup uses heroes not entered before: {', '.join(missing)}")

        instance.best_solution = solution
        instance.calculation_time = time.monotonic() - start
        instance.total_fights_simulated = 0
