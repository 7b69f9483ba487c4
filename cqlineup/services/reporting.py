"""
Instance reporting for cq-lineup.

Formats a solved (or unsolved) instance as console text or as a
machine-readable JSON record. Pure formatting, nothing is mutated.
"""

from __future__ import annotations

import json

from cqlineup.db.interfaces import MonsterRepository
from cqlineup.engine.replay import make_battle_replay
from cqlineup.models import Instance

NO_SOLUTION_MESSAGE = "Could not find a solution that beats this lineup."
REPLAY_HEADER = "Battle Replay (Use on Ingame Tournament Page):"


def instance_record(
    instance: Instance, repository: MonsterRepository, date: int | None = None
) -> dict:
    """The instance as a dict with target, solution, time, fights and replay."""
    return {
        "target": [monster.name for monster in instance.target.monsters],
        "solution": [monster.name for monster in instance.best_solution.monsters],
        "time": instance.calculation_time,
        "fights": instance.total_fights_simulated,
        "replay": make_battle_replay(
            instance.best_solution, instance.target, repository, date
        ),
    }


def instance_to_json(
    instance: Instance, repository: MonsterRepository, date: int | None = None
) -> str:
    return json.dumps(instance_record(instance, repository, date), separators=(",", ":"))


def instance_to_string(
    instance: Instance, repository: MonsterRepository, date: int | None = None
) -> str:
    """Multi-line report with the result, fight count, timing and replay."""
    lines = ["", f"Solution for {instance.target.to_string()}:"]
    if instance.is_solved:
        lines.append(f"  {instance.best_solution.to_string()}")
    else:
        lines.extend(["", NO_SOLUTION_MESSAGE])
    lines.append(f"  {instance.total_fights_simulated} Fights simulated.")
    lines.append(f"  Total Calculation Time: {instance.calculation_time:g}")
    lines.append("")

    if instance.is_solved:
        lines.append(REPLAY_HEADER)
        lines.append(make_battle_replay(instance.best_solution, instance.target, repository, date))
        lines.append("")

    return "\n".join(lines) + "\n"
