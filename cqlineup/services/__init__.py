"""
Service layer for cq-lineup.

Services orchestrate the engine into session commands.
"""

from __future__ import annotations

from cqlineup.services.lineup_input import LineupInputService
from cqlineup.services.reporting import instance_record, instance_to_json, instance_to_string
from cqlineup.services.solver import ManualSolver, Solver, UnsolvedSolver

__all__ = [
    "LineupInputService",
    "ManualSolver",
    "Solver",
    "UnsolvedSolver",
    "instance_record",
    "instance_to_json",
    "instance_to_string",
]
