"""Tests for instance reporting."""

from __future__ import annotations

import base64
import json

import pytest

from cqlineup.engine import LineupParser, make_battle_replay
from cqlineup.models import Instance
from cqlineup.services import instance_record, instance_to_json, instance_to_string
from cqlineup.services.reporting import NO_SOLUTION_MESSAGE, REPLAY_HEADER


@pytest.fixture
def instance(parser: LineupParser) -> Instance:
    return parser.make_instance_from_string("q3-2").value


@pytest.fixture
def solved(parser: LineupParser, instance: Instance) -> Instance:
    instance.best_solution = parser.parse_army("hero1:5,a1").value
    instance.calculation_time = 1.5
    instance.total_fights_simulated = 1234
    return instance


class TestInstanceRecord:
    """Tests for the machine-readable record."""

    def test_record_fields(self, solved: Instance, repository):
        record = instance_record(solved, repository, date=7)
        assert list(record) == ["target", "solution", "time", "fights", "replay"]
        assert record["target"] == ["panda", "wolf"]
        assert record["solution"] == ["hero1:5", "a1"]
        assert record["time"] == 1.5
        assert record["fights"] == 1234
        assert record["replay"] == make_battle_replay(
            solved.best_solution, solved.target, repository, date=7
        )

    def test_json_embeds_replay_string(self, solved: Instance, repository):
        record = json.loads(instance_to_json(solved, repository, date=7))
        replay = json.loads(base64.b64decode(record["replay"]))
        assert replay["shero"] == [5, 0, 0]

    def test_unsolved_record_still_has_replay(self, instance: Instance, repository):
        record = instance_record(instance, repository)
        assert record["solution"] == []
        assert isinstance(record["replay"], str)


class TestInstanceText:
    """Tests for the human readable report."""

    def test_solved(self, solved: Instance, repository):
        text = instance_to_string(solved, repository, date=7)
        assert "Solution for [panda, wolf]:" in text
        assert "  [hero1:5, a1]" in text
        assert "1234 Fights simulated." in text
        assert "Total Calculation Time: 1.5" in text
        assert REPLAY_HEADER in text
        assert make_battle_replay(solved.best_solution, solved.target, repository, 7) in text
        assert NO_SOLUTION_MESSAGE not in text

    def test_unsolved(self, instance: Instance, repository):
        text = instance_to_string(instance, repository)
        assert NO_SOLUTION_MESSAGE in text
        assert "0 Fights simulated." in text
        assert REPLAY_HEADER not in text

    def test_formatting_does_not_mutate(self, solved: Instance, repository):
        before = solved.model_dump()
        instance_to_string(solved, repository)
        instance_record(solved, repository)
        assert solved.model_dump() == before
