"""Tests for the cq-lineup console session."""

from __future__ import annotations

import io
import json

from cqlineup.cli.repl import LineupSession, main
from cqlineup.engine import IOConfig, OutputLevel
from cqlineup.services import ManualSolver
from cqlineup.services.reporting import NO_SOLUTION_MESSAGE, REPLAY_HEADER


def _make_session(
    repository, input_text: str, config: IOConfig | None = None, **kwargs
) -> tuple[LineupSession, io.StringIO]:
    """Create a session reading from a string."""
    output = io.StringIO()
    session = LineupSession(
        config,
        repository=repository,
        stream=output,
        input_stream=io.StringIO(input_text),
        **kwargs,
    )
    return session, output


class TestLineupSession:
    """Tests for a full session run."""

    def test_manual_solution_produces_replay(self, repository):
        session, output = _make_session(
            repository,
            "hero1:5\ndone\nq3-2\nhero1:5,a1\nn\n\n",
            IOConfig(output_level=OutputLevel.CMD_OUTPUT),
        )
        session.solver = ManualSolver(session.lineup_input)
        state = session.run()

        assert [h.name for h in state.heroes] == ["hero1:5"]
        assert len(state.solved) == 1
        instance = state.solved[0]
        assert instance.is_solved
        assert [m.name for m in instance.best_solution.monsters] == ["hero1:5", "a1"]
        text = output.getvalue()
        assert REPLAY_HEADER in text
        assert "Do you want to solve more instances? (y/n): " in text
        assert text.endswith("Press enter to exit...")

    def test_manual_solution_respects_max_combatants(self, repository):
        session, _ = _make_session(
            repository,
            "done\nq3-5\npanda,wolf\npanda\n",
        )
        session.solver = ManualSolver(session.lineup_input)
        state = session.run()
        assert state.solved[0].max_combatants == 2
        assert state.solved[0].best_solution.monster_amount == 2

        session, _ = _make_session(repository, "done\nq3-6\npanda,wolf\npanda\n")
        session.solver = ManualSolver(session.lineup_input)
        state = session.run()
        assert state.solved[0].best_solution.monster_amount == 1

    def test_unsolved_instances_below_cmd_output(self, repository):
        session, output = _make_session(repository, "done\nq3-1 wolf\n")
        state = session.run()

        assert len(state.solved) == 2
        assert output.getvalue().count(NO_SOLUTION_MESSAGE) == 2
        # Question is not asked below CMD_OUTPUT
        assert "(y/n)" not in output.getvalue()

    def test_solve_more_rounds(self, repository):
        session, _ = _make_session(
            repository,
            "done\npanda\ny\nwolf\nn\n\n",
            IOConfig(output_level=OutputLevel.CMD_OUTPUT),
        )
        state = session.run()
        assert [i.target.to_string() for i in state.solved] == ["[panda]", "[wolf]"]

    def test_input_closed_ends_session(self, repository):
        session, _ = _make_session(repository, "done\n")
        state = session.run()
        assert state.running is False
        assert state.solved == []

    def test_silent_macro_json_output(self, repository, tmp_path):
        macro = tmp_path / "macro.txt"
        macro.write_text("done\nQ3-2 // first quest\n")
        session, output = _make_session(
            repository,
            "",
            IOConfig(
                macro_file=str(macro),
                show_queries=False,
                output_level=OutputLevel.SOLUTION_OUTPUT,
            ),
            json_output=True,
        )
        session.run()
        record = json.loads(output.getvalue())
        assert record["target"] == ["panda", "wolf"]
        assert record["solution"] == []

    def test_macro_with_latin1_comment(self, repository, tmp_path):
        macro = tmp_path / "macro.txt"
        macro.write_bytes(b"done\nq3-2 // caf\xe9\n")
        session, output = _make_session(
            repository,
            "",
            IOConfig(
                macro_file=str(macro),
                show_queries=False,
                output_level=OutputLevel.SOLUTION_OUTPUT,
            ),
            json_output=True,
        )
        state = session.run()
        assert len(state.solved) == 1
        assert json.loads(output.getvalue())["target"] == ["panda", "wolf"]


class TestMain:
    """Tests for the command line entry point."""

    def test_main_with_macro(self, tmp_path, capsys, monkeypatch):
        for name in ("CQ_OUTPUT_LEVEL", "CQ_MACRO_FILE", "CQ_SHOW_QUERIES"):
            monkeypatch.delenv(name, raising=False)
        macro = tmp_path / "macro.txt"
        macro.write_text("nebra:10\ndone\nq1-1\n")
        exit_code = main(
            [
                "--macro",
                str(macro),
                "--silent-macro",
                "--json",
                "--output-level",
                "solution_output",
            ]
        )
        assert exit_code == 0
        record = json.loads(capsys.readouterr().out)
        assert record["target"] == ["w5", "e5", "f5", "a5"]
