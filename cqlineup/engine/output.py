"""
Output gate for cq-lineup.

Decides, from the configured output level, whether a console message
is shown at all.
"""

from __future__ import annotations

import sys
from typing import TextIO

from cqlineup.engine.models import INDENT_WIDTH, IOConfig, OutputLevel


class OutputGate:
    """Writes console messages whose urgency the config allows."""

    def __init__(
        self,
        config: IOConfig | None = None,
        *,
        stream: TextIO | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        self.config = config or IOConfig()
        self.stream = stream if stream is not None else sys.stdout
        self.input_stream = input_stream if input_stream is not None else sys.stdin

    def should_output(self, urgency: OutputLevel) -> bool:
        return self.config.output_level >= urgency

    @staticmethod
    def get_indent(indent: int) -> str:
        return " " * (indent * INDENT_WIDTH)

    def write(self, text: str) -> None:
        """Write text unconditionally; used for prompts and help."""
        self.stream.write(text)
        self.stream.flush()

    def output_message(
        self,
        message: str,
        urgency: OutputLevel = OutputLevel.BASIC_OUTPUT,
        indent: int = 0,
        linebreak: bool = True,
    ) -> None:
        """Output a message if its urgency passes the configured level."""
        if not self.should_output(urgency):
            return
        text = self.get_indent(indent) + message
        if linebreak:
            text += "\n"
        self.write(text)

    def halt_execution(self) -> None:
        """Wait for enter before exiting so a console window stays open."""
        if self.should_output(OutputLevel.CMD_OUTPUT):
            self.write("Press enter to exit...")
            self.input_stream.readline()
