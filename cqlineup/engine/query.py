"""
Query Automaton for cq-lineup.

Resolves one validated answer per call, reading lines from a macro
file first and falling back to the interactive channel once the file
runs out. Every answer goes through the same normalization:
comments stripped, lowercased, first token extracted.
"""

from __future__ import annotations

import logging
import re
from typing import TextIO

from cqlineup.engine.models import IOConfig, OutputLevel, QueryType
from cqlineup.engine.output import OutputGate

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
HELP_COMMAND = "help"


def normalize_line(line: str, comment_delimiter: str) -> tuple[str, str]:
    """
    Normalize a raw input line.

    Returns:
        (input_string, first_token): the comment-free lowercased line
        and its first whitespace-delimited token ("" for a blank line)
    """
    input_string = line.rstrip("\r\n").split(comment_delimiter, 1)[0].lower().strip()
    tokens = input_string.split()
    return input_string, tokens[0] if tokens else ""


def is_integer(token: str) -> bool:
    """Whether the whole token is a base-10 integer."""
    return INTEGER_PATTERN.match(token) is not None


class QueryAutomaton:
    """
    Source of validated answers for one session.

    Holds the only mutable input state: whether a macro file is still
    being consumed. Once a read from the macro file hits end of file,
    every later query reads from the interactive channel.
    """

    def __init__(
        self,
        gate: OutputGate | None = None,
        *,
        macro: TextIO | None = None,
        show_input: bool = True,
    ) -> None:
        self.gate = gate or OutputGate()
        self.use_macro_file = False
        self.show_queries = True
        self._macro: TextIO | None = None
        if macro is not None:
            self.use_macro_stream(macro, show_input)

    @property
    def config(self) -> IOConfig:
        return self.gate.config

    def use_macro_stream(self, macro: TextIO, show_input: bool = True) -> None:
        """Read answers from an already opened text stream first."""
        if self._macro is not macro:
            self.close()
        self._macro = macro
        self.use_macro_file = True
        self.show_queries = show_input

    def init_macro_file(self, macro_file_name: str, show_input: bool = True) -> bool:
        """
        Open a macro file to read answers from.

        Returns:
            True if the file was opened, False if input stays interactive
        """
        try:
            macro = open(macro_file_name, encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Could not open macro file {macro_file_name}: {e}")
            self.close()
            self.show_queries = True
            self.gate.write("Could not find Macro File. Switching to Manual Input.\n")
            return False

        logger.info(f"Reading answers from macro file {macro_file_name}")
        self.use_macro_stream(macro, show_input)
        return True

    def close(self) -> None:
        if self._macro is not None:
            self._macro.close()
            self._macro = None
        self.use_macro_file = False

    def _exit_macro_mode(self) -> None:
        logger.info("Macro file exhausted, switching to interactive input")
        self.use_macro_file = False

    def _read_macro_line(self) -> str | None:
        if self._macro is None:
            self._exit_macro_mode()
            return None
        line = self._macro.readline()
        if not line:
            self._exit_macro_mode()
            return None
        return line

    def _read_interactive_line(self) -> str:
        line = self.gate.input_stream.readline()
        if not line:
            raise EOFError("Interactive input closed")
        return line

    def _accept(self, query_type: QueryType, input_string: str, first_token: str) -> str | None:
        """Return the answer for a query type, or None if it is rejected."""
        if query_type == QueryType.QUESTION:
            if first_token in (self.config.positive_answer, self.config.negative_answer):
                return first_token
            return None
        if query_type == QueryType.INTEGER:
            # Validated only; the caller parses the text again
            return first_token if is_integer(first_token) else None
        if query_type == QueryType.RAW:
            return input_string
        return first_token

    def get_resistant_input(self, query: str, help_text: str, query_type: QueryType) -> str:
        """
        Ask a query until an answer of the requested shape is given.

        Args:
            query: Prompt shown before reading
            help_text: Shown when the answer is "help"
            query_type: Validation shape of the answer

        Returns:
            The accepted answer as text

        Raises:
            EOFError: If the interactive channel is closed
        """
        while True:
            line = ""
            if self.use_macro_file:
                line = self._read_macro_line() or ""

            # Silent macro files hide the prompt
            if not self.use_macro_file or self.show_queries:
                self.gate.write(query)

            if not self.use_macro_file:
                line = self._read_interactive_line()

            input_string, first_token = normalize_line(line, self.config.comment_delimiter)
            if self.use_macro_file and self.show_queries:
                self.gate.write(input_string + "\n")

            if first_token == HELP_COMMAND:
                self.gate.write(help_text)
                continue

            answer = self._accept(query_type, input_string, first_token)
            if answer is not None:
                return answer
            logger.debug(f"Rejected {query_type.value} answer: {input_string!r}")

    def ask_yes_no_question(
        self,
        question_message: str,
        help_text: str,
        urgency: OutputLevel = OutputLevel.CMD_OUTPUT,
        default_answer: str | None = None,
    ) -> bool:
        """
        Ask a yes/no question.

        If the output level hides questions of this urgency, the default
        answer is used without reading any input.
        """
        positive = self.config.positive_answer
        negative = self.config.negative_answer
        if not self.gate.should_output(urgency):
            answer = default_answer if default_answer is not None else negative
        else:
            answer = self.get_resistant_input(
                f"{question_message} ({positive}/{negative}): ",
                help_text,
                QueryType.QUESTION,
            )
        return answer == positive
