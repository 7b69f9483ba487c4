"""
Engine Data Models for cq-lineup.

Defines the configuration and enums shared by the input side:
- OutputLevel: How much console output a session produces
- QueryType: Validation shape requested from the query automaton
- IOConfig: Console and macro file settings
"""

from __future__ import annotations

import os
from enum import Enum, IntEnum

from pydantic import BaseModel, Field

POSITIVE_ANSWER = "y"
NEGATIVE_ANSWER = "n"
COMMENT_DELIMITER = "//"
INDENT_WIDTH = 2

# Lineup grammar
ELEMENT_SEPARATOR = ","
HEROLEVEL_SEPARATOR = ":"
QUEST_PREFIX = "q"
QUEST_NUMBER_SEPARATOR = "-"


class OutputLevel(IntEnum):
    """Console verbosity, ordered from silent to chatty."""

    NO_OUTPUT = 0
    SOLUTION_OUTPUT = 1
    BASIC_OUTPUT = 2
    CMD_OUTPUT = 3


class QueryType(str, Enum):
    """What kind of answer a query accepts."""

    QUESTION = "question"  # Positive or negative answer literal
    INTEGER = "integer"  # First token parses as a base-10 integer
    RAW = "raw"  # The whole normalized line
    RAW_FIRST = "raw_first"  # Only the first token


class IOConfig(BaseModel):
    """Console and macro file configuration."""

    output_level: OutputLevel = OutputLevel.BASIC_OUTPUT
    show_queries: bool = Field(
        default=True, description="Echo prompts and answers while running a macro file"
    )
    macro_file: str | None = Field(default=None, description="Path of a pre-recorded script")

    comment_delimiter: str = Field(default=COMMENT_DELIMITER, min_length=1)
    positive_answer: str = Field(default=POSITIVE_ANSWER, min_length=1)
    negative_answer: str = Field(default=NEGATIVE_ANSWER, min_length=1)

    @classmethod
    def from_env(cls, **overrides: object) -> IOConfig:
        """
        Build a config from environment variables.

        Reads:
            CQ_OUTPUT_LEVEL: Level name (e.g. "cmd_output") or number
            CQ_MACRO_FILE: Path of a macro file
            CQ_SHOW_QUERIES: "0"/"false" to run macro files silently

        Keyword overrides that are not None win over the environment.
        """
        values: dict[str, object] = {}

        level = os.getenv("CQ_OUTPUT_LEVEL")
        if level:
            values["output_level"] = parse_output_level(level)

        if os.getenv("CQ_MACRO_FILE"):
            values["macro_file"] = os.getenv("CQ_MACRO_FILE")

        show = os.getenv("CQ_SHOW_QUERIES")
        if show:
            values["show_queries"] = show.lower() not in ("0", "false", "no")

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls.model_validate(values)


def parse_output_level(value: str) -> OutputLevel:
    """Parse an output level from its name or number."""
    value = value.strip()
    if value.isdigit():
        return OutputLevel(int(value))
    try:
        return OutputLevel[value.upper()]
    except KeyError:
        raise ValueError(f"Unknown output level: {value}") from None
