"""
Input Engine for cq-lineup.

The engine covers:
- Query resolution (macro file and interactive answers)
- Lineup parsing (quests, raw lineups, leveled heroes)
- Replay encoding (the game client's tournament replay format)
"""

from __future__ import annotations

from cqlineup.engine.models import (
    COMMENT_DELIMITER,
    ELEMENT_SEPARATOR,
    HEROLEVEL_SEPARATOR,
    NEGATIVE_ANSWER,
    POSITIVE_ANSWER,
    QUEST_NUMBER_SEPARATOR,
    QUEST_PREFIX,
    IOConfig,
    OutputLevel,
    QueryType,
)
from cqlineup.engine.output import OutputGate
from cqlineup.engine.parser import LineupParser
from cqlineup.engine.query import QueryAutomaton, is_integer, normalize_line
from cqlineup.engine.replay import (
    REPLAY_EMPTY_SPOT,
    build_battle_replay,
    get_replay_heroes,
    get_replay_monster_number,
    get_replay_setup,
    make_battle_replay,
)

__all__ = [
    # Models
    "COMMENT_DELIMITER",
    "ELEMENT_SEPARATOR",
    "HEROLEVEL_SEPARATOR",
    "NEGATIVE_ANSWER",
    "POSITIVE_ANSWER",
    "QUEST_NUMBER_SEPARATOR",
    "QUEST_PREFIX",
    "IOConfig",
    "OutputLevel",
    "QueryType",
    # Output
    "OutputGate",
    # Queries
    "QueryAutomaton",
    "is_integer",
    "normalize_line",
    # Parsing
    "LineupParser",
    # Replays
    "REPLAY_EMPTY_SPOT",
    "build_battle_replay",
    "get_replay_heroes",
    "get_replay_monster_number",
    "get_replay_setup",
    "make_battle_replay",
]
