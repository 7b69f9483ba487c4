"""
Battle Replay Encoder for cq-lineup.

Builds the token the game client's tournament page imports to show a
fight. The client reads every field by position:

- setup/player: ARMY_MAX_SIZE * TOURNAMENT_LINES slot ids per army.
  Each line repeats the army back to front. Ordinary monsters are their
  index in the canonical monster list, heroes are -(hero index + 2),
  and empty slots are REPLAY_EMPTY_SPOT.
- shero/phero: one level per hero template, 0 when absent.

The JSON text is base64 encoded. Only encoding is needed.
"""

from __future__ import annotations

import base64
import json
import time

from cqlineup.db.interfaces import MonsterRepository
from cqlineup.models import ARMY_MAX_SIZE, TOURNAMENT_LINES, Army, Monster

REPLAY_EMPTY_SPOT = -1


def get_replay_monster_number(monster: Monster, repository: MonsterRepository) -> int:
    """In-game id of a unit: 0 and up for monsters, -2 and down for heroes."""
    if monster.is_hero:
        index = repository.hero_index(monster.base_name)
        return REPLAY_EMPTY_SPOT if index is None else -index - 2
    index = repository.monster_index(monster.name)
    return REPLAY_EMPTY_SPOT if index is None else index


def get_replay_setup(army: Army, repository: MonsterRepository) -> list[int]:
    """Slot ids for every tournament line, each line back to front."""
    amount = army.monster_amount
    setup = []
    for i in range(ARMY_MAX_SIZE * TOURNAMENT_LINES):
        slot = i % ARMY_MAX_SIZE
        if slot < amount:
            setup.append(get_replay_monster_number(army.monsters[amount - slot - 1], repository))
        else:
            setup.append(REPLAY_EMPTY_SPOT)
    return setup


def get_replay_heroes(army: Army, repository: MonsterRepository) -> list[int]:
    """Hero levels in registry order; the first matching unit wins."""
    levels = []
    for base in repository.base_heroes:
        level = 0
        for monster in army.monsters:
            if monster.is_hero and monster.base_name == base.base_name:
                level = monster.level
                break
        levels.append(level)
    return levels


def build_battle_replay(
    friendly: Army,
    hostile: Army,
    repository: MonsterRepository,
    date: int | None = None,
) -> dict:
    """Build the replay record; key order is part of the format."""
    return {
        "winner": "Unknown",
        "left": "Solution",
        "right": "Instance",
        "date": int(time.time()) if date is None else date,
        "title": "Proposed Solution",
        "setup": get_replay_setup(friendly, repository),
        "shero": get_replay_heroes(friendly, repository),
        "player": get_replay_setup(hostile, repository),
        "phero": get_replay_heroes(hostile, repository),
    }


def make_battle_replay(
    friendly: Army,
    hostile: Army,
    repository: MonsterRepository,
    date: int | None = None,
) -> str:
    """
    Encode a fight between two armies as a replay token.

    Args:
        friendly: The proposed solution, shown on the left
        hostile: The instance being solved, shown on the right
        repository: Source of the monster and hero indices
        date: Unix timestamp to embed, defaults to now

    Returns:
        Base64 text of the compact JSON replay
    """
    replay = build_battle_replay(friendly, hostile, repository, date)
    unencoded = json.dumps(replay, separators=(",", ":"))
    return base64.b64encode(unencoded.encode("utf-8")).decode("ascii")
