"""
cq-lineup: lineup parsing and battle replays for Cosmos Quest.

Reads army lineups from the console or a macro file, parses them into
solving instances and encodes proposed solutions as replay tokens.
"""

__version__ = "0.1.0"
