"""Built-in game data for cq-lineup."""

from __future__ import annotations

from cqlineup.content.catalog import Catalog, create_default_catalog, load_default_catalog

__all__ = [
    "Catalog",
    "create_default_catalog",
    "load_default_catalog",
]
