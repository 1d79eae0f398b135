"""hrx core: the parsed archive data model.

This package is intentionally standalone and must not import codecs to avoid
circular dependencies.
"""

from __future__ import annotations

from .archive import ENTRY_TABLE_COLUMNS, ENTRY_TABLE_SCHEMA, Archive

__all__ = [
    "Archive",
    "ENTRY_TABLE_SCHEMA",
    "ENTRY_TABLE_COLUMNS",
]
