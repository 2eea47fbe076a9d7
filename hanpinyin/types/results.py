"""
Result types for pinyin transliteration.

This module contains immutable structures describing loaded data.
"""
from __future__ import annotations

from dataclasses import dataclass

BUILTIN_SOURCE = "builtin"


@dataclass(frozen=True)
class TableInfo:
    """Immutable description of a loaded pinyin table."""

    source: str  # "builtin" or the dictionary path
    entry_count: int
    skipped_lines: int = 0

    @property
    def is_builtin(self) -> bool:
        return self.source == BUILTIN_SOURCE
