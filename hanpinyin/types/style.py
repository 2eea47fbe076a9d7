"""
Output styles for pinyin rendering.

The numeric values are stable and may be persisted by callers.
"""
from __future__ import annotations

from enum import IntEnum


class Style(IntEnum):
    """Pinyin output style."""

    NORMAL = 0  # lowercase, tone marks stripped: zhong
    TONE = 1  # lowercase, tone marks kept: zhōng
    INITIAL_CAPITAL = 2  # tone marks stripped, first letter uppercased: Zhong

    @classmethod
    def from_name(cls, name: str) -> Style:
        """Parse a style name such as ``"tone"`` or ``"initial-capital"``."""
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(s.cli_name for s in cls)
            raise ValueError(f"unknown style '{name}' (expected one of: {choices})") from None

    @property
    def cli_name(self) -> str:
        return self.name.lower().replace("_", "-")
