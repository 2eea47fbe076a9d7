"""
Immutable configuration for pinyin conversion.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace

from hanpinyin.utils.han import HAN_PATTERN

# Placeholder emitted for Han characters with no known reading.
NO_READING = "9999"


@dataclass(frozen=True)
class ConverterConfig:
    """Immutable configuration shared by all services of one converter."""

    # External "HEX=>reading,reading" dictionary; None selects the built-in table
    dictionary_path: str | None

    no_reading: str
    line_delimiter: str
    reading_delimiter: str

    # Strip toned ü to "ü" instead of "v"
    v_to_u: bool

    # Precompiled Han script character class
    han_pattern: re.Pattern[str]

    @classmethod
    def create_default(cls) -> ConverterConfig:
        """Factory method for the default configuration (built-in table)."""
        return cls(
            dictionary_path=None,
            no_reading=NO_READING,
            line_delimiter="=>",
            reading_delimiter=",",
            v_to_u=False,
            han_pattern=HAN_PATTERN,
        )

    def with_dictionary_path(self, path) -> ConverterConfig:
        """Immutable update method for the external dictionary location."""
        return replace(self, dictionary_path=None if path is None else str(path))

    def with_v_to_u(self, v_to_u: bool) -> ConverterConfig:
        """Immutable update method for ü stripping."""
        return replace(self, v_to_u=v_to_u)
