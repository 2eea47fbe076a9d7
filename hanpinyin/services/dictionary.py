"""
Pinyin table service.

Maps Han codepoints to comma-joined toned readings ("zhōng,zhòng"). The
built-in table comes from pypinyin's single-character dictionary; an external
table can be loaded from a "HEX=>reading,reading" text file.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from functools import cache
from pathlib import Path
from types import MappingProxyType

from pypinyin.pinyin_dict import pinyin_dict

from hanpinyin.log import logger
from hanpinyin.types import ConverterConfig, DictionaryLoadError, TableInfo
from hanpinyin.types.results import BUILTIN_SOURCE

MAX_CODEPOINT = 0x10FFFF

# Optional sign and hex digits only: no 0x prefix, underscores or whitespace
HEX_PATTERN = re.compile(r"[+-]?[0-9A-Fa-f]+")


@cache  # built once per process, shared by every builtin table
def _builtin_mapping() -> MappingProxyType:
    return MappingProxyType(dict(pinyin_dict))


def parse_dictionary_line(line: str, delimiter: str = "=>") -> tuple[int, str] | None:
    """Parse one "HEX=>reading" line; None if the line is malformed."""
    fields = line.rstrip("\r\n").split(delimiter)
    if len(fields) < 2:
        return None
    if not HEX_PATTERN.fullmatch(fields[0]):
        return None
    codepoint = int(fields[0], 16)
    if not 0 <= codepoint <= MAX_CODEPOINT:
        return None
    return codepoint, fields[1]


class PinyinTable:
    """Immutable Han codepoint → reading string table."""

    def __init__(self, mapping: Mapping[int, str], info: TableInfo, reading_delimiter: str = ","):
        self._mapping = mapping if isinstance(mapping, MappingProxyType) else MappingProxyType(dict(mapping))
        self._info = info
        self._reading_delimiter = reading_delimiter

    # ---------- construction ----------
    @classmethod
    def builtin(cls, reading_delimiter: str = ",") -> PinyinTable:
        mapping = _builtin_mapping()
        return cls(mapping, TableInfo(source=BUILTIN_SOURCE, entry_count=len(mapping)), reading_delimiter)

    @classmethod
    def from_file(cls, path, delimiter: str = "=>", reading_delimiter: str = ",") -> PinyinTable:
        """
        Load a table from a line-oriented text file.

        Malformed or undecodable lines are skipped; a file that cannot be
        opened raises DictionaryLoadError.
        """
        path = str(path)
        mapping: dict[int, str] = {}
        skipped = 0
        try:
            with Path(path).open("rb") as f:
                for lineno, raw in enumerate(f, start=1):
                    try:
                        line = raw.decode("utf-8")
                    except UnicodeDecodeError:
                        skipped += 1
                        logger.debug("Skipping undecodable dictionary line %s:%d: %r", path, lineno, raw)
                        continue
                    parsed = parse_dictionary_line(line, delimiter)
                    if parsed is None:
                        skipped += 1
                        logger.debug("Skipping malformed dictionary line %s:%d: %r", path, lineno, line)
                        continue
                    codepoint, reading = parsed
                    mapping[codepoint] = reading
        except OSError as e:
            raise DictionaryLoadError(path, str(e)) from e

        logger.info("Loaded pinyin dictionary %s: %d entries, %d lines skipped", path, len(mapping), skipped)
        info = TableInfo(source=path, entry_count=len(mapping), skipped_lines=skipped)
        return cls(mapping, info, reading_delimiter)

    @classmethod
    def from_config(cls, config: ConverterConfig) -> PinyinTable:
        if config.dictionary_path is None:
            return cls.builtin(config.reading_delimiter)
        return cls.from_file(config.dictionary_path, config.line_delimiter, config.reading_delimiter)

    # ---------- public API ----------
    def readings_for(self, han) -> str | None:
        """Raw comma-joined readings for a character (or codepoint), None if absent."""
        return self._mapping.get(_codepoint(han))

    def first_reading(self, han) -> str | None:
        """The text before the first delimiter; None if absent or the reading is empty."""
        readings = self.readings_for(han)
        if not readings:
            return None
        return readings.split(self._reading_delimiter, 1)[0]

    @property
    def info(self) -> TableInfo:
        return self._info

    @property
    def mapping(self) -> MappingProxyType:
        return self._mapping

    def __contains__(self, han) -> bool:
        return _codepoint(han) in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)


def _codepoint(han) -> int:
    return ord(han) if isinstance(han, str) else han
