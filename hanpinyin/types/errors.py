"""Exception hierarchy for pinyin transliteration."""
from __future__ import annotations


class HanPinyinError(Exception):
    """Base class for all hanpinyin errors."""


class DictionaryLoadError(HanPinyinError):
    """An external pinyin dictionary was requested but could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot load pinyin dictionary '{path}': {reason}")
        self.path = path
        self.reason = reason
