"""
Types package for pinyin transliteration.

This package contains the output style enum, the immutable converter
configuration, result types, and the package error hierarchy.
"""

from hanpinyin.types.config import NO_READING, ConverterConfig
from hanpinyin.types.errors import DictionaryLoadError, HanPinyinError
from hanpinyin.types.results import TableInfo
from hanpinyin.types.style import Style

__all__ = [
    "NO_READING",
    "ConverterConfig",
    "DictionaryLoadError",
    "HanPinyinError",
    "Style",
    "TableInfo",
]
