"""
Services package for pinyin transliteration.

This package contains the lookup tables and the rendering services built on
top of them, organized by responsibility.
"""

from hanpinyin.services.dictionary import PinyinTable, parse_dictionary_line
from hanpinyin.services.rendering import TextRenderer
from hanpinyin.services.tone import ToneTable
from hanpinyin.services.transliteration import TransliterationService, capitalize_initial

__all__ = [
    # Tables
    "PinyinTable",
    "ToneTable",
    # Services
    "TextRenderer",
    "TransliterationService",
    # Helpers
    "capitalize_initial",
    "parse_dictionary_line",
]
