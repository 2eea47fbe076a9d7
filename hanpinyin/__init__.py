"""
hanpinyin: Han Character to Hanyu Pinyin Transliteration

Converts Chinese text into pinyin one character at a time using a static
character table, with toned, tone-stripped, and capitalized output styles.
"""

__version__ = "0.1.0"

__all__ = [
    "NO_READING",
    "ConverterConfig",
    "DictionaryLoadError",
    "PinyinConverter",
    "Style",
    "transliterate",
]


def __getattr__(name):
    """Lazy import to avoid loading the pinyin dictionary on package import."""
    if name in ("PinyinConverter", "transliterate"):
        from hanpinyin import converter

        return getattr(converter, name)
    if name in ("NO_READING", "ConverterConfig", "DictionaryLoadError", "Style"):
        from hanpinyin import types

        return getattr(types, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
