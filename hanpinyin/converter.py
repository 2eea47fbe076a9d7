"""
Han to Pinyin Conversion Module

This module converts Chinese (Han) text into Hanyu Pinyin one character at a
time using a static character table.

## Overview

The core functionality is provided by the `PinyinConverter` class, which wires
together four services:

- **ToneTable**: toned vowel → base vowel (48 entries, immutable)
- **PinyinTable**: Han codepoint → "zhōng,zhòng" readings, from pypinyin's
  built-in dictionary or an external "HEX=>reading" file
- **TransliterationService**: renders a single character in a `Style`
- **TextRenderer**: walks text codepoint by codepoint and joins the tokens

No word segmentation or context disambiguation is performed: the first
recorded reading of a character is always used.

## Usage Examples

```python
converter = PinyinConverter()
converter.transliterate("中国人", " ", Style.TONE)             # "zhōng guó rén"
converter.transliterate("中国人", " ", Style.NORMAL)           # "zhong guo ren"
converter.transliterate("中国人", " ", Style.INITIAL_CAPITAL)  # "Zhong Guo Ren"
converter.transliterate("a中b", "")                            # "azhongb"

# External dictionary
config = ConverterConfig.create_default().with_dictionary_path("my_dict.txt")
custom = PinyinConverter(config)
```

## Error Handling

- `DictionaryLoadError` is raised at construction if an external dictionary
  path is configured but cannot be read. There is no fallback to the
  built-in table.
- Rendering never raises: characters without a reading render as
  `NO_READING` ("9999") in every style.

## Thread Safety

All tables are immutable after construction, so one converter can be shared
between threads without locking. Separate converters are fully independent.
"""
from __future__ import annotations

from functools import cache

from hanpinyin.services import PinyinTable, TextRenderer, ToneTable, TransliterationService
from hanpinyin.types import ConverterConfig, Style, TableInfo


class PinyinConverter:
    """Main Han → pinyin conversion service."""

    def __init__(self, config: ConverterConfig | None = None):
        self._config = config or ConverterConfig.create_default()
        self._tone_table = ToneTable(v_to_u=self._config.v_to_u)
        self._pinyin_table = PinyinTable.from_config(self._config)
        self._transliteration = TransliterationService(self._config, self._pinyin_table, self._tone_table)
        self._renderer = TextRenderer(self._config, self._transliteration)

    @property
    def config(self) -> ConverterConfig:
        return self._config

    # Public API methods
    def transliterate(self, text: str, separator: str = " ", style: Style | int = Style.NORMAL) -> str:
        """
        Main API method: convert every Han character in ``text`` to pinyin.

        Non-Han characters are kept verbatim as their own tokens; all tokens
        are joined with ``separator``.
        """
        return self._renderer.render(text, separator, style)

    def tokens(self, text: str, style: Style | int = Style.NORMAL) -> list[str]:
        return self._renderer.tokens(text, style)

    def render_tone(self, han: str) -> str:
        return self._transliteration.render_tone(han)

    def render_normal(self, han: str) -> str:
        return self._transliteration.render_normal(han)

    def render_initial_capital(self, han: str) -> str:
        return self._transliteration.render_initial_capital(han)

    def readings_for(self, han) -> str | None:
        """Raw comma-joined readings for ``han``, None if the table has no entry."""
        return self._pinyin_table.readings_for(han)

    def get_table_info(self) -> TableInfo:
        return self._pinyin_table.info


@cache
def _default_converter() -> PinyinConverter:
    return PinyinConverter()


def transliterate(text: str, separator: str = " ", style: Style | int = Style.NORMAL) -> str:
    """Convert ``text`` with a shared converter over the built-in table."""
    return _default_converter().transliterate(text, separator, style)
