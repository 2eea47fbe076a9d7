"""
Single-character transliteration service.

Every style is derived from the character's canonical toned reading: TONE
returns it as stored, NORMAL strips the tone marks, and INITIAL_CAPITAL
uppercases the first letter of the NORMAL form.
"""
from __future__ import annotations

from hanpinyin.services.dictionary import PinyinTable
from hanpinyin.services.tone import ToneTable
from hanpinyin.types import ConverterConfig, Style


class TransliterationService:
    """Render one Han character in a given pinyin style."""

    def __init__(self, config: ConverterConfig, pinyin_table: PinyinTable, tone_table: ToneTable):
        self._config = config
        self._pinyin_table = pinyin_table
        self._tone_table = tone_table
        self._renderers = {
            Style.TONE: self.render_tone,
            Style.INITIAL_CAPITAL: self.render_initial_capital,
        }

    def render(self, han: str, style: Style | int = Style.NORMAL) -> str:
        """Render ``han`` in ``style``; unknown style values render NORMAL."""
        return self._renderers.get(style, self.render_normal)(han)

    def render_tone(self, han: str) -> str:
        toned = self._pinyin_table.first_reading(han)
        return self._config.no_reading if toned is None else toned

    def render_normal(self, han: str) -> str:
        toned = self.render_tone(han)
        if toned == self._config.no_reading:
            return toned
        return self._tone_table.strip(toned)

    def render_initial_capital(self, han: str) -> str:
        normal = self.render_normal(han)
        if not normal:
            return normal
        return capitalize_initial(normal)


def capitalize_initial(syllable: str) -> str:
    """Uppercase the first character only when it is a lowercase ASCII letter."""
    first = syllable[0]
    if "a" <= first <= "z":
        return chr(ord(first) - 32) + syllable[1:]
    return syllable
