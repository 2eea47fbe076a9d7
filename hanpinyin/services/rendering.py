"""
Text rendering service.

Walks the input one codepoint at a time. Han characters are transliterated,
everything else is passed through verbatim, and the resulting tokens are
joined with the caller's separator.
"""
from __future__ import annotations

from hanpinyin.services.transliteration import TransliterationService
from hanpinyin.types import ConverterConfig, Style
from hanpinyin.utils.han import is_han


class TextRenderer:
    """Render whole strings via a TransliterationService."""

    def __init__(self, config: ConverterConfig, transliteration: TransliterationService):
        self._config = config
        self._transliteration = transliteration
        self._han_pattern = config.han_pattern

    def is_han(self, ch: str) -> bool:
        return is_han(ch, self._han_pattern)

    def tokens(self, text: str, style: Style | int = Style.NORMAL) -> list[str]:
        """Split ``text`` into output tokens: one per codepoint, empty renderings dropped."""
        words = []
        for ch in text:
            if not self.is_han(ch):
                words.append(ch)
                continue
            word = self._transliteration.render(ch, style)
            if word:
                words.append(word)
        return words

    def render(self, text: str, separator: str = " ", style: Style | int = Style.NORMAL) -> str:
        return separator.join(self.tokens(text, style))
