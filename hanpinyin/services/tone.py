"""
Tone mark table for pinyin vowels.

Pinyin tone marks are precomposed codepoints (ā is a single codepoint), so
stripping is a per-codepoint substitution rather than a normalization pass.
"""
from __future__ import annotations

from types import MappingProxyType

# Single-vowel finals by tone, in base-vowel order a e i o u ü, then uppercase
FIRST_TONE = "āēīōūǖĀĒĪŌŪǕ"
SECOND_TONE = "áéíóúǘÁÉÍÓÚǗ"
THIRD_TONE = "ǎěǐǒǔǚǍĚǏǑǓǙ"
FOURTH_TONE = "àèìòùǜÀÈÌÒÙǛ"

BASE_VOWELS_V = "aeiouvAEIOUV"
BASE_VOWELS_U = "aeiouüAEIOUÜ"


class ToneTable:
    """Immutable toned-vowel → base-vowel mapping (48 entries)."""

    def __init__(self, v_to_u: bool = False):
        base = BASE_VOWELS_U if v_to_u else BASE_VOWELS_V
        table = {}
        for toned in (FIRST_TONE, SECOND_TONE, THIRD_TONE, FOURTH_TONE):
            for mark, plain in zip(toned, base):
                table[mark] = plain
        self._table = MappingProxyType(table)
        self._v_to_u = v_to_u

    def base_vowel_for(self, ch: str) -> str | None:
        """Return the unmarked vowel for a toned vowel, or None for anything else."""
        return self._table.get(ch)

    def strip(self, syllable: str) -> str:
        """Replace every toned vowel in ``syllable`` with its base vowel."""
        return "".join(self._table.get(ch, ch) for ch in syllable)

    @property
    def v_to_u(self) -> bool:
        return self._v_to_u

    @property
    def mapping(self) -> MappingProxyType:
        return self._table

    def __contains__(self, ch: str) -> bool:
        return ch in self._table

    def __len__(self) -> int:
        return len(self._table)
