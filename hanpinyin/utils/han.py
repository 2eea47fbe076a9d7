"""
Han script classification.

Python's ``unicodedata`` has no script property, so membership is tested
against a precompiled character class built from the Unicode Han script
ranges.
"""

import re

# Unicode Script=Han ranges
HAN_RANGES = (
    (0x2E80, 0x2E99),  # CJK Radicals Supplement
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),  # Kangxi Radicals
    (0x3005, 0x3005),  # 々 iteration mark
    (0x3007, 0x3007),  # 〇 ideographic zero
    (0x3021, 0x3029),  # Hangzhou numerals
    (0x3038, 0x303B),
    (0x3400, 0x4DBF),  # CJK Extension A
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0xF900, 0xFA6D),  # CJK Compatibility Ideographs
    (0xFA70, 0xFAD9),
    (0x16FE2, 0x16FE3),
    (0x16FF0, 0x16FF1),
    (0x20000, 0x2A6DF),  # CJK Extension B
    (0x2A700, 0x2B73F),  # CJK Extension C
    (0x2B740, 0x2B81F),  # CJK Extension D
    (0x2B820, 0x2CEAF),  # CJK Extension E
    (0x2CEB0, 0x2EBEF),  # CJK Extension F
    (0x2EBF0, 0x2EE5F),  # CJK Extension I
    (0x2F800, 0x2FA1D),  # CJK Compatibility Ideographs Supplement
    (0x30000, 0x3134F),  # CJK Extension G
    (0x31350, 0x323AF),  # CJK Extension H
)


def _build_han_pattern():
    """Build a single-character class matching any Han codepoint."""
    ranges = []
    for start, end in HAN_RANGES:
        if end <= 0xFFFF:
            ranges.append(f"\\u{start:04X}-\\u{end:04X}")
        else:
            ranges.append(f"\\U{start:08X}-\\U{end:08X}")
    return re.compile(f"[{''.join(ranges)}]")


HAN_PATTERN = _build_han_pattern()


def is_han(ch: str, pattern=HAN_PATTERN) -> bool:
    """True if the single character ``ch`` belongs to the Han script."""
    return pattern.fullmatch(ch) is not None
