#!/usr/bin/env python3
"""
Export the built-in pinyin table as an external dictionary file.

Writes one "HEX=>reading,reading" line per character, sorted by codepoint.
The result can be edited and loaded back with ``hanpinyin --dictionary``.
"""

import argparse
import sys
from pathlib import Path

# Add the parent directory to path to import hanpinyin
sys.path.insert(0, str(Path(__file__).parent.parent))

from hanpinyin.services import PinyinTable


def export_dictionary(output: Path, delimiter: str = "=>") -> int:
    """Write the built-in table to ``output``; returns the number of lines written."""
    table = PinyinTable.builtin()
    with output.open("w", encoding="utf-8") as f:
        for codepoint, readings in sorted(table.mapping.items()):
            f.write(f"{codepoint:X}{delimiter}{readings}\n")
    return len(table)


def main():
    parser = argparse.ArgumentParser(description="Export the built-in pinyin table")
    parser.add_argument("output", type=Path, help="Destination file")
    parser.add_argument("--delimiter", default="=>", help="Codepoint/reading delimiter (default: =>)")
    args = parser.parse_args()

    count = export_dictionary(args.output, args.delimiter)
    print(f"Wrote {count} entries to {args.output}")


if __name__ == "__main__":
    main()
