"""
Command line interface: transliterate text arguments or stdin lines.
"""
from __future__ import annotations

import argparse
import logging
import sys

from hanpinyin.converter import PinyinConverter
from hanpinyin.types import ConverterConfig, DictionaryLoadError, Style


def _style(value: str) -> Style:
    try:
        return Style.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanpinyin",
        description="Convert Chinese (Han) text to Hanyu Pinyin.",
    )
    parser.add_argument("text", nargs="*", help="Text to convert (reads stdin lines if omitted)")
    parser.add_argument(
        "--style",
        type=_style,
        default=Style.NORMAL,
        help="Output style: normal, tone, or initial-capital (default: normal)",
    )
    parser.add_argument("--separator", default=" ", help="Separator placed between tokens (default: a space)")
    parser.add_argument("--dictionary", metavar="PATH", help="External HEX=>reading dictionary file")
    parser.add_argument("--v-to-u", action="store_true", help="Strip toned ü to 'ü' instead of 'v'")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ConverterConfig.create_default().with_dictionary_path(args.dictionary).with_v_to_u(args.v_to_u)
    try:
        converter = PinyinConverter(config)
    except DictionaryLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.text:
        lines = [" ".join(args.text)]
    else:
        lines = (line.rstrip("\n") for line in sys.stdin)

    for line in lines:
        print(converter.transliterate(line, args.separator, args.style))
    return 0


if __name__ == "__main__":
    sys.exit(main())
