"""
Dictionary Export Test Suite

Exports the built-in table and loads it back as an external dictionary.
"""

import sys
from pathlib import Path

# Add the parent directory to path to import hanpinyin and scripts
sys.path.insert(0, str(Path(__file__).parent.parent))

from hanpinyin import ConverterConfig, PinyinConverter, Style
from scripts.export_dictionary import export_dictionary


def test_export_round_trip(tmp_path, converter):
    path = tmp_path / "builtin.txt"
    count = export_dictionary(path)

    assert count == converter.get_table_info().entry_count
    first_line = path.read_text(encoding="utf-8").splitlines()[0]
    assert "=>" in first_line

    exported = PinyinConverter(ConverterConfig.create_default().with_dictionary_path(path))
    info = exported.get_table_info()
    assert info.entry_count == count
    assert info.skipped_lines == 0
    for style in Style:
        assert exported.transliterate("中国人", " ", style) == converter.transliterate("中国人", " ", style)
