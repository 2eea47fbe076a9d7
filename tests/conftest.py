import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import hanpinyin
sys.path.insert(0, str(Path(__file__).parent.parent))

from hanpinyin import ConverterConfig, PinyinConverter

# Small external dictionary: 中 has two readings, 空 an empty reading,
# 好 an empty first field, 绿 a toned ü.
SAMPLE_DICTIONARY_LINES = [
    "4E2D=>zhōng,zhòng",
    "56FD=>guó",
    "4EBA=>rén",
    "7A7A=>",
    "597D=>,hǎo",
    "7EFF=>lǜ,lù",
    "5973=>nǚ",
    "963F=>ā,ē",
]


@pytest.fixture(scope="session")
def converter():
    """Shared converter over the built-in table."""
    return PinyinConverter()


@pytest.fixture
def write_dictionary(tmp_path):
    """Write dictionary lines to a temp file and return its path."""

    def _write(lines, name="dict.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_converter(write_dictionary):
    path = write_dictionary(SAMPLE_DICTIONARY_LINES)
    return PinyinConverter(ConverterConfig.create_default().with_dictionary_path(path))
