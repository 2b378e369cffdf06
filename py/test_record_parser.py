import pytest

from line_scanner import SourceLine
from record_parser import Record, parse_record, split_key


@pytest.mark.parametrize("content", [b"", b"   ", b"\t", b" \t \x0b"])
def test_blank_lines_are_skipped(content: bytes) -> None:
    assert split_key(content) is None


@pytest.mark.parametrize("content", [b"\x01 \x02", b"\x00", b" \x1f "])
def test_control_character_lines_are_skipped(content: bytes) -> None:
    assert split_key(content) is None


def test_high_bytes_are_not_blank() -> None:
    assert split_key(b"\xc3\xa9 value") == b"\xc3\xa9"


def test_line_without_space_is_skipped() -> None:
    assert split_key(b"nokeyvalue") is None
    assert split_key(b"key\tvalue") is None


def test_split_on_first_space_only() -> None:
    assert split_key(b"org.example:lib:1.0 some value with spaces") == b"org.example:lib:1.0"


def test_empty_value_is_accepted() -> None:
    assert split_key(b"key ") == b"key"


def test_leading_space_gives_empty_key() -> None:
    assert split_key(b" value") == b""


def test_parse_record_keeps_line_span() -> None:
    line = SourceLine(content=b"alpha 111", start_offset=42, byte_length=11)
    assert parse_record(line) == Record(key=b"alpha", offset=42, length=11)


def test_parse_record_skip() -> None:
    line = SourceLine(content=b"nokeyvalue", start_offset=0, byte_length=11)
    assert parse_record(line) is None
