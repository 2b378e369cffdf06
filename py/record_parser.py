from dataclasses import dataclass

from line_scanner import SourceLine

# Control characters and space, the bytes a blank line may consist of
blank_bytes = bytes(range(0x21))


@dataclass(frozen=True)
class Record:
    key: bytes
    offset: int
    length: int


def split_key(content: bytes) -> bytes | None:
    """
    Return the key of a "<key> <value...>" line, or None if the line should be skipped.

    Lines made only of spaces and control characters, and lines without a space, are skipped.
    Only the first space separates key and value, so the key may be empty when the line
    starts with one.
    """
    if not content.strip(blank_bytes):
        return None
    key, separator, _ = content.partition(b" ")
    if not separator:
        return None
    return key


def parse_record(line: SourceLine) -> Record | None:
    key = split_key(line.content)
    if key is None:
        return None
    return Record(key=key, offset=line.start_offset, length=line.byte_length)
