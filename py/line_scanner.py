from dataclasses import dataclass
from typing import BinaryIO, Generator


@dataclass(frozen=True)
class SourceLine:
    """
    One line of the data file.

    content has the line terminator and any carriage returns removed; byte_length counts
    every byte the line occupies in the file, terminator included.
    """

    content: bytes
    start_offset: int
    byte_length: int

    @property
    def end_offset(self) -> int:
        return self.start_offset + self.byte_length


def strip_terminator(raw_line: bytes) -> bytes:
    """Drop the trailing newline and every carriage return from a raw line."""
    if raw_line.endswith(b"\n"):
        raw_line = raw_line[:-1]
    return raw_line.replace(b"\r", b"")


def scan_lines(source: BinaryIO, start_offset: int = 0) -> Generator[SourceLine, None, None]:
    """
    Iterate over the lines of a binary stream, tracking exact byte offsets.

    The stream must be opened in binary mode and positioned at start_offset. Consecutive
    lines cover the stream without gaps or overlaps; a final line without a newline is
    still yielded with only the bytes actually present.

    Args:
        source: Binary stream to read from
        start_offset: Byte offset of the stream's current position in the file

    Yields:
        SourceLine for each line, in file order
    """
    offset = start_offset
    while True:
        raw_line = source.readline()
        if not raw_line:
            break
        yield SourceLine(
            content=strip_terminator(raw_line),
            start_offset=offset,
            byte_length=len(raw_line),
        )
        offset += len(raw_line)
