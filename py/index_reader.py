import os
from typing import BinaryIO, Generator

from errors import IndexFormatError
from fileio import read_uint64
from index_entry import IndexEntry, decode_entry
from params import entry_size, key_size


def split_index_size(size: int) -> tuple[int, int]:
    """Split an index file size into (whole entries, trailing bytes)."""
    return divmod(size, entry_size)


def count_index_entries(index_file_path: str) -> int:
    """Return the number of entries in an index file."""
    size = os.path.getsize(index_file_path)
    num_entries, trailing_bytes = split_index_size(size)
    if trailing_bytes:
        raise IndexFormatError(
            f"Index file size {size} is not a multiple of {entry_size} bytes", index_file_path
        )
    return num_entries


def read_index_entry(index_file: BinaryIO, entry_idx: int) -> IndexEntry:
    """
    Read a single entry from an already opened index file.
    """
    index_file.seek(entry_idx * entry_size)
    data = index_file.read(entry_size)
    if len(data) != entry_size:
        raise IndexFormatError(f"Index entry {entry_idx} is truncated or missing")
    return decode_entry(data)


def read_entry_span(index_file: BinaryIO, entry_idx: int) -> tuple[int, int]:
    """Read only the (offset, length) fields of an entry, skipping its key."""
    index_file.seek(entry_idx * entry_size + key_size)
    try:
        offset = read_uint64(index_file)
        length = read_uint64(index_file)
    except EOFError as e:
        raise IndexFormatError(f"Index entry {entry_idx} is truncated or missing") from e
    return offset, length


def iter_index_entries(index_file: BinaryIO) -> Generator[IndexEntry, None, None]:
    """Iterate over all entries of an index file, from its current position."""
    while True:
        data = index_file.read(entry_size)
        if not data:
            break
        if len(data) != entry_size:
            raise IndexFormatError(f"Trailing {len(data)} bytes do not form an index entry")
        yield decode_entry(data)


def read_source_range(data_file: BinaryIO, offset: int, length: int) -> bytes:
    """Read the raw bytes of an indexed line, terminator included."""
    data_file.seek(offset)
    data = data_file.read(length)
    if len(data) != length:
        raise IndexFormatError(
            f"Data file ends before byte range [{offset}, {offset + length}) is complete"
        )
    return data
