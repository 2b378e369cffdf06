"""
Fixed-width binary index entries.

Entry format (56 bytes, little-endian):
    [key(40B, zero-padded/truncated)] [offset(8B)] [length(8B)]

The offset and length locate a line of the data file, terminator included. The index
file is the plain concatenation of entries in data file order, without header or footer.
"""

import struct
from dataclasses import dataclass

from params import entry_format, entry_size, key_size, max_uint64


@dataclass(frozen=True)
class IndexEntry:
    key_field: bytes
    offset: int
    length: int

    @property
    def key_bytes(self) -> bytes:
        """Key field without its zero padding."""
        return self.key_field.rstrip(b"\x00")


def encode_key(key: bytes) -> bytes:
    """Truncate or zero-pad a key to exactly key_size bytes."""
    return key[:key_size].ljust(key_size, b"\x00")


def encode_entry(key: bytes, offset: int, length: int) -> bytes:
    """
    Encode a key and the byte range of its line into a 56-byte index entry.

    Keys longer than key_size bytes are truncated, so distinct keys sharing their first
    key_size bytes produce identical key fields.

    Args:
        key: Raw key bytes
        offset: Start of the line in the data file
        length: Length of the line in bytes, terminator included

    Returns:
        The encoded entry
    """
    for name, value in (("offset", offset), ("length", length)):
        if not 0 <= value <= max_uint64:
            raise ValueError(f"{name} {value} does not fit in an unsigned 64-bit integer")
    return struct.pack(entry_format, encode_key(key), offset, length)


def decode_entry(data: bytes) -> IndexEntry:
    """Decode a 56-byte index entry."""
    if len(data) != entry_size:
        raise ValueError(f"Index entry must be {entry_size} bytes, got {len(data)}")
    key_field, offset, length = struct.unpack(entry_format, data)
    return IndexEntry(key_field=key_field, offset=offset, length=length)
