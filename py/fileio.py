import struct
from typing import BinaryIO

from params import offset_format


def read_uint64(file: BinaryIO) -> int:
    """Read a little-endian 64-bit unsigned integer from file."""
    data = file.read(8)
    if len(data) != 8:
        raise EOFError(f"Expected 8 bytes, got {len(data)}")
    result: int = struct.unpack(offset_format, data)[0]
    return result


def write_uint64(file: BinaryIO, value: int) -> None:
    """Write a little-endian 64-bit unsigned integer to file."""
    file.write(struct.pack(offset_format, value))
