import struct

import pytest

from index_entry import decode_entry, encode_entry, encode_key
from params import entry_size, key_size


def test_entry_layout() -> None:
    entry = encode_entry(b"alpha", 0, 10)
    assert len(entry) == entry_size == 56
    assert entry[:5] == b"alpha"
    assert entry[5:40] == b"\x00" * 35
    assert entry[40:48] == struct.pack("<Q", 0)
    assert entry[48:56] == struct.pack("<Q", 10)


def test_little_endian_integers() -> None:
    entry = encode_entry(b"k", 0x0102030405060708, 1)
    assert entry[40:48] == bytes([8, 7, 6, 5, 4, 3, 2, 1])
    assert entry[48:56] == b"\x01" + b"\x00" * 7


def test_long_key_is_truncated() -> None:
    key = b"k" * 50
    entry = encode_entry(key, 1, 2)
    assert entry[:key_size] == key[:key_size]
    assert len(entry) == entry_size


def test_keys_with_same_prefix_collide() -> None:
    prefix = b"p" * key_size
    assert encode_entry(prefix + b"one", 0, 1)[:key_size] == encode_entry(prefix + b"two", 0, 1)[
        :key_size
    ]


def test_key_of_exactly_key_size_bytes() -> None:
    key = bytes(range(1, key_size + 1))
    assert encode_key(key) == key


def test_non_ascii_key_uses_raw_bytes() -> None:
    key = "größe".encode("utf-8")
    assert encode_entry(key, 0, 1)[: len(key)] == key


def test_max_uint64_values() -> None:
    max_value = 2**64 - 1
    entry = decode_entry(encode_entry(b"k", max_value, max_value))
    assert entry.offset == max_value
    assert entry.length == max_value


@pytest.mark.parametrize("offset, length", [(-1, 0), (0, -1), (2**64, 0)])
def test_out_of_range_values(offset: int, length: int) -> None:
    with pytest.raises(ValueError, match="unsigned 64-bit"):
        encode_entry(b"k", offset, length)


def test_decode_entry() -> None:
    entry = decode_entry(encode_entry(b"beta", 10, 9))
    assert entry.key_field == b"beta" + b"\x00" * 36
    assert entry.key_bytes == b"beta"
    assert (entry.offset, entry.length) == (10, 9)


def test_decode_entry_wrong_size() -> None:
    with pytest.raises(ValueError, match="must be 56 bytes"):
        decode_entry(b"\x00" * 55)
