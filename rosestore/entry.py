"""On-disk entry record and its binary encoding."""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass
from enum import IntEnum

# crc32, key size, value size, extra size (uint32 each), type, mark (uint16 each)
_HEADER = struct.Struct(">IIIIHH")
HEADER_SIZE = _HEADER.size


class StorageError(Exception):
    """Base error for the storage layer."""


class InvalidEntryError(StorageError):
    """The entry is empty or malformed."""


class InvalidCrcError(StorageError):
    """The stored checksum does not match the value."""


class DataType(IntEnum):
    """Kinds of value a record belongs to."""

    STRING = 0
    LIST = 1
    HASH = 2
    SET = 3
    ZSET = 4


@dataclass
class Entry:
    """A single record: key, value, extra info, data type and operation mark."""

    key: bytes
    value: bytes = b""
    extra: bytes = b""
    data_type: int = DataType.STRING
    mark: int = 0

    def size(self) -> int:
        """Total encoded size in bytes."""
        return HEADER_SIZE + len(self.key) + len(self.value) + len(self.extra)

    def encode(self) -> bytes:
        """Encode the entry; raises InvalidEntryError if the key is empty."""
        if not self.key:
            raise InvalidEntryError("storage/entry: invalid entry")
        crc = zlib.crc32(self.value) & 0xFFFFFFFF
        header = _HEADER.pack(
            crc,
            len(self.key),
            len(self.value),
            len(self.extra),
            self.data_type,
            self.mark,
        )
        return header + self.key + self.value + self.extra


def decode_header(buf: bytes) -> tuple[int, int, int, int, int, int]:
    """Decode a header into (crc, key_size, value_size, extra_size, data_type, mark)."""
    if len(buf) < HEADER_SIZE:
        raise InvalidEntryError("storage/entry: invalid entry")
    return _HEADER.unpack_from(buf)