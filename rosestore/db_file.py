"""Append-only data files, read and written through standard I/O or mmap."""

from __future__ import annotations

import mmap
import os
from enum import IntEnum
from pathlib import Path
from typing import Union

from .entry import HEADER_SIZE, Entry, InvalidCrcError, StorageError, decode_header

import zlib

PathLike = Union[str, "os.PathLike[str]"]

FILE_PERM = 0o644
DB_FILE_SUFFIXES = ("str", "list", "hash", "set", "zset")


class EmptyEntryError(StorageError):
    """The entry or its key is empty."""


class FileRWMethod(IntEnum):
    """How a data file is read and written."""

    FILE_IO = 0
    MMAP = 1


def db_file_name(data_type: int, file_id: int) -> str:
    """Name of the data file for *data_type* with id *file_id*."""
    return f"{file_id:09d}.data.{DB_FILE_SUFFIXES[data_type]}"


class DBFile:
    """One data file holding encoded entries of a single data type."""

    def __init__(
        self,
        path: PathLike,
        file_id: int,
        method: FileRWMethod,
        block_size: int,
        data_type: int,
    ) -> None:
        self.id = file_id
        self.path = Path(path)
        self.data_type = data_type
        self.method = FileRWMethod(method)
        self.offset = 0
        self.file_path = self.path / db_file_name(data_type, file_id)

        fd = os.open(self.file_path, os.O_CREAT | os.O_RDWR, FILE_PERM)
        self._file = os.fdopen(fd, "r+b")
        self._mmap: mmap.mmap | None = None
        if self.method is FileRWMethod.MMAP:
            try:
                self._file.truncate(block_size)
                self._mmap = mmap.mmap(self._file.fileno(), block_size)
            except (OSError, ValueError):
                self._file.close()
                raise

    def __enter__(self) -> "DBFile":
        return self

    def __exit__(self, *exc) -> None:
        self.close(True)

    def _read_buf(self, offset: int, n: int) -> bytes:
        if self._mmap is not None:
            chunk = self._mmap[offset : offset + n] if offset <= len(self._mmap) else b""
            return chunk.ljust(n, b"\x00")
        self._file.seek(offset)
        data = self._file.read(n)
        if len(data) < n:
            raise EOFError(f"end of file at offset {offset}")
        return data

    def read(self, offset: int) -> Entry:
        """Read the entry at *offset*; raises EOFError past the end of a file."""
        crc, key_size, value_size, extra_size, data_type, mark = decode_header(
            self._read_buf(offset, HEADER_SIZE)
        )
        offset += HEADER_SIZE
        key = self._read_buf(offset, key_size) if key_size else b""
        offset += key_size
        value = self._read_buf(offset, value_size) if value_size else b""
        offset += value_size
        extra = self._read_buf(offset, extra_size) if extra_size else b""

        if zlib.crc32(value) & 0xFFFFFFFF != crc:
            raise InvalidCrcError("storage/entry: invalid crc")
        return Entry(key, value, extra, data_type, mark)

    def write(self, entry: Entry | None) -> None:
        """Write *entry* at the current offset and advance it."""
        if entry is None or not entry.key:
            raise EmptyEntryError("storage/db_file: entry or the Key of entry is empty")
        encoded = entry.encode()
        if self._mmap is not None:
            if self.offset > len(self._mmap):
                raise ValueError("write offset beyond the mapped region")
            room = len(self._mmap) - self.offset
            chunk = encoded[:room]
            self._mmap[self.offset : self.offset + len(chunk)] = chunk
        else:
            self._file.seek(self.offset)
            self._file.write(encoded)
        self.offset += entry.size()

    def sync(self) -> None:
        """Persist written data to stable storage."""
        if self._mmap is not None:
            self._mmap.flush()
        if not self._file.closed:
            self._file.flush()
            os.fsync(self._file.fileno())

    def close(self, sync: bool) -> None:
        """Close the file, persisting data first when *sync* is true."""
        if sync:
            self.sync()
        if self._mmap is not None:
            self._mmap.close()
            self._mmap = None
        self._file.close()


def build(
    path: PathLike, method: FileRWMethod, block_size: int
) -> tuple[dict[int, dict[int, DBFile]], dict[int, int]]:
    """Open the data files in *path*.

    Returns the archived files per data type (keyed by file id) and the id of
    the active (highest-numbered) file per data type.
    """
    ids: dict[int, list[int]] = {t: [] for t in range(len(DB_FILE_SUFFIXES))}
    for name in os.listdir(path):
        if ".data" not in name:
            continue
        parts = name.split(".")
        if len(parts) < 3 or parts[2] not in DB_FILE_SUFFIXES:
            continue
        try:
            file_id = int(parts[0])
        except ValueError:
            file_id = 0
        ids[DB_FILE_SUFFIXES.index(parts[2])].append(file_id)

    archived: dict[int, dict[int, DBFile]] = {}
    active_ids: dict[int, int] = {}
    for data_type, file_ids in ids.items():
        file_ids.sort()
        files: dict[int, DBFile] = {}
        active_id = 0
        if file_ids:
            active_id = file_ids[-1]
            for file_id in file_ids[:-1]:
                files[file_id] = DBFile(path, file_id, method, block_size, data_type)
        archived[data_type] = files
        active_ids[data_type] = active_id
    return archived, active_ids