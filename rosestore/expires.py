"""Persistence of the key expiry dictionary."""

from __future__ import annotations

import os
import struct
from collections.abc import Mapping
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

# key size (uint32), deadline (uint64)
_HEAD = struct.Struct(">IQ")


def _key_bytes(key: str) -> bytes:
    return key.encode("utf-8", "surrogateescape")


def save_expires(expires: Mapping[str, int], path: PathLike) -> None:
    """Write every key and its deadline to *path*."""
    with open(path, "wb") as fh:
        for key, deadline in expires.items():
            raw = _key_bytes(key)
            fh.write(_HEAD.pack(len(raw), deadline & 0xFFFFFFFFFFFFFFFF))
            fh.write(raw)
    os.chmod(path, 0o600)


def load_expires(path: PathLike) -> dict[str, int]:
    """Read the expiry dictionary from *path*; a missing file gives an empty dict."""
    expires: dict[str, int] = {}
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError:
        return expires

    offset = 0
    while offset + _HEAD.size <= len(data):
        key_size, deadline = _HEAD.unpack_from(data, offset)
        start = offset + _HEAD.size
        end = start + key_size
        if end > len(data):
            break
        key = data[start:end].decode("utf-8", "surrogateescape")
        expires[key] = deadline & 0xFFFFFFFF
        offset = end
    return expires