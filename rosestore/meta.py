"""Extra database information persisted between sessions."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class DBMeta:
    """Write offsets of the active file of each data type."""

    active_write_off: dict[int, int] = field(default_factory=dict)

    def store(self, path: PathLike) -> None:
        """Write the meta information to *path* as JSON."""
        payload = {
            "active_write_off": {str(k): v for k, v in self.active_write_off.items()}
        }
        data = json.dumps(payload, sort_keys=True, separators=(",", ":"))
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(data)
        os.chmod(path, 0o600)


def load_meta(path: PathLike) -> DBMeta:
    """Load meta information from *path*; missing or unreadable data yields an empty meta."""
    meta = DBMeta()
    try:
        with open(path, "rb") as fh:
            raw = json.loads(fh.read())
        offsets = raw.get("active_write_off") or {}
        meta.active_write_off = {int(k): int(v) for k, v in offsets.items()}
    except (OSError, ValueError, TypeError, AttributeError):
        pass
    return meta