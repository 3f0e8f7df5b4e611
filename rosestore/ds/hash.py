"""In-memory hash tables keyed by name."""

from __future__ import annotations

from typing import Optional


class Hash:
    """A collection of hash tables mapping field names to byte values."""

    def __init__(self) -> None:
        self._record: dict[str, dict[str, bytes]] = {}

    def hset(self, key: str, field: str, value: bytes) -> int:
        """Set *field* to *value*; return 1 if the field is new, 0 if overwritten."""
        fields = self._record.setdefault(key, {})
        is_new = fields.get(field) is None
        fields[field] = value
        return 1 if is_new else 0

    def hsetnx(self, key: str, field: str, value: bytes) -> int:
        """Set *field* only if it does not exist; return 1 if set, else 0."""
        fields = self._record.setdefault(key, {})
        if field in fields:
            return 0
        fields[field] = value
        return 1

    def hget(self, key: str, field: str) -> Optional[bytes]:
        """The value of *field*, or None."""
        return self._record.get(key, {}).get(field)

    def hgetall(self, key: str) -> list[tuple[str, bytes]]:
        """All (field, value) pairs of the hash."""
        return list(self._record.get(key, {}).items())

    def hdel(self, key: str, field: str) -> int:
        """Remove *field*; return the number of fields removed."""
        fields = self._record.get(key)
        if fields is None or field not in fields:
            return 0
        del fields[field]
        return 1

    def hexists(self, key: str, field: str) -> bool:
        """Whether *field* exists in the hash."""
        return field in self._record.get(key, {})

    def hlen(self, key: str) -> int:
        """Number of fields in the hash."""
        return len(self._record.get(key, {}))

    def hkeys(self, key: str) -> list[str]:
        """All field names of the hash."""
        return list(self._record.get(key, {}))

    def hvals(self, key: str) -> list[bytes]:
        """All values of the hash."""
        return list(self._record.get(key, {}).values())