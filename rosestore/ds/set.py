"""In-memory sets of byte members keyed by name."""

from __future__ import annotations

import random


class Set:
    """A collection of sets whose members are byte strings."""

    def __init__(self) -> None:
        # dicts keep insertion order, giving stable iteration.
        self._record: dict[str, dict[bytes, None]] = {}

    def sadd(self, key: str, member: bytes) -> int:
        """Add *member* to the set; return the set's size afterwards."""
        members = self._record.setdefault(key, {})
        members[member] = None
        return len(members)

    def spop(self, key: str, count: int) -> list[bytes]:
        """Remove and return up to *count* random members."""
        members = self._record.get(key)
        if members is None or count <= 0:
            return []
        popped = random.sample(list(members), min(count, len(members)))
        for member in popped:
            del members[member]
        return popped

    def sismember(self, key: str, member: bytes) -> bool:
        """Whether *member* belongs to the set."""
        return member in self._record.get(key, {})

    def srandmember(self, key: str, count: int) -> list[bytes]:
        """Random members without removing them.

        A positive *count* gives up to *count* distinct members; a negative
        one gives exactly ``-count`` members, possibly repeated.
        """
        members = self._record.get(key)
        if not members or count == 0:
            return []
        pool = list(members)
        if count > 0:
            return random.sample(pool, min(count, len(pool)))
        return random.choices(pool, k=-count)

    def srem(self, key: str, member: bytes) -> bool:
        """Remove *member*; return whether it was present."""
        members = self._record.get(key)
        if members is None or member not in members:
            return False
        del members[member]
        return True

    def smove(self, src: str, dst: str, member: bytes) -> bool:
        """Move *member* from *src* to *dst*; return whether it was moved."""
        source = self._record.get(src)
        if source is None or member not in source:
            return False
        destination = self._record.setdefault(dst, {})
        del source[member]
        destination[member] = None
        return True

    def scard(self, key: str) -> int:
        """Number of members of the set."""
        return len(self._record.get(key, {}))

    def smembers(self, key: str) -> list[bytes]:
        """All members of the set."""
        return list(self._record.get(key, {}))

    def sunion(self, *keys: str) -> list[bytes]:
        """Members of the union of all given sets."""
        union: dict[bytes, None] = {}
        for key in keys:
            union.update(self._record.get(key, {}))
        return list(union)

    def sdiff(self, *keys: str) -> list[bytes]:
        """Members of the first set that are in none of the others."""
        if not keys:
            raise ValueError("sdiff needs at least one key")
        first, *others = keys
        return [
            member
            for member in self._record.get(first, {})
            if not any(self.sismember(other, member) for other in others)
        ]