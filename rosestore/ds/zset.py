"""In-memory sorted sets keyed by name.

Members are ordered by score, and members with equal scores by name.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from dataclasses import dataclass, field
from operator import itemgetter
from typing import Optional

_score_of = itemgetter(0)


@dataclass
class _Members:
    """One sorted set: member scores plus the (score, member) order."""

    scores: dict[str, float] = field(default_factory=dict)
    order: list[tuple[float, str]] = field(default_factory=list)

    def position(self, member: str) -> int:
        return bisect_left(self.order, (self.scores[member], member))

    def insert(self, score: float, member: str) -> None:
        self.scores[member] = score
        insort(self.order, (score, member))

    def discard(self, member: str) -> float:
        """Remove *member* from both views and return its old score."""
        score = self.scores.pop(member)
        self.order.pop(bisect_left(self.order, (score, member)))
        return score


class SortedSet:
    """A collection of sorted sets whose members are strings with float scores."""

    def __init__(self) -> None:
        self._record: dict[str, _Members] = {}

    def zadd(self, key: str, score: float, member: str) -> None:
        """Add *member* with *score*, or move it to *score* if already present."""
        members = self._record.setdefault(key, _Members())
        current = members.scores.get(member)
        if current is not None:
            if current == score:
                return
            members.discard(member)
        members.insert(score, member)

    def zscore(self, key: str, member: str) -> Optional[float]:
        """The score of *member*, or None if it is absent."""
        members = self._record.get(key)
        if members is None:
            return None
        return members.scores.get(member)

    def zcard(self, key: str) -> int:
        """Number of members in the sorted set."""
        members = self._record.get(key)
        return len(members.scores) if members is not None else 0

    def zrank(self, key: str, member: str) -> Optional[int]:
        """Zero-based rank of *member* from the lowest score, or None."""
        members = self._record.get(key)
        if members is None or member not in members.scores:
            return None
        return members.position(member)

    def zrevrank(self, key: str, member: str) -> Optional[int]:
        """Zero-based rank of *member* from the highest score, or None."""
        members = self._record.get(key)
        if members is None or member not in members.scores:
            return None
        return len(members.order) - 1 - members.position(member)

    def zincrby(self, key: str, increment: float, member: str) -> float:
        """Add *increment* to the score of *member* (0 if absent); return the new score."""
        current = self.zscore(key, member)
        if current is not None:
            increment += current
        self.zadd(key, increment, member)
        return increment

    def zrange(self, key: str, start: int, stop: int) -> list[str]:
        """Members between ranks *start* and *stop* inclusive, lowest score first."""
        return [member for member, _ in self._find_range(key, start, stop, False)]

    def zrange_with_scores(
        self, key: str, start: int, stop: int
    ) -> list[tuple[str, float]]:
        """(member, score) pairs between ranks *start* and *stop*, lowest score first."""
        return self._find_range(key, start, stop, False)

    def zrevrange(self, key: str, start: int, stop: int) -> list[str]:
        """Members between ranks *start* and *stop* inclusive, highest score first."""
        return [member for member, _ in self._find_range(key, start, stop, True)]

    def zrevrange_with_scores(
        self, key: str, start: int, stop: int
    ) -> list[tuple[str, float]]:
        """(member, score) pairs between ranks *start* and *stop*, highest score first."""
        return self._find_range(key, start, stop, True)

    def zrem(self, key: str, member: str) -> bool:
        """Remove *member*; return whether it was present."""
        members = self._record.get(key)
        if members is None or member not in members.scores:
            return False
        members.discard(member)
        return True

    def zget_by_rank(self, key: str, rank: int) -> Optional[tuple[str, float]]:
        """(member, score) at *rank* counted from the lowest score, or None."""
        return self._get_by_rank(key, rank, False)

    def zrevget_by_rank(self, key: str, rank: int) -> Optional[tuple[str, float]]:
        """(member, score) at *rank* counted from the highest score, or None."""
        return self._get_by_rank(key, rank, True)

    def zscore_range(
        self, key: str, min_score: float, max_score: float
    ) -> list[tuple[str, float]]:
        """(member, score) pairs with min_score <= score <= max_score, ascending."""
        members = self._record.get(key)
        if members is None or min_score > max_score:
            return []
        order = members.order
        lo = bisect_left(order, min_score, key=_score_of)
        hi = bisect_right(order, max_score, key=_score_of)
        return [(member, score) for score, member in order[lo:hi]]

    def zrevscore_range(
        self, key: str, max_score: float, min_score: float
    ) -> list[tuple[str, float]]:
        """(member, score) pairs with min_score <= score <= max_score, descending."""
        members = self._record.get(key)
        if members is None or max_score < min_score:
            return []
        order = members.order
        lo = bisect_left(order, min_score, key=_score_of)
        hi = bisect_right(order, max_score, key=_score_of)
        return [(member, score) for score, member in reversed(order[lo:hi])]

    def _find_range(
        self, key: str, start: int, stop: int, reverse: bool
    ) -> list[tuple[str, float]]:
        members = self._record.get(key)
        if members is None:
            return []
        length = len(members.order)
        if start < 0:
            start = max(start + length, 0)
        if stop < 0:
            stop += length
        if start > stop or start >= length:
            return []
        stop = min(stop, length - 1)
        if reverse:
            selected = members.order[length - 1 - stop : length - start][::-1]
        else:
            selected = members.order[start : stop + 1]
        return [(member, score) for score, member in selected]

    def _get_by_rank(
        self, key: str, rank: int, reverse: bool
    ) -> Optional[tuple[str, float]]:
        members = self._record.get(key)
        if members is None:
            return None
        length = len(members.order)
        if not 0 <= rank < length:
            return None
        score, member = members.order[length - 1 - rank if reverse else rank]
        return member, score