"""In-memory doubly ended lists of byte values keyed by name."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from itertools import islice
from typing import Optional


class InsertOption(IntEnum):
    """Where linsert places the new value relative to the pivot."""

    BEFORE = 0
    AFTER = 1


class List:
    """A collection of lists whose elements are byte strings.

    Alongside each list a set of its values is kept so that membership
    checks do not need to walk the list.
    """

    def __init__(self) -> None:
        self._record: dict[str, deque[bytes]] = {}
        self._values: dict[str, set[bytes]] = {}

    def lpush(self, key: str, *args: bytes) -> int:
        """Push each value at the head in turn; return the new length."""
        return self._push(True, key, args)

    def rpush(self, key: str, *args: bytes) -> int:
        """Push each value at the tail in turn; return the new length."""
        return self._push(False, key, args)

    def lpop(self, key: str) -> Optional[bytes]:
        """Remove and return the first value, or None if the list is empty."""
        return self._pop(True, key)

    def rpop(self, key: str) -> Optional[bytes]:
        """Remove and return the last value, or None if the list is empty."""
        return self._pop(False, key)

    def lindex(self, key: str, index: int) -> Optional[bytes]:
        """The value at *index* (negative counts from the tail), or None."""
        position = self._valid_index(key, index)
        if position is None:
            return None
        return self._record[key][position]

    def lrem(self, key: str, value: bytes, count: int) -> int:
        """Remove occurrences of *value* and return how many were removed.

        A positive *count* removes that many from the head, a negative one
        that many from the tail, and zero removes them all.
        """
        items = self._record.get(key)
        if items is None:
            return 0

        if count == 0:
            kept = [item for item in items if item != value]
        else:
            remaining = abs(count)
            source = items if count > 0 else reversed(items)
            kept = []
            for item in source:
                if remaining and item == value:
                    remaining -= 1
                    continue
                kept.append(item)
            if count < 0:
                kept.reverse()

        removed = len(items) - len(kept)
        items.clear()
        items.extend(kept)

        seen = self._values.get(key)
        if seen is not None:
            seen.discard(value)
        return removed

    def linsert(
        self, key: str, option: InsertOption, pivot: bytes, value: bytes
    ) -> int:
        """Insert *value* before or after the first *pivot*.

        Returns the new length, or -1 if the pivot is not found.
        """
        items = self._record.get(key)
        if items is None:
            return -1
        try:
            position = items.index(pivot)
        except ValueError:
            return -1

        option = InsertOption(option)
        if option is InsertOption.BEFORE:
            items.insert(position, value)
        else:
            items.insert(position + 1, value)

        self._values.setdefault(key, set()).add(value)
        return len(items)

    def lset(self, key: str, index: int, value: bytes) -> bool:
        """Replace the value at *index*; return whether the index was valid."""
        position = self._valid_index(key, index)
        if position is None:
            return False

        items = self._record[key]
        seen = self._values.setdefault(key, set())
        seen.discard(items[position])
        items[position] = value
        seen.add(value)
        return True

    def lrange(self, key: str, start: int, end: int) -> list[bytes]:
        """Values between *start* and *end* inclusive; negative indexes count from the tail."""
        items = self._record.get(key)
        if not items:
            return []

        length = len(items)
        start, end = self._handle_index(length, start, end)
        if start > end or start >= length:
            return []
        return list(islice(items, start, end + 1))

    def ltrim(self, key: str, start: int, end: int) -> bool:
        """Keep only the values between *start* and *end* inclusive.

        Returns False if the list is missing or empty or the range already
        covers the whole list, True otherwise.
        """
        items = self._record.get(key)
        if not items:
            return False

        length = len(items)
        start, end = self._handle_index(length, start, end)

        if start <= 0 and end >= length - 1:
            return False

        if start > end or start >= length:
            self._record[key] = deque()
            self._values[key] = set()
            return True

        kept = list(islice(items, start, end + 1))
        if end - start + 1 < (length >> 1):
            self._values[key] = set(kept)
        else:
            seen = self._values.get(key)
            if seen is not None:
                for item in islice(items, 0, start):
                    seen.discard(item)
                for item in islice(items, end + 1, None):
                    seen.discard(item)
        self._record[key] = deque(kept)
        return True

    def llen(self, key: str) -> int:
        """Number of values in the list; 0 if it does not exist."""
        return len(self._record.get(key, ()))

    def lkey_exists(self, key: str) -> bool:
        """Whether a list was ever created under *key*."""
        return key in self._record

    def lval_exists(self, key: str, value: bytes) -> bool:
        """Whether *value* is recorded as present in the list."""
        return value in self._values.get(key, ())

    def _push(self, front: bool, key: str, values: tuple[bytes, ...]) -> int:
        items = self._record.setdefault(key, deque())
        seen = self._values.setdefault(key, set())
        for value in values:
            if front:
                items.appendleft(value)
            else:
                items.append(value)
            seen.add(value)
        return len(items)

    def _pop(self, front: bool, key: str) -> Optional[bytes]:
        items = self._record.get(key)
        if not items:
            return None
        value = items.popleft() if front else items.pop()
        seen = self._values.get(key)
        if seen is not None:
            seen.discard(value)
        return value

    def _valid_index(self, key: str, index: int) -> Optional[int]:
        items = self._record.get(key)
        if not items:
            return None
        length = len(items)
        if index < 0:
            index += length
        if 0 <= index < length:
            return index
        return None

    @staticmethod
    def _handle_index(length: int, start: int, end: int) -> tuple[int, int]:
        if start < 0:
            start += length
        if end < 0:
            end += length
        if start < 0:
            start = 0
        if end >= length:
            end = length - 1
        return start, end