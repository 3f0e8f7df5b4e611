"""Ordered in-memory index keyed by bytes, built on a skip list."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from .entry import Entry

MAX_LEVEL = 18
PROBABILITY = 1 / math.e


@dataclass
class Indexer:
    """Location and metadata of a stored entry."""

    meta: Entry
    file_id: int = 0
    entry_size: int = 0
    offset: int = 0


class _Node:
    __slots__ = ("_forward",)

    def __init__(self, level: int) -> None:
        self._forward: list[Optional[Element]] = [None] * level


class Element(_Node):
    """A key and its value stored in the skip list."""

    __slots__ = ("key", "value")

    def __init__(self, key: bytes, value: Any, level: int) -> None:
        super().__init__(level)
        self.key = key
        self.value = value

    @property
    def next(self) -> Optional["Element"]:
        """The following element in key order, or None at the end."""
        return self._forward[0]

    def __repr__(self) -> str:
        return f"Element(key={self.key!r}, value={self.value!r})"


class SkipList:
    """A skip list mapping unique byte keys to values, kept in key order."""

    def __init__(self, max_level: int = MAX_LEVEL, probability: float = PROBABILITY) -> None:
        self._max_level = max_level
        self._head = _Node(max_level)
        self._rand = random.Random()
        self._prob_table = [probability**i for i in range(max_level)]
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Element]:
        node = self.front()
        while node is not None:
            yield node
            node = node.next

    def front(self) -> Optional[Element]:
        """The element with the smallest key, or None if the list is empty."""
        return self._head._forward[0]

    def _back_nodes(self, key: bytes) -> list[_Node]:
        prev: _Node = self._head
        prevs: list[_Node] = [self._head] * self._max_level
        for level in reversed(range(self._max_level)):
            nxt = prev._forward[level]
            while nxt is not None and key > nxt.key:
                prev = nxt
                nxt = nxt._forward[level]
            prevs[level] = prev
        return prevs

    def _random_level(self) -> int:
        r = self._rand.random()
        level = 1
        while level < self._max_level and r < self._prob_table[level]:
            level += 1
        return level

    def put(self, key: bytes, value: Any) -> Element:
        """Store *value* under *key*, replacing the value if the key exists."""
        prevs = self._back_nodes(key)
        element = prevs[0]._forward[0]
        if element is not None and element.key == key:
            element.value = value
            return element

        element = Element(key, value, self._random_level())
        for level in range(len(element._forward)):
            element._forward[level] = prevs[level]._forward[level]
            prevs[level]._forward[level] = element
        self._len += 1
        return element

    def get(self, key: bytes) -> Optional[Element]:
        """The element stored under *key*, or None."""
        element = self._back_nodes(key)[0]._forward[0]
        if element is not None and element.key == key:
            return element
        return None

    def exist(self, key: bytes) -> bool:
        """Whether *key* is stored."""
        return self.get(key) is not None

    def remove(self, key: bytes) -> Optional[Element]:
        """Remove *key* and return its element, or None if it was absent."""
        prevs = self._back_nodes(key)
        element = prevs[0]._forward[0]
        if element is None or element.key != key:
            return None
        for level, nxt in enumerate(element._forward):
            prevs[level]._forward[level] = nxt
        self._len -= 1
        return element

    def foreach(self, fn: Callable[[Element], bool]) -> None:
        """Call *fn* on each element in order until it returns False."""
        for element in self:
            if not fn(element):
                break

    def find_prefix(self, prefix: bytes) -> Optional[Element]:
        """The first element whose key is not below *prefix*; the front element if none is."""
        element = self._back_nodes(prefix)[0]._forward[0]
        if element is None:
            return self.front()
        return element