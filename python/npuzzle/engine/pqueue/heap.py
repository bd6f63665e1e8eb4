"""Binary-heap priority queue with locators for in-place key updates."""

from __future__ import annotations

import itertools
from typing import Generic, TypeVar

from npuzzle.models.exceptions import EmptyQueueError

K = TypeVar("K")
V = TypeVar("V")


class Locator(Generic[K, V]):
    """Handle to one queue entry.

    ``index`` tracks the entry's current slot in the heap and is rewritten
    on every swap, so the handle stays valid while the entry moves.
    """

    __slots__ = ("key", "value", "index", "_seq")

    def __init__(self, key: K, value: V, index: int, seq: int) -> None:
        self.key = key
        self.value = value
        self.index = index
        self._seq = seq

    def __repr__(self) -> str:
        return f"Locator(key={self.key!r}, value={self.value!r})"


class HeapAdaptablePriorityQueue(Generic[K, V]):
    """Min-oriented priority queue supporting ``replace_key`` and ``remove``.

    Entries with equal keys leave the queue in insertion order.
    """

    def __init__(self) -> None:
        self._data: list[Locator[K, V]] = []
        self._counter = itertools.count()

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def min(self) -> tuple[K, V]:
        if not self._data:
            raise EmptyQueueError("Priority queue is empty.")
        top = self._data[0]
        return top.key, top.value

    # -- updates --------------------------------------------------------------

    def insert(self, key: K, value: V) -> Locator[K, V]:
        """Add an entry and return its locator."""
        loc = Locator(key, value, len(self._data), next(self._counter))
        self._data.append(loc)
        self._upheap(len(self._data) - 1)
        return loc

    def remove_min(self) -> tuple[K, V]:
        if not self._data:
            raise EmptyQueueError("Priority queue is empty.")
        self._swap(0, len(self._data) - 1)
        loc = self._data.pop()
        loc.index = -1
        if self._data:
            self._downheap(0)
        return loc.key, loc.value

    def replace_key(self, loc: Locator[K, V], key: K) -> None:
        """Change the key of the entry at *loc* and restore heap order."""
        j = self._validate(loc)
        loc.key = key
        self._bubble(j)

    def replace_value(self, loc: Locator[K, V], value: V) -> None:
        self._validate(loc)
        loc.value = value

    def remove(self, loc: Locator[K, V]) -> tuple[K, V]:
        """Remove the entry at *loc* and return its ``(key, value)``."""
        j = self._validate(loc)
        last = len(self._data) - 1
        if j == last:
            self._data.pop()
        else:
            self._swap(j, last)
            self._data.pop()
            self._bubble(j)
        loc.index = -1
        return loc.key, loc.value

    # -- heap maintenance -----------------------------------------------------

    def _validate(self, loc: Locator[K, V]) -> int:
        if not isinstance(loc, Locator):
            raise TypeError("Invalid locator type.")
        j = loc.index
        if not (0 <= j < len(self._data) and self._data[j] is loc):
            raise ValueError("Invalid locator.")
        return j

    def _less(self, i: int, j: int) -> bool:
        a, b = self._data[i], self._data[j]
        return (a.key, a._seq) < (b.key, b._seq)

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]
        data[i].index = i
        data[j].index = j

    def _bubble(self, j: int) -> None:
        if j > 0 and self._less(j, (j - 1) // 2):
            self._upheap(j)
        else:
            self._downheap(j)

    def _upheap(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(j, parent)
            j = parent

    def _downheap(self, j: int) -> None:
        size = len(self._data)
        while True:
            left = 2 * j + 1
            if left >= size:
                break
            child = left
            right = left + 1
            if right < size and self._less(right, left):
                child = right
            if not self._less(child, j):
                break
            self._swap(j, child)
            j = child
