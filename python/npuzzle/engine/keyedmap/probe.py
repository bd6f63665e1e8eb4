"""Hash map with open addressing and linear probing."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, MutableMapping
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# Marks a slot whose entry was removed; probing continues past it.
_AVAILABLE = object()


class ProbeHashMap(MutableMapping, Generic[K, V]):
    """Mapping keyed by value equality and ``hash``.

    Capacity is a power of two and doubles before the table is more than
    half full (tombstones included), so probe runs stay short.
    """

    _MIN_CAPACITY = 16

    def __init__(self, capacity: int = _MIN_CAPACITY) -> None:
        cap = self._MIN_CAPACITY
        while cap < capacity:
            cap *= 2
        self._table: list[object] = [None] * cap
        self._size = 0
        self._used = 0  # live entries + tombstones

    # -- probing --------------------------------------------------------------

    def _find_slot(self, key: K) -> tuple[bool, int]:
        """Return ``(found, index)`` for *key*.

        When the key is absent, ``index`` is the first reusable slot on the
        probe path (a tombstone if one was passed, else the empty slot).
        """
        table = self._table
        mask = len(table) - 1
        j = hash(key) & mask
        first_free = -1
        while True:
            slot = table[j]
            if slot is None:
                return False, (j if first_free == -1 else first_free)
            if slot is _AVAILABLE:
                if first_free == -1:
                    first_free = j
            elif slot[0] == key:  # type: ignore[index]
                return True, j
            j = (j + 1) & mask

    def _resize(self, capacity: int) -> None:
        old = [s for s in self._table if s is not None and s is not _AVAILABLE]
        self._table = [None] * capacity
        self._size = 0
        self._used = 0
        for k, v in old:  # type: ignore[misc]
            self[k] = v

    # -- mapping protocol -----------------------------------------------------

    def __getitem__(self, key: K) -> V:
        found, j = self._find_slot(key)
        if not found:
            raise KeyError(key)
        return self._table[j][1]  # type: ignore[index]

    def __setitem__(self, key: K, value: V) -> None:
        found, j = self._find_slot(key)
        if found:
            self._table[j] = (key, value)
            return
        if self._table[j] is None:
            self._used += 1
        self._table[j] = (key, value)
        self._size += 1
        if 2 * self._used > len(self._table):
            # Grow only when live entries need it; otherwise just purge tombstones.
            capacity = len(self._table)
            if 4 * self._size > capacity:
                capacity *= 2
            self._resize(capacity)

    def __delitem__(self, key: K) -> None:
        found, j = self._find_slot(key)
        if not found:
            raise KeyError(key)
        self._table[j] = _AVAILABLE
        self._size -= 1

    def __contains__(self, key: object) -> bool:
        return self._find_slot(key)[0]  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        for slot in self._table:
            if slot is not None and slot is not _AVAILABLE:
                yield slot[0]  # type: ignore[index]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"ProbeHashMap({{{items}}})"
