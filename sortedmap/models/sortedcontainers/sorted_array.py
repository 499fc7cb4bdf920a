"""
Sorted array implementation for sorted key-value storage.

Entries live in one contiguous list kept in ascending key order.
Lookups are O(log N) comparisons; inserts and deletes are O(N) list shifts.
"""

import logging
import sys
from collections.abc import AsyncIterator, Iterator
from typing import Any

from sortedmap.interfaces.sorted_container import MISSING, SortedContainer
from sortedmap.models.entry import Entry
from sortedmap.models.exceptions import KeyNotFound, MapChangedError

logger = logging.getLogger(__name__)


class SortedArray(SortedContainer):
    """
    Sorted array implementation of SortedContainer.

    Properties maintained:
    1. Entries are strictly ascending by key
    2. No two stored keys compare equal
    3. Each key and value is referenced exactly once by the container

    Key comparisons run user code, which may re-enter this container.
    Every structural change bumps a modification counter; a search whose
    comparisons changed the counter is discarded and repeated, so no
    position computed against an older list is ever committed. clear()
    detaches the list before releasing it.
    """

    # Searches retried before giving up on a comparator that keeps mutating
    MAX_SEARCH_ATTEMPTS = 8

    def __init__(self) -> None:
        self._items: list[Entry] = []
        self._mutations: int = 0

    def put(self, key: Any, value: Any) -> None:
        """Insert or update a key-value pair. O(N)"""
        pos, found = self._search(key)
        items = self._items
        if found:
            entry = items[pos]
            old_value = entry.value
            entry.value = value
            # Released after the entry is consistent again
            del old_value
        else:
            items.insert(pos, Entry(key=key, value=value))
            self._mutations += 1

    def get(self, key: Any, default: Any = MISSING) -> Any:
        """Retrieve value by key. O(log N)"""
        pos, found = self._search(key)
        if found:
            return self._items[pos].value
        if default is not MISSING:
            return default
        raise KeyNotFound(key)

    def delete(self, key: Any) -> None:
        """Remove a key-value pair. O(N)"""
        pos, found = self._search(key)
        if not found:
            raise KeyNotFound(key)
        self._mutations += 1
        del self._items[pos]

    def pop(self, key: Any, default: Any = MISSING) -> Any:
        """Remove a key-value pair and return its value. O(N)"""
        pos, found = self._search(key)
        if not found:
            if default is not MISSING:
                return default
            raise KeyNotFound(key)
        self._mutations += 1
        return self._items.pop(pos).value

    def has(self, key: Any) -> bool:
        return self._search(key)[1]

    def keys(self) -> list[Any]:
        return [entry.key for entry in self._items]

    def values(self) -> list[Any]:
        return [entry.value for entry in self._items]

    def items(self) -> list[tuple[Any, Any]]:
        return [entry.as_tuple() for entry in self._items]

    def clear(self) -> None:
        """Remove all entries, detaching the list before releasing it."""
        # Releasing an entry may run finalizers that call back into this
        # container, so it has to be empty before the first release.
        detached = self._items
        self._items = []
        self._mutations += 1
        logger.debug(f"Detached {len(detached)} entries from sorted array")
        del detached

    def size(self) -> int:
        return len(self._items)

    def size_bytes(self) -> int:
        items = self._items
        return (
            sys.getsizeof(self)
            + sys.getsizeof(items)
            + sum(sys.getsizeof(entry) for entry in items)
        )

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return _RangeIterator(self._snapshot(start, end))

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        return _AsyncRangeIterator(self._snapshot(start, end))

    def _locate(self, key: Any) -> int:
        """
        Lower-bound search: first index whose key is not less than ``key``.

        The list length is re-read before each access because a comparison
        may shrink the list. If a comparison mutates the container the
        result is stale; callers detect that through the modification
        counter and search again.
        """
        items = self._items
        lo = 0
        hi = len(items)
        while lo < hi:
            mid = (lo + hi) // 2
            if mid >= len(items):
                hi = len(items)
                continue
            if items[mid].key_lessthan(key):
                lo = mid + 1
            else:
                hi = mid
        return lo

    def _search(self, key: Any) -> tuple[int, bool]:
        """
        Locate ``key`` in the current list.

        Returns:
            (position, found), computed without any intervening mutation,
            so ``position`` is the correct insertion point for
            ``self._items`` on return.

        Raises:
            MapChangedError: Every attempt was invalidated by a comparison
                that mutated the container.
        """
        for _ in range(self.MAX_SEARCH_ATTEMPTS):
            stamp = self._mutations
            pos = self._locate(key)
            items = self._items
            found = pos < len(items) and items[pos].key_equals(key)
            if self._mutations == stamp:
                return pos, found
        raise MapChangedError(key, self.MAX_SEARCH_ATTEMPTS)

    def _snapshot(self, start: Any | None, end: Any | None) -> list[tuple[Any, Any]]:
        """Copy the pairs in [start, end) as they are right now."""
        for _ in range(self.MAX_SEARCH_ATTEMPTS):
            stamp = self._mutations
            start_idx = 0 if start is None else self._locate(start)
            end_idx = len(self._items) if end is None else self._locate(end)
            if self._mutations == stamp:
                return [entry.as_tuple() for entry in self._items[start_idx:end_idx]]
        raise MapChangedError(start if start is not None else end, self.MAX_SEARCH_ATTEMPTS)


class _RangeIterator(Iterator[tuple[Any, Any]]):
    """Iterator over a snapshot of sorted array pairs."""

    def __init__(self, pairs: list[tuple[Any, Any]]) -> None:
        self._pairs = pairs
        self._pos = 0

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if self._pos >= len(self._pairs):
            raise StopIteration

        result = self._pairs[self._pos]
        self._pos += 1
        return result


class _AsyncRangeIterator(AsyncIterator[tuple[Any, Any]]):
    """Async iterator over a snapshot of sorted array pairs (in-memory, no I/O)."""

    def __init__(self, pairs: list[tuple[Any, Any]]) -> None:
        self._pairs = pairs
        self._pos = 0

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        if self._pos >= len(self._pairs):
            raise StopAsyncIteration

        result = self._pairs[self._pos]
        self._pos += 1
        return result
