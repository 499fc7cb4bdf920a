"""
SortedMap - Dict-like mapping with keys kept in ascending order.
"""

from collections.abc import AsyncIterator, Iterator
from typing import Any

from sortedmap.interfaces.range_iterable import RangeIterable
from sortedmap.interfaces.sorted_container import SortedContainer
from sortedmap.models.exceptions import UsageError
from sortedmap.models.sortedcontainers import SortedArray


class SortedMap(RangeIterable):
    """
    Mapping backed by a SortedContainer.

    Supports:
    - Subscript get/set/delete, ``in`` and ``len``
    - get(key[, default]) and pop(key[, default]) like dict
    - Snapshot keys(), values() and items() in ascending key order
    - Range queries via iterator(start, end), sync and async

    Not thread-safe. Keys must be mutually comparable with ``<``.
    """

    def __init__(self, container: SortedContainer | None = None) -> None:
        """
        Initialize SortedMap.

        Args:
            container: The backing sorted data structure. Defaults to an
                empty SortedArray.
        """
        if container is None:
            container = SortedArray()
        elif not isinstance(container, SortedContainer):
            raise TypeError(
                f"container must be a SortedContainer, got {type(container).__name__}"
            )
        self._container = container

    def __getitem__(self, key: Any) -> Any:
        return self._container.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._container.put(key, value)

    def __delitem__(self, key: Any) -> None:
        self._container.delete(key)

    def __contains__(self, key: Any) -> bool:
        return self._container.has(key)

    def __len__(self) -> int:
        return self._container.size()

    def get(self, *args: Any) -> Any:
        """
        get(key[, default]) -> value for key, else default (None if omitted).
        """
        if len(args) == 1:
            return self._container.get(args[0], None)
        if len(args) == 2:
            return self._container.get(args[0], args[1])
        raise UsageError("get", len(args))

    def pop(self, *args: Any) -> Any:
        """
        pop(key[, default]) -> remove key and return its value.

        If key is absent, default is returned when given, otherwise
        KeyNotFound is raised. Supplying a default never changes whether a
        present key is removed.
        """
        if len(args) == 1:
            return self._container.pop(args[0])
        if len(args) == 2:
            return self._container.pop(args[0], args[1])
        raise UsageError("pop", len(args))

    def keys(self) -> list[Any]:
        return self._container.keys()

    def values(self) -> list[Any]:
        return self._container.values()

    def items(self) -> list[tuple[Any, Any]]:
        return self._container.items()

    def clear(self) -> None:
        self._container.clear()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._container.keys())

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return self._container.iterator(start, end)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self._async_keys(self._container.keys())

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        return self._container.async_iterator(start, end)

    async def _async_keys(self, keys: list[Any]) -> AsyncIterator[Any]:
        for key in keys:
            yield key

    def __repr__(self) -> str:
        body = ", ".join(f"{key}: {value}" for key, value in self._container.items())
        return f"sortedmap({{{body}}})"

    def __sizeof__(self) -> int:
        """Size of the map object and its backing storage, in bytes."""
        return object.__sizeof__(self) + self._container.size_bytes()
