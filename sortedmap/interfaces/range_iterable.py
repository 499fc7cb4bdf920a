"""
RangeIterable protocol for data structures that support range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for data structures that support iteration over a range of keys.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async range-bounded iteration via async_iterator(start, end)

    Every iterator walks a snapshot taken when it is created, so mutating
    the container while iterating is allowed and is not reflected.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over the container in sorted order."""
        pass

    @abstractmethod
    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        """
        Return an iterator over key-value pairs in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding (key, value) tuples in sorted order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over the container in sorted order."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        """
        Return an async iterator over key-value pairs in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            AsyncIterator yielding (key, value) tuples in sorted order.
        """
        pass
