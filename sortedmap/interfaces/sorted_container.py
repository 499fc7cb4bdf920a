"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import abstractmethod
from typing import Any

from sortedmap.interfaces.range_iterable import RangeIterable

# Marks "no default supplied" so that None stays a legal default.
MISSING: Any = object()


class SortedContainer(RangeIterable):
    """
    Abstract base class for sorted key-value containers.

    Keys are ordered by their own ``<`` operator. Lookups that miss raise
    KeyNotFound unless a default is supplied.

    Implementations:
    - SortedArray: contiguous sorted list, compact and cache friendly
    """

    @abstractmethod
    def put(self, key: Any, value: Any) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key.
        """
        pass

    @abstractmethod
    def get(self, key: Any, default: Any = MISSING) -> Any:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.
            default: Returned on a miss. If omitted, a miss raises.

        Returns:
            The stored value, or ``default``.

        Raises:
            KeyNotFound: The key is absent and no default was supplied.
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> None:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Raises:
            KeyNotFound: The key is absent.
        """
        pass

    @abstractmethod
    def pop(self, key: Any, default: Any = MISSING) -> Any:
        """
        Remove a key-value pair and return its value.

        Args:
            key: The key to remove.
            default: Returned on a miss. If omitted, a miss raises.

        Returns:
            The removed value, or ``default``.

        Raises:
            KeyNotFound: The key is absent and no default was supplied.
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        pass

    @abstractmethod
    def keys(self) -> list[Any]:
        """Return a snapshot list of keys in ascending order."""
        pass

    @abstractmethod
    def values(self) -> list[Any]:
        """Return a snapshot list of values in ascending key order."""
        pass

    @abstractmethod
    def items(self) -> list[tuple[Any, Any]]:
        """Return a snapshot list of (key, value) pairs in ascending key order."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """
        Remove every entry.

        The container must already read as empty before any entry is
        released, since releasing a key or value may call back into it.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Returns:
            The count of entries in the container.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def size_bytes(self) -> int:
        """
        Return the approximate size in bytes.

        Returns:
            Estimated memory held by the container itself, excluding the
            keys and values it shares with callers.
        """
        pass
