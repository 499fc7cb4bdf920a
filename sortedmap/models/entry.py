"""
Entry - A single key-value pair and the key ordering policy.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Entry:
    """
    One (key, value) slot in a sorted container.

    The key is never rebound once stored; updates replace the value only.

    Ordering is derived from the keys' own ``<``. Identity short-circuits
    both checks so an expensive or impure comparison is skipped when the
    caller passes the stored key object itself.
    """

    key: Any
    value: Any

    def key_lessthan(self, key: Any) -> bool:
        """Return True if the stored key sorts strictly before ``key``."""
        if self.key is key:
            return False
        return bool(self.key < key)

    def key_equals(self, key: Any) -> bool:
        """
        Return True if the stored key is equal to ``key``.

        Only valid at a lower-bound position, where the stored key is
        already known not to be less than ``key``.
        """
        if self.key is key:
            return True
        return not (key < self.key)

    def as_tuple(self) -> tuple[Any, Any]:
        return (self.key, self.value)
