"""
Ordered mapping backed by a contiguous sorted array.

This package provides a dict-like container that keeps keys in ascending
order:
- m[key] / m.get(key, default) - O(log N) binary search
- m[key] = value - O(log N) search + O(N) list insert
- del m[key] / m.pop(key, default) - O(log N) search + O(N) list delete
- keys() / values() / items() - snapshot lists in key order
- clear() - safe against finalizers that call back into the map
"""

from sortedmap.models.exceptions import KeyNotFound, MapChangedError, UsageError
from sortedmap.models.sorted_map import SortedMap
from sortedmap.models.sortedcontainers import SortedArray

__all__ = ["SortedMap", "SortedArray", "KeyNotFound", "MapChangedError", "UsageError"]
