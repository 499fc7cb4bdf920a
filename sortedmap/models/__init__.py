"""
Data models for the sorted map.
"""

from sortedmap.models.entry import Entry
from sortedmap.models.exceptions import KeyNotFound, MapChangedError, UsageError
from sortedmap.models.sorted_map import SortedMap

__all__ = [
    "Entry",
    "KeyNotFound",
    "MapChangedError",
    "UsageError",
    "SortedMap",
]
