"""
Sorted container implementations.
"""

from sortedmap.models.sortedcontainers.sorted_array import SortedArray

__all__ = ["SortedArray"]
