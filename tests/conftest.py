"""
Shared pytest fixtures for sorted map tests.
"""

import pytest

from sortedmap import SortedArray, SortedMap


@pytest.fixture
def sorted_array():
    """Provide a fresh SortedArray instance."""
    return SortedArray()


@pytest.fixture
def smap():
    """Provide a fresh SortedMap instance."""
    return SortedMap()


@pytest.fixture
def scenario_map():
    """Provide a map filled with keys 5, 1, 3 (in that order), value = key * 10."""
    m = SortedMap()
    for key in (5, 1, 3):
        m[key] = key * 10
    return m


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [
        ("key1", "value1"),
        ("key2", "value2"),
        ("key3", "value3"),
    ]


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [(f"key{i:04d}", f"value{i}") for i in range(1000)]
