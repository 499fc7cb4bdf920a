"""
Tests for range and async iteration.
"""

from sortedmap import SortedArray, SortedMap


class TestRangeIteration:
    """Tests for iterator(start, end)."""

    def test_range_iteration(self, sorted_array):
        """Test range iteration."""
        for i in range(10):
            sorted_array.put(f"key{i:02d}", f"value{i}")

        # Range [key03, key07)
        result = list(sorted_array.iterator("key03", "key07"))
        keys = [k for k, v in result]
        assert keys == ["key03", "key04", "key05", "key06"]

    def test_open_bounds(self, scenario_map):
        """Test missing bounds extend to the ends."""
        assert list(scenario_map.iterator()) == [(1, 10), (3, 30), (5, 50)]
        assert list(scenario_map.iterator(start=2)) == [(3, 30), (5, 50)]
        assert list(scenario_map.iterator(end=5)) == [(1, 10), (3, 30)]

    def test_bounds_between_keys(self, scenario_map):
        """Test bounds that are not stored keys."""
        assert list(scenario_map.iterator(0, 4)) == [(1, 10), (3, 30)]
        assert list(scenario_map.iterator(6, 9)) == []
        assert list(scenario_map.iterator(4, 2)) == []

    def test_iterator_is_a_snapshot(self, smap):
        """Test changes after creation are not visible."""
        smap[1] = "a"
        smap[2] = "b"
        it = smap.iterator()

        smap[0] = "z"
        del smap[2]

        assert list(it) == [(1, "a"), (2, "b")]


class TestAsyncIteration:
    """Tests for async iteration (in-memory, no I/O)."""

    async def test_async_iterates_keys(self, scenario_map):
        """Test async for over the map yields keys."""
        keys = [key async for key in scenario_map]
        assert keys == [1, 3, 5]

    async def test_async_range(self, scenario_map):
        """Test async range iterator."""
        pairs = [pair async for pair in scenario_map.async_iterator(2, 6)]
        assert pairs == [(3, 30), (5, 50)]

    async def test_async_engine_iteration(self):
        """Test async for over the engine yields pairs."""
        container = SortedArray()
        for key in ("b", "c", "a"):
            container.put(key, key.upper())

        pairs = [pair async for pair in container]
        assert pairs == [("a", "A"), ("b", "B"), ("c", "C")]

    async def test_async_snapshot(self):
        """Test async iteration is unaffected by concurrent mutation."""
        smap = SortedMap()
        for i in range(5):
            smap[i] = i

        seen = []
        async for key, value in smap.async_iterator():
            seen.append(key)
            smap.pop(key + 1, None)

        assert seen == [0, 1, 2, 3, 4]
        assert smap.keys() == [0]
