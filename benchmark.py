#!/usr/bin/env python3
"""
Performance Script for SortedMap

Tests:
1. Sequential insert throughput (append at the end)
2. Random insert throughput (shift cost)
3. Sequential lookup throughput
4. Random lookup throughput
5. Range query performance
6. Mixed workload (read/write/delete)

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
"""

import logging
import os
import random
import statistics
import sys
import time

from sortedmap import SortedMap

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


class PerformanceTest:
    def __init__(self) -> None:
        self.smap = SortedMap()

    def reset(self) -> None:
        """Drop all entries between runs."""
        self.smap.clear()

    @staticmethod
    def generate_key(i: int, prefix: str = "key") -> str:
        """Generate a key with zero-padding for sorting."""
        return f"{prefix}_{i:010d}"

    @staticmethod
    def calculate_stats(latencies: list[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_us": min(latencies) / 1_000,
            "max_us": max(latencies) / 1_000,
            "mean_us": statistics.mean(latencies) / 1_000,
            "p50_us": statistics.median(latencies) / 1_000,
            "p95_us": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000,
            "p99_us": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000,
        }

    def _timed(self, name: str, inputs: list, op) -> dict:
        """Run ``op`` once per input and collect latency stats."""
        print(f"\n{'='*60}")
        print(f"{name} Test: {len(inputs)} operations")
        print(f"{'='*60}")

        latencies = []
        start_time = time.perf_counter_ns()

        for item in inputs:
            op_start = time.perf_counter_ns()
            op(item)
            latencies.append(time.perf_counter_ns() - op_start)

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        results = {
            "test": name,
            "count": len(inputs),
            "elapsed_sec": elapsed,
            "ops_per_sec": len(inputs) / elapsed if elapsed else float("inf"),
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def test_sequential_insert(self, count: int) -> dict:
        keys = [self.generate_key(i) for i in range(count)]
        return self._timed("Sequential Insert", keys, lambda k: self.smap.__setitem__(k, k))

    def test_random_insert(self, count: int) -> dict:
        keys = [self.generate_key(i) for i in range(count)]
        random.shuffle(keys)
        return self._timed("Random Insert", keys, lambda k: self.smap.__setitem__(k, k))

    def test_sequential_read(self, count: int) -> dict:
        keys = [self.generate_key(i) for i in range(count)]
        return self._timed("Sequential Read", keys, self.smap.get)

    def test_random_read(self, count: int, key_range: int) -> dict:
        keys = [self.generate_key(random.randint(0, key_range - 1)) for _ in range(count)]
        return self._timed("Random Read", keys, self.smap.get)

    def test_range_query(self, num_queries: int, range_size: int, total_keys: int) -> dict:
        starts = [random.randint(0, max(total_keys - range_size, 0)) for _ in range(num_queries)]

        def scan(start: int) -> None:
            for _ in self.smap.iterator(
                self.generate_key(start), self.generate_key(start + range_size)
            ):
                pass

        return self._timed(f"Range Query (size {range_size})", starts, scan)

    def test_mixed_workload(self, count: int, read_ratio: float, key_range: int) -> dict:
        keys = [self.generate_key(random.randint(0, key_range - 1)) for _ in range(count)]

        def mixed(key: str) -> None:
            roll = random.random()
            if roll < read_ratio:
                self.smap.get(key)
            elif roll < read_ratio + (1 - read_ratio) / 2:
                self.smap[key] = key
            else:
                self.smap.pop(key, None)

        return self._timed(f"Mixed Workload ({int(read_ratio * 100)}% reads)", keys, mixed)

    @staticmethod
    def print_results(results: dict):
        """Print formatted results."""
        print(f"\nResults for {results['test']}:")
        print(f"  Count:        {results['count']:,}")
        print(f"  Elapsed:      {results['elapsed_sec']:.3f} sec")
        print(f"  Throughput:   {results['ops_per_sec']:,.0f} ops/sec")
        if "p50_us" in results:
            print(
                f"  Latency (us): p50={results['p50_us']:.2f} "
                f"p95={results['p95_us']:.2f} p99={results['p99_us']:.2f} "
                f"max={results['max_us']:.2f}"
            )


def run_tests(count: int) -> list[dict]:
    perf = PerformanceTest()
    results = []

    results.append(perf.test_sequential_insert(count))
    results.append(perf.test_sequential_read(count))
    results.append(perf.test_random_read(count, count))
    results.append(perf.test_range_query(max(count // 100, 1), 100, count))
    logger.info(f"Map holds {len(perf.smap):,} entries, {sys.getsizeof(perf.smap):,} bytes")

    perf.reset()
    results.append(perf.test_random_insert(count))
    results.append(perf.test_mixed_workload(count, 0.8, count))

    print(f"\n{'#'*60}")
    print("Summary")
    print(f"{'#'*60}")
    for result in results:
        print(f"  {result['test']:<35} {result['ops_per_sec']:>14,.0f} ops/sec")
    return results


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_tests(10_000)
    else:
        run_tests(100_000)
