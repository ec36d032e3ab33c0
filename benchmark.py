#!/usr/bin/env python3
"""
Performance Test Script for the Binary Search Tree

Tests:
1. Random insertion throughput
2. Sequential insertion throughput (degenerate, right-only chain)
3. Membership query throughput (hits and misses)
4. In-order conversion throughput

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Resulting tree depth
"""

import logging
import os
import random
import statistics
import sys
import time

from bstree import BinarySearchTree

logger = logging.getLogger(__name__)


class BenchmarkRunner:
    # Default number of keys per test
    DEFAULT_COUNT = 10_000

    def __init__(self, count: int = DEFAULT_COUNT, seed: int | None = None) -> None:
        """
        Initialize the benchmark runner.

        Args:
            count: Number of keys per test.
            seed: Seed for the random key order (default: None = unseeded).
        """
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        if count > 10_000_000:
            raise ValueError(
                f"count too large: {count}. Maximum 10,000,000 keys."
            )

        self.count = count
        self._random = random.Random(seed)

    @staticmethod
    def calculate_stats(latencies: list[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_ms": min(latencies) / 1_000_000,
            "max_ms": max(latencies) / 1_000_000,
            "mean_ms": statistics.mean(latencies) / 1_000_000,
            "median_ms": statistics.median(latencies) / 1_000_000,
            "p95_ms": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000_000,
            "p99_ms": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000_000,
        }

    def _timed_inserts(self, tree: BinarySearchTree, keys: list[int]) -> tuple[float, list[int]]:
        latencies = []
        start_time = time.perf_counter_ns()
        for key in keys:
            op_start = time.perf_counter_ns()
            tree.insert(key)
            latencies.append(time.perf_counter_ns() - op_start)
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        return elapsed, latencies

    def test_random_insert(self) -> dict:
        """Test insertion of keys in shuffled order."""
        print(f"\n{'='*60}")
        print(f"Random Insert Test: {self.count} keys")
        print(f"{'='*60}")

        keys = list(range(self.count))
        self._random.shuffle(keys)
        tree = BinarySearchTree()
        elapsed, latencies = self._timed_inserts(tree, keys)

        results = {
            "test": "Random Insert",
            "count": self.count,
            "elapsed_sec": elapsed,
            "ops_per_sec": self.count / elapsed,
            "depth": tree.depth(),
            **self.calculate_stats(latencies),
        }

        self.print_results(results)
        return results

    def test_sequential_insert(self) -> dict:
        """Test insertion of keys in ascending order (no rebalancing)."""
        count = self.count
        print(f"\n{'='*60}")
        print(f"Sequential Insert Test: {count} keys")
        print(f"{'='*60}")

        tree = BinarySearchTree()
        elapsed, latencies = self._timed_inserts(tree, list(range(count)))

        results = {
            "test": "Sequential Insert",
            "count": count,
            "elapsed_sec": elapsed,
            "ops_per_sec": count / elapsed,
            "depth": tree.depth(),
            **self.calculate_stats(latencies),
        }

        self.print_results(results)
        return results

    def test_contains(self) -> dict:
        """Test membership queries, half hits and half misses."""
        print(f"\n{'='*60}")
        print(f"Contains Test: {self.count} queries")
        print(f"{'='*60}")

        # Even keys are stored, odd keys miss
        keys = list(range(0, self.count * 2, 2))
        self._random.shuffle(keys)
        tree = BinarySearchTree(keys)

        queries = [self._random.randrange(self.count * 2) for _ in range(self.count)]
        latencies = []
        hits = 0

        start_time = time.perf_counter_ns()
        for key in queries:
            op_start = time.perf_counter_ns()
            if tree.contains(key):
                hits += 1
            latencies.append(time.perf_counter_ns() - op_start)
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": "Contains",
            "count": self.count,
            "elapsed_sec": elapsed,
            "ops_per_sec": self.count / elapsed,
            "hit_rate": hits / self.count,
            **self.calculate_stats(latencies),
        }

        self.print_results(results)
        return results

    def test_to_sequence(self, repeats: int = 10) -> dict:
        """Test full in-order conversion."""
        print(f"\n{'='*60}")
        print(f"To Sequence Test: {repeats} conversions of {self.count} keys")
        print(f"{'='*60}")

        keys = list(range(self.count))
        self._random.shuffle(keys)
        tree = BinarySearchTree(keys)

        latencies = []
        start_time = time.perf_counter_ns()
        for _ in range(repeats):
            op_start = time.perf_counter_ns()
            tree.to_sequence()
            latencies.append(time.perf_counter_ns() - op_start)
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": "To Sequence",
            "count": repeats,
            "elapsed_sec": elapsed,
            "keys_per_sec": (repeats * self.count) / elapsed,
            **self.calculate_stats(latencies),
        }

        self.print_results(results)
        return results

    def run_all(self) -> list[dict]:
        return [
            self.test_random_insert(),
            self.test_sequential_insert(),
            self.test_contains(),
            self.test_to_sequence(),
        ]

    @staticmethod
    def print_results(results: dict):
        """Print test results in a formatted way."""
        print(f"\nResults:")
        print(f"  Operations: {results.get('count', 'N/A')}")
        print(f"  Elapsed: {results['elapsed_sec']:.4f}s")

        if 'ops_per_sec' in results:
            print(f"  Throughput: {results['ops_per_sec']:.2f} ops/sec")

        if 'keys_per_sec' in results:
            print(f"  Key throughput: {results['keys_per_sec']:.2f} keys/sec")

        if 'hit_rate' in results:
            print(f"  Hit rate: {results['hit_rate']*100:.2f}%")

        if 'depth' in results:
            print(f"  Tree depth: {results['depth']}")

        if 'median_ms' in results:
            print(f"  Latency (p50/p95/p99): {results['median_ms']:.4f}/{results['p95_ms']:.4f}/{results['p99_ms']:.4f} ms")


def run_benchmarks(count: int) -> list[dict]:
    print(f"\n{'#'*60}")
    print(f"# Binary Search Tree Benchmarks ({count} keys)")
    print(f"{'#'*60}")

    runner = BenchmarkRunner(count=count)
    all_results = runner.run_all()
    logger.info(f"Completed {len(all_results)} benchmarks with {count} keys")

    print(f"\n{'#'*60}")
    print(f"# SUMMARY")
    print(f"{'#'*60}")
    for i, result in enumerate(all_results, 1):
        print(f"\n{i}. {result['test']}")
        print(f"   Elapsed: {result['elapsed_sec']:.4f}s")
        if 'depth' in result:
            print(f"   Depth: {result['depth']}")

    return all_results


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_benchmarks(count=1_000)
    else:
        run_benchmarks(count=BenchmarkRunner.DEFAULT_COUNT)
