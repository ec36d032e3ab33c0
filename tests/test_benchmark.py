"""
Tests for the benchmark harness.
"""

import pytest

from benchmark import BenchmarkRunner


class TestBenchmarkRunner:
    """Tests for BenchmarkRunner configuration and results."""

    def test_invalid_count(self):
        """Test that non-positive counts are rejected."""
        with pytest.raises(ValueError, match="count must be positive"):
            BenchmarkRunner(count=0)

    def test_count_too_large(self):
        """Test that oversized counts are rejected."""
        with pytest.raises(ValueError, match="count too large"):
            BenchmarkRunner(count=10_000_001)

    def test_calculate_stats_empty(self):
        """Test stats on no samples."""
        assert BenchmarkRunner.calculate_stats([]) == {}

    def test_calculate_stats(self):
        """Test latency stats conversion from nanoseconds."""
        stats = BenchmarkRunner.calculate_stats([1_000_000, 2_000_000, 3_000_000])

        assert stats["min_ms"] == 1.0
        assert stats["max_ms"] == 3.0
        assert stats["median_ms"] == 2.0

    def test_sequential_insert_is_degenerate(self, capsys):
        """Test that sorted insertion reports a depth equal to the key count."""
        runner = BenchmarkRunner(count=50, seed=1)
        result = runner.test_sequential_insert()

        assert result["count"] == 50
        assert result["depth"] == 50
        assert "Sequential Insert Test" in capsys.readouterr().out

    def test_sequential_insert_past_recursion_limit(self, capsys):
        """Test that a sorted chain deeper than the recursion limit is benchmarked in full."""
        runner = BenchmarkRunner(count=1500, seed=1)
        result = runner.test_sequential_insert()

        assert result["count"] == 1500
        assert result["depth"] == 1500

    def test_run_all(self, capsys):
        """Test a small end-to-end run."""
        runner = BenchmarkRunner(count=200, seed=42)
        results = runner.run_all()

        names = [r["test"] for r in results]
        assert names == ["Random Insert", "Sequential Insert", "Contains", "To Sequence"]
        assert results[0]["depth"] < 200
        assert 0.0 <= results[2]["hit_rate"] <= 1.0
