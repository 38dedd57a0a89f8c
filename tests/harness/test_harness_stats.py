"""Tests for benchmark statistics."""

import math

import numpy as np
import pytest

from aggbench.harness.stats import (
    CONFIDENCE_Z,
    BenchmarkStatistics,
    OperationMetrics,
    OperationSummary,
)


class TestOperationMetrics:
    """Test per-operation sample reduction."""

    def test_empty_summary_is_zero(self):
        summary = OperationMetrics(name="sum").summarize()
        assert summary == OperationSummary("sum", 0, 0.0, 0.0, 0.0, 0.0, 0.0, None)
        assert summary.ops_per_sec == 0.0

    def test_summary_columns(self):
        metrics = OperationMetrics(name="min")
        for latency in range(1, 101):
            metrics.add_latency(latency)

        summary = metrics.summarize()
        stddev = float(np.std(np.arange(1, 101), ddof=1))
        assert summary.count == 100
        assert summary.mean_ns == pytest.approx(50.5)
        assert summary.median_ns == pytest.approx(50.5)
        assert summary.p95_ns == pytest.approx(95.05)
        assert summary.stddev_ns == pytest.approx(stddev)
        assert summary.error_ns == pytest.approx(CONFIDENCE_Z * stddev / math.sqrt(100))
        assert summary.ops_per_sec == pytest.approx(1e9 / 50.5)
        assert summary.allocated_bytes is None

    def test_single_sample_has_no_spread(self):
        metrics = OperationMetrics(name="max")
        metrics.add_latency(42)
        summary = metrics.summarize()
        assert summary.stddev_ns == 0.0
        assert summary.error_ns == 0.0
        assert summary.p95_ns == 42.0

    def test_allocations(self):
        metrics = OperationMetrics(name="average")
        assert not metrics.tracks_allocations
        metrics.add_latency(5)
        metrics.add_allocation(24)
        metrics.add_allocation(32)

        assert metrics.tracks_allocations
        assert metrics.summarize().allocated_bytes == pytest.approx(28.0)


class TestBenchmarkStatistics:
    """Test aggregated statistics."""

    def test_add_and_get_operation(self):
        stats = BenchmarkStatistics()
        metrics = stats.add_operation("sum")
        assert stats.get_operation("sum") is metrics
        assert stats.get_operation("missing") is None

    def test_summaries_skip_empty_operations(self):
        stats = BenchmarkStatistics()
        stats.add_operation("min").add_latency(10)
        stats.add_operation("empty")
        stats.add_operation("sum").add_latency(20)
        assert [summary.name for summary in stats.summaries()] == ["min", "sum"]

    def test_totals_and_throughput(self):
        stats = BenchmarkStatistics()
        for name in ("min", "max"):
            metrics = stats.add_operation(name)
            for _ in range(5):
                metrics.add_latency(100)
        stats.total_time_ns = 1_000_000_000

        assert stats.total_operations == 10
        assert stats.throughput == pytest.approx(10.0)

    def test_zero_time_throughput(self):
        assert BenchmarkStatistics().throughput == 0

    def test_tracks_allocations_if_any_operation_does(self):
        stats = BenchmarkStatistics()
        stats.add_operation("min")
        assert not stats.tracks_allocations
        stats.add_operation("sum").add_allocation(0)
        assert stats.tracks_allocations
