"""Tests for running the aggregation suite through the harness."""

import io

import pytest

from aggbench.benchmark import (
    AggregationBenchmarkConfig,
    AggregationBenchmarkRunner,
    run_multi_size,
    run_single,
)


class TestAggregationBenchmarkConfig:
    """Validate benchmark config."""

    def test_defaults_follow_suite_declarations(self):
        config = AggregationBenchmarkConfig()
        assert config.size == 9000
        assert config.track_allocations is True
        assert config.operations == ("min", "max", "average", "sum")

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            AggregationBenchmarkConfig(size=-5)

    def test_unknown_operation(self):
        with pytest.raises(ValueError):
            AggregationBenchmarkConfig(operations=("median",))

    def test_base_validation_still_applies(self):
        with pytest.raises(ValueError):
            AggregationBenchmarkConfig(num_operations=0)


class TestAggregationBenchmarkRunner:
    """Test measurement of the suite."""

    def test_every_operation_measured(self):
        config = AggregationBenchmarkConfig(
            num_operations=20, warmup_operations=2, size=100, track_allocations=False
        )
        stats = AggregationBenchmarkRunner(config).run()

        assert list(stats.operations) == ["min", "max", "average", "sum"]
        for metrics in stats.operations.values():
            assert len(metrics.latencies_ns) == 20
            assert not metrics.tracks_allocations

    def test_memory_diagnostics(self):
        config = AggregationBenchmarkConfig(
            num_operations=5, warmup_operations=0, size=100, track_allocations=True
        )
        stats = AggregationBenchmarkRunner(config).run()
        for metrics in stats.operations.values():
            assert len(metrics.allocated_bytes) == 5

    def test_operation_subset(self):
        config = AggregationBenchmarkConfig(
            num_operations=3, warmup_operations=0, operations=("sum",)
        )
        stats = AggregationBenchmarkRunner(config).run()
        assert list(stats.operations) == ["sum"]


class TestReports:
    """Test the printed reports."""

    def test_run_single(self):
        stream = io.StringIO()
        config = AggregationBenchmarkConfig(
            num_operations=5, warmup_operations=1, size=50, track_allocations=False
        )
        stats = run_single(config, stream=stream)

        output = stream.getvalue()
        assert "Aggregation Benchmark Results" in output
        assert "Size: 50" in output
        assert "Memory diagnostics: disabled" in output
        for name in ("min", "max", "average", "sum"):
            assert name in output
        assert stats.total_operations == 20

    def test_run_single_with_allocations(self):
        stream = io.StringIO()
        config = AggregationBenchmarkConfig(num_operations=3, warmup_operations=0, size=50)
        run_single(config, stream=stream)

        output = stream.getvalue()
        assert "Memory diagnostics: enabled" in output
        assert "Allocated" in output

    def test_run_multi_size(self):
        stream = io.StringIO()
        config = AggregationBenchmarkConfig(
            num_operations=3, warmup_operations=0, target="cpython3.12"
        )
        results = run_multi_size(config, sizes=(10, 20), stream=stream)

        assert [size for size, _ in results] == [10, 20]
        output = stream.getvalue()
        assert output.count("Aggregation Benchmark Results") == 2
        assert "Size: 10\n" in output
        assert "Size: 20\n" in output
        assert "Comparative Summary (mean latency, target=cpython3.12)" in output
        # Per-size reports come before the comparative table
        assert output.index("Size: 20\n") < output.index("Comparative Summary")
