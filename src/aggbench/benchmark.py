"""Aggregation benchmark built on the harness.

Each run measures the suite's min, max, average and sum methods over the
integers 1..size and prints one report per size; sweeps over several sizes
finish with a comparative table of mean latencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import TextIO

from aggbench.harness import (
    BaseBenchmarkConfig,
    BenchmarkReporter,
    BenchmarkRunner,
    BenchmarkStatistics,
    ComparativeReporter,
    MultiSizeBenchmarkRunner,
)
from aggbench.logging import Logger
from aggbench.suite import AggregationBenchmarks

REPORT_TITLE = "Aggregation Benchmark Results"

# Sizes swept by --multi-size
MULTI_SIZES: tuple[int, ...] = (100, 1_000, 9_000, 100_000)


@dataclass
class AggregationBenchmarkConfig(BaseBenchmarkConfig):
    """One (target, size) measurement.

    Args:
        size: Length of the 1..size dataset.
        target: Runtime name shown in reports.
        operations: Suite methods to measure, in order.
    """

    size: int = AggregationBenchmarks.SIZES[0]
    track_allocations: bool = AggregationBenchmarks.MEMORY_DIAGNOSER
    target: str = "current"
    operations: tuple[str, ...] = field(
        default_factory=lambda: AggregationBenchmarks.BENCHMARKS
    )

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.size < 0:
            raise ValueError(f"Invalid size; expected >=0 but got {self.size}")
        unknown = set(self.operations) - set(AggregationBenchmarks.BENCHMARKS)
        if unknown:
            raise ValueError(
                f"Invalid operations; expected subset of "
                f"{AggregationBenchmarks.BENCHMARKS} but got {sorted(unknown)}"
            )


class AggregationBenchmarkRunner(BenchmarkRunner[AggregationBenchmarkConfig]):
    def _create_subject(self) -> AggregationBenchmarks:
        # The dataset is built once; measured calls only read it
        suite = AggregationBenchmarks(size=self.config.size)
        suite.setup()
        return suite

    def _run_benchmark_suite(self, subject: AggregationBenchmarks) -> None:
        for name in self.config.operations:
            self.measure_operation(name, getattr(subject, name))


class MultiSizeAggregationRunner(MultiSizeBenchmarkRunner[AggregationBenchmarkConfig]):
    def _create_runner(self, size: int) -> AggregationBenchmarkRunner:
        return AggregationBenchmarkRunner(replace(self.base_config, size=size))

    def _get_key_operations(self) -> list[str]:
        return list(self.base_config.operations)


def _print_report(
    config: AggregationBenchmarkConfig,
    stats: BenchmarkStatistics,
    stream: TextIO | None,
) -> None:
    reporter = BenchmarkReporter(
        REPORT_TITLE,
        {
            "Target": config.target,
            "Size": config.size,
            "Memory diagnostics": "enabled" if config.track_allocations else "disabled",
        },
        stream=stream,
    )
    reporter.print_full_report(stats, warmup=config.warmup_operations)


def run_single(
    config: AggregationBenchmarkConfig, stream: TextIO | None = None
) -> BenchmarkStatistics:
    """Measure one size and print its report."""
    stats = AggregationBenchmarkRunner(config).run()
    _print_report(config, stats, stream)
    return stats


def run_multi_size(
    base_config: AggregationBenchmarkConfig,
    sizes: Sequence[int] = MULTI_SIZES,
    logger: Logger | None = None,
    stream: TextIO | None = None,
) -> list[tuple[int, BenchmarkStatistics]]:
    """Measure each size, print its report, then the comparative table."""
    runner = MultiSizeAggregationRunner(base_config, list(sizes), logger=logger)
    results = runner.run()

    for size, stats in results:
        _print_report(replace(base_config, size=size), stats, stream)

    reporter = ComparativeReporter(
        f"Comparative Summary (mean latency, target={base_config.target})",
        size_label="Size",
        stream=stream,
    )
    reporter.print_comparative_table(results, runner.key_operations)
    return results
