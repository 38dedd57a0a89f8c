"""Benchmark runner base classes.

A runner builds its subject once, then measures each operation in three
passes: untimed warm-up calls, timed calls, and (when enabled) calls traced
by tracemalloc to record allocations.
"""

from __future__ import annotations

import gc
import time
import tracemalloc
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from aggbench.harness.stats import BenchmarkStatistics, OperationMetrics
from aggbench.logging import Logger

TConfig = TypeVar("TConfig", bound="BaseBenchmarkConfig")

Operation = Callable[[], Any]


@dataclass
class BaseBenchmarkConfig:
    """Measurement settings shared by every benchmark.

    Args:
        num_operations: Timed calls per operation.
        warmup_operations: Untimed calls per operation before timing.
        track_allocations: Trace bytes allocated per call after timing.
    """

    num_operations: int = 10_000
    warmup_operations: int = 1_000
    track_allocations: bool = False

    def __post_init__(self) -> None:
        if self.num_operations <= 0:
            raise ValueError(
                f"Invalid num_operations; expected >0 but got {self.num_operations}"
            )
        if self.warmup_operations < 0:
            raise ValueError(
                f"Invalid warmup_operations; expected >=0 but got {self.warmup_operations}"
            )


def _trace_allocations(operation: Operation, calls: int, metrics: OperationMetrics) -> None:
    """Record the peak bytes each call allocates above the traced baseline."""
    started = not tracemalloc.is_tracing()
    if started:
        tracemalloc.start()
    try:
        for _ in range(calls):
            baseline, _ = tracemalloc.get_traced_memory()
            tracemalloc.reset_peak()
            operation()
            _, peak = tracemalloc.get_traced_memory()
            metrics.add_allocation(max(0, peak - baseline))
    finally:
        if started:
            tracemalloc.stop()


class BenchmarkRunner(ABC, Generic[TConfig]):
    """Measures the operations of one subject.

    Subclasses implement _create_subject() and _run_benchmark_suite(), the
    latter calling measure_operation() once per operation.

    Args:
        config: Benchmark configuration.
    """

    def __init__(self, config: TConfig) -> None:
        self.config = config
        self.stats: BenchmarkStatistics | None = None

    @abstractmethod
    def _create_subject(self):
        """Build and prepare the object under test."""

    @abstractmethod
    def _run_benchmark_suite(self, subject) -> None:
        """Measure every operation of ``subject``."""

    def measure_operation(self, name: str, operation: Operation) -> OperationMetrics:
        """Warm up, time and optionally trace ``operation``.

        Raises:
            RuntimeError: If called outside run().
        """
        if self.stats is None:
            raise RuntimeError("Statistics not initialized; call run() first")

        for _ in range(self.config.warmup_operations):
            operation()

        metrics = self.stats.add_operation(name)
        clock = time.perf_counter_ns
        for _ in range(self.config.num_operations):
            start = clock()
            operation()
            metrics.add_latency(clock() - start)

        if self.config.track_allocations:
            _trace_allocations(operation, self.config.num_operations, metrics)
        return metrics

    def run(self) -> BenchmarkStatistics:
        """Create the subject, measure it and return the collected statistics."""
        self.stats = BenchmarkStatistics()
        subject = self._create_subject()

        start = time.perf_counter_ns()
        self._run_benchmark_suite(subject)
        self.stats.total_time_ns = time.perf_counter_ns() - start
        return self.stats


class MultiSizeBenchmarkRunner(ABC, Generic[TConfig]):
    """Runs one BenchmarkRunner per size parameter.

    Args:
        base_config: Configuration each per-size runner derives from.
        sizes: Size parameter values, in run order.
        logger: Optional logger for progress messages.
    """

    def __init__(
        self,
        base_config: TConfig,
        sizes: list[int],
        logger: Logger | None = None,
    ) -> None:
        self.base_config = base_config
        self.sizes = sizes
        self.logger = logger
        self.results: list[tuple[int, BenchmarkStatistics]] = []

    @abstractmethod
    def _create_runner(self, size: int) -> BenchmarkRunner:
        """Build the runner measuring ``size``."""

    @abstractmethod
    def _get_key_operations(self) -> list[str]:
        """Operation names shown in the comparative table."""

    @property
    def key_operations(self) -> list[str]:
        return self._get_key_operations()

    def run(self) -> list[tuple[int, BenchmarkStatistics]]:
        for size in self.sizes:
            if self.logger is not None:
                self.logger.info(f"Measuring size {size}")
            stats = self._create_runner(size).run()
            self.results.append((size, stats))
            # Drop the previous dataset before building the next one
            gc.collect()
        return self.results
