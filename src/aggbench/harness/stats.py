"""Per-operation timing and allocation statistics.

Latencies are reduced to the summary columns printed by the reporter:
mean, confidence-interval error, standard deviation, median, p95 and mean
bytes allocated per call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

# Two-sided 99.9% normal quantile; Error is the confidence half-width of the mean.
CONFIDENCE_Z = 3.2905


@dataclass(frozen=True)
class OperationSummary:
    """Reduced statistics for one measured operation."""

    name: str
    count: int
    mean_ns: float
    error_ns: float
    stddev_ns: float
    median_ns: float
    p95_ns: float
    allocated_bytes: float | None = None

    @property
    def ops_per_sec(self) -> float:
        return 1e9 / self.mean_ns if self.mean_ns > 0 else 0.0


@dataclass
class OperationMetrics:
    """Raw samples collected for one operation.

    Args:
        name: Operation name, e.g. "sum".
        latencies_ns: Per-call latencies in nanoseconds.
        allocated_bytes: Peak bytes allocated per call, when tracked.
    """

    name: str
    latencies_ns: list[int] = field(default_factory=list)
    allocated_bytes: list[int] = field(default_factory=list)

    def add_latency(self, latency_ns: int) -> None:
        self.latencies_ns.append(latency_ns)

    def add_allocation(self, num_bytes: int) -> None:
        self.allocated_bytes.append(num_bytes)

    @property
    def tracks_allocations(self) -> bool:
        return bool(self.allocated_bytes)

    def summarize(self) -> OperationSummary:
        """Reduce the samples; an operation without samples summarizes to zeros."""
        allocated = (
            float(np.mean(np.asarray(self.allocated_bytes, dtype=np.float64)))
            if self.allocated_bytes
            else None
        )
        if not self.latencies_ns:
            return OperationSummary(self.name, 0, 0.0, 0.0, 0.0, 0.0, 0.0, allocated)

        samples = np.asarray(self.latencies_ns, dtype=np.float64)
        stddev = float(np.std(samples, ddof=1)) if samples.size > 1 else 0.0
        return OperationSummary(
            name=self.name,
            count=int(samples.size),
            mean_ns=float(samples.mean()),
            error_ns=CONFIDENCE_Z * stddev / math.sqrt(samples.size),
            stddev_ns=stddev,
            median_ns=float(np.median(samples)),
            p95_ns=float(np.percentile(samples, 95)),
            allocated_bytes=allocated,
        )


@dataclass
class BenchmarkStatistics:
    """Metrics of every operation measured in one run, in measurement order."""

    operations: dict[str, OperationMetrics] = field(default_factory=dict)
    total_time_ns: int = 0

    def add_operation(self, name: str) -> OperationMetrics:
        metrics = OperationMetrics(name=name)
        self.operations[name] = metrics
        return metrics

    def get_operation(self, name: str) -> OperationMetrics | None:
        return self.operations.get(name)

    def summaries(self) -> list[OperationSummary]:
        """Summaries of operations that recorded at least one latency."""
        return [
            metrics.summarize()
            for metrics in self.operations.values()
            if metrics.latencies_ns
        ]

    @property
    def total_operations(self) -> int:
        return sum(len(op.latencies_ns) for op in self.operations.values())

    @property
    def tracks_allocations(self) -> bool:
        return any(op.tracks_allocations for op in self.operations.values())

    @property
    def throughput(self) -> float:
        """Measured calls per second over the whole run."""
        total_time_s = self.total_time_ns / 1e9
        return self.total_operations / total_time_s if total_time_s > 0 else 0.0
