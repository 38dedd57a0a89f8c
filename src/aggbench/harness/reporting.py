"""Plain-text benchmark reports.

A run report lists one row per operation with Mean, Error, StdDev, Median and
P95 latency, plus an Allocated column when allocations were traced. The
comparative report shows mean latency per operation for each dataset size.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .stats import BenchmarkStatistics

RULE_WIDTH = 96

_TIME_UNITS = ((1e6, "ms"), (1e3, "us"))
_BYTE_UNITS = ((1024.0**2, "MB"), (1024.0, "KB"))


def format_duration(value_ns: float) -> str:
    """Render nanoseconds with the largest unit keeping the value >= 1."""
    for scale, unit in _TIME_UNITS:
        if value_ns >= scale:
            return f"{value_ns / scale:.3f} {unit}"
    return f"{value_ns:.1f} ns"


def format_bytes(value: float | None) -> str:
    """Render an allocation size; "-" when nothing was traced."""
    if value is None:
        return "-"
    for scale, unit in _BYTE_UNITS:
        if value >= scale:
            return f"{value / scale:.2f} {unit}"
    return f"{value:.0f} B"


class _TextReport:
    """Shared line output for the reporters."""

    def __init__(self, title: str, stream: TextIO | None = None) -> None:
        self.title = title
        self.stream = stream

    def _print(self, line: str = "") -> None:
        print(line, file=self.stream)

    def _print_title(self) -> None:
        self._print("=" * RULE_WIDTH)
        self._print(self.title)
        self._print("=" * RULE_WIDTH)


class BenchmarkReporter(_TextReport):
    """Report for a single (target, size) run.

    Args:
        title: Report title.
        config_info: Run parameters printed under the title.
        stream: Output stream; defaults to stdout.
    """

    def __init__(
        self,
        title: str,
        config_info: dict[str, str | int | float],
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(title, stream)
        self.config_info = config_info

    def print_header(self, stats: BenchmarkStatistics, warmup: int = 0) -> None:
        self._print_title()
        for key, value in self.config_info.items():
            self._print(f"{key}: {value}")

        line = f"Operations: {stats.total_operations:,}"
        if warmup > 0:
            line += f" (warmup: {warmup:,} per operation)"
        self._print(line)
        if stats.total_time_ns > 0:
            self._print(
                f"Total time: {stats.total_time_ns / 1e9:.3f}s | "
                f"Throughput: {stats.throughput:.0f} ops/sec"
            )
        self._print()

    def print_summary_table(self, stats: BenchmarkStatistics) -> None:
        """Print one row per operation; empty operations are left out."""
        show_allocated = stats.tracks_allocations

        header = (
            f"{'Method':<12} {'Mean':>12} {'Error':>12} {'StdDev':>12} "
            f"{'Median':>12} {'P95':>12}"
        )
        if show_allocated:
            header += f" {'Allocated':>10}"
        self._print(header)
        self._print("-" * RULE_WIDTH)

        for summary in stats.summaries():
            row = (
                f"{summary.name:<12} {format_duration(summary.mean_ns):>12} "
                f"{format_duration(summary.error_ns):>12} "
                f"{format_duration(summary.stddev_ns):>12} "
                f"{format_duration(summary.median_ns):>12} "
                f"{format_duration(summary.p95_ns):>12}"
            )
            if show_allocated:
                row += f" {format_bytes(summary.allocated_bytes):>10}"
            self._print(row)

        self._print("=" * RULE_WIDTH)

    def print_full_report(self, stats: BenchmarkStatistics, warmup: int = 0) -> None:
        self.print_header(stats, warmup)
        self.print_summary_table(stats)


class ComparativeReporter(_TextReport):
    """Mean latency of each operation across dataset sizes.

    Args:
        title: Report title.
        size_label: Header of the size column.
        stream: Output stream; defaults to stdout.
    """

    def __init__(
        self,
        title: str,
        size_label: str = "Size",
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(title, stream)
        self.size_label = size_label

    def print_comparative_table(
        self,
        results: list[tuple[int, BenchmarkStatistics]],
        key_operations: list[str],
    ) -> None:
        self._print_title()
        self._print(
            f"{self.size_label:>10}" + "".join(f" {name:>15}" for name in key_operations)
        )
        self._print("-" * RULE_WIDTH)

        for size, stats in results:
            cells = []
            for name in key_operations:
                metrics = stats.get_operation(name)
                cells.append(
                    format_duration(metrics.summarize().mean_ns) if metrics is not None else "-"
                )
            self._print(f"{size:>10}" + "".join(f" {cell:>15}" for cell in cells))

        self._print("=" * RULE_WIDTH)
