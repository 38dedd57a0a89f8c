"""Benchmark harness for aggbench.

- stats: per-operation samples and their summaries
- reporting: plain-text run and comparative reports
- runner: base classes driving warm-up, timing and allocation passes
- runtimes: runtime target resolution and child-process dispatch
- cli: argparse builder with validated argument types
"""

from __future__ import annotations

__all__ = [
    "OperationMetrics",
    "OperationSummary",
    "BenchmarkStatistics",
    "BenchmarkReporter",
    "ComparativeReporter",
    "BaseBenchmarkConfig",
    "BenchmarkRunner",
    "MultiSizeBenchmarkRunner",
    "RuntimeTarget",
    "RuntimeTargetNotFound",
    "current_runtime_name",
    "resolve_target",
    "run_in_target",
    "validate_target_name",
    "BenchmarkCLI",
]

from .cli import BenchmarkCLI
from .reporting import BenchmarkReporter, ComparativeReporter
from .runner import BaseBenchmarkConfig, BenchmarkRunner, MultiSizeBenchmarkRunner
from .runtimes import (
    RuntimeTarget,
    RuntimeTargetNotFound,
    current_runtime_name,
    resolve_target,
    run_in_target,
    validate_target_name,
)
from .stats import BenchmarkStatistics, OperationMetrics, OperationSummary
