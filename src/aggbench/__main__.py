"""Command-line entry point.

Usage:
    python -m aggbench [--size SIZE]
    python -m aggbench --multi-size
    python -m aggbench --targets current,cpython3.12 --no-memory
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from aggbench.benchmark import (
    MULTI_SIZES,
    AggregationBenchmarkConfig,
    run_multi_size,
    run_single,
)
from aggbench.harness import (
    BenchmarkCLI,
    RuntimeTargetNotFound,
    current_runtime_name,
    resolve_target,
    run_in_target,
)
from aggbench.logging import FileLogHandler, Logger, LoggerConfig
from aggbench.suite import AggregationBenchmarks


def build_cli() -> BenchmarkCLI:
    sizes = ", ".join(str(size) for size in AggregationBenchmarks.SIZES)
    return (
        BenchmarkCLI("Benchmark built-in aggregations over integers", prog="aggbench")
        .add_size_arg(help_text=f"Measure only this dataset length (default: {sizes})")
        .add_targets_arg(AggregationBenchmarks.TARGETS)
        .add_memory_flag(AggregationBenchmarks.MEMORY_DIAGNOSER)
        .add_logging_args()
    )


def resolve_sizes(args: argparse.Namespace) -> tuple[int, ...]:
    """An explicit --size wins over --multi-size, which wins over SIZES."""
    if args.size is not None:
        return (args.size,)
    if args.multi_size:
        return MULTI_SIZES
    return tuple(AggregationBenchmarks.SIZES)


def _child_args(args: argparse.Namespace, target_name: str) -> list[str]:
    """Arguments re-running this benchmark inside the target's interpreter."""
    child = [
        "-m",
        "aggbench",
        "--targets",
        "current",
        "--as-target",
        target_name,
        "--operations",
        str(args.operations),
        "--warmup",
        str(args.warmup),
        "--memory" if args.memory else "--no-memory",
        "--log-level",
        args.log_level.name.lower(),
    ]
    if args.size is not None:
        child += ["--size", str(args.size)]
    if args.multi_size:
        child.append("--multi-size")
    if args.log_file is not None:
        child += ["--log-file", args.log_file]
    return child


def _build_logger(args: argparse.Namespace) -> Logger:
    handlers = []
    if args.log_file is not None:
        handlers.append(FileLogHandler(args.log_file, create=True))
    return Logger(
        name="aggbench",
        config=LoggerConfig(base_level=args.log_level, buffer_size=1),
        handlers=handlers,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Measure every requested target; returns the process exit code."""
    args = build_cli().parse(argv)
    sizes = resolve_sizes(args)
    logger = _build_logger(args)

    succeeded = 0
    try:
        for name in args.targets:
            try:
                target = resolve_target(name)
            except RuntimeTargetNotFound as exc:
                logger.warning(f"Skipping target {name}: {exc}")
                continue

            if not target.is_current:
                logger.info(f"Running target {name} with {target.executable}")
                returncode = run_in_target(target, _child_args(args, name))
                if returncode != 0:
                    logger.error(f"Target {name} exited with code {returncode}")
                    continue
                succeeded += 1
                continue

            if args.as_target is not None:
                label = args.as_target
            elif name == "current":
                label = current_runtime_name()
            else:
                label = name
            config = AggregationBenchmarkConfig(
                num_operations=args.operations,
                warmup_operations=args.warmup,
                track_allocations=args.memory,
                size=sizes[0],
                target=label,
            )
            logger.debug(f"Running in-process with {config}")
            if len(sizes) == 1:
                run_single(config)
            else:
                run_multi_size(config, sizes=sizes, logger=logger)
            succeeded += 1
    finally:
        logger.shutdown()

    return 0 if succeeded else 1


if __name__ == "__main__":
    raise SystemExit(main())
