"""Command-line parsing for benchmarks.

``BenchmarkCLI`` builds an argparse parser with the measurement options every
benchmark shares; the ``add_*`` methods chain on optional groups. Argument
types validate their values so bad input ends as a usage error.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from aggbench.harness.runtimes import validate_target_name
from aggbench.logging import LogLevel


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected an integer > 0 but got {value}")
    return number


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected an integer >= 0 but got {value}")
    return number


def target_name(value: str) -> str:
    try:
        return validate_target_name(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def target_names(value: str) -> list[str]:
    names = [name.strip() for name in value.split(",") if name.strip()]
    if not names:
        raise argparse.ArgumentTypeError("expected at least one comma-separated name")
    return [target_name(name) for name in names]


def log_level(value: str) -> LogLevel:
    try:
        return LogLevel[value.upper()]
    except KeyError:
        choices = ", ".join(level.name.lower() for level in LogLevel)
        raise argparse.ArgumentTypeError(
            f"invalid log level {value!r}; choose from {choices}"
        ) from None


class BenchmarkCLI:
    """Builder for benchmark command-line interfaces.

    Args:
        description: Benchmark description for --help.
        prog: Program name shown in usage output.
    """

    def __init__(self, description: str, prog: str | None = None) -> None:
        self.parser = argparse.ArgumentParser(description=description, prog=prog)
        self.parser.add_argument(
            "--operations",
            "-n",
            type=positive_int,
            default=10_000,
            help="Timed calls per operation (default: 10,000)",
        )
        self.parser.add_argument(
            "--warmup",
            "-w",
            type=non_negative_int,
            default=1_000,
            help="Untimed warmup calls per operation (default: 1,000)",
        )
        self.parser.add_argument(
            "--multi-size",
            "-m",
            action="store_true",
            help="Sweep the standard set of dataset sizes",
        )

    def add_size_arg(self, help_text: str) -> BenchmarkCLI:
        """Add --size/-s; None when omitted so declared sizes apply."""
        self.parser.add_argument(
            "--size", "-s", type=non_negative_int, default=None, help=help_text
        )
        return self

    def add_targets_arg(self, default: Sequence[str]) -> BenchmarkCLI:
        """Add --targets/-t and the internal --as-target report label."""
        self.parser.add_argument(
            "--targets",
            "-t",
            type=target_names,
            default=list(default),
            help=(
                "Comma-separated runtime targets, e.g. current,cpython3.12 "
                f"(default: {','.join(default)})"
            ),
        )
        # Set by the parent process so a child reports under the declared name
        self.parser.add_argument(
            "--as-target", type=target_name, default=None, help=argparse.SUPPRESS
        )
        return self

    def add_memory_flag(self, default: bool) -> BenchmarkCLI:
        """Add --memory/--no-memory allocation tracking toggle."""
        self.parser.add_argument(
            "--memory",
            action=argparse.BooleanOptionalAction,
            default=default,
            help=f"Trace bytes allocated per call (default: {'on' if default else 'off'})",
        )
        return self

    def add_logging_args(self, default: LogLevel = LogLevel.INFO) -> BenchmarkCLI:
        """Add --log-level and --log-file."""
        self.parser.add_argument(
            "--log-level",
            type=log_level,
            default=default,
            help=f"Logging level (default: {default.name.lower()})",
        )
        self.parser.add_argument(
            "--log-file",
            default=None,
            help="Also append log lines to this file",
        )
        return self

    def parse(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        return self.parser.parse_args(argv)
