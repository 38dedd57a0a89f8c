"""Tests for the CLI builder."""

import pytest

from aggbench.harness.cli import BenchmarkCLI
from aggbench.logging import LogLevel


def _cli(memory: bool = True) -> BenchmarkCLI:
    return (
        BenchmarkCLI("test")
        .add_size_arg(help_text="size")
        .add_targets_arg(["current"])
        .add_memory_flag(memory)
        .add_logging_args()
    )


class TestBenchmarkCLI:
    """Test argument parsing."""

    def test_defaults(self):
        args = _cli().parse([])
        assert args.operations == 10_000
        assert args.warmup == 1_000
        assert args.multi_size is False
        assert args.size is None
        assert args.targets == ["current"]
        assert args.as_target is None
        assert args.memory is True
        assert args.log_level == LogLevel.INFO
        assert args.log_file is None

    def test_overrides(self):
        args = _cli().parse(
            [
                "-n", "50",
                "-w", "0",
                "-m",
                "-s", "0",
                "--targets", "current, cpython3.12",
                "--as-target", "cpython3.12",
                "--no-memory",
                "--log-level", "debug",
                "--log-file", "run.log",
            ]
        )
        assert args.operations == 50
        assert args.warmup == 0
        assert args.multi_size is True
        assert args.size == 0
        assert args.targets == ["current", "cpython3.12"]
        assert args.as_target == "cpython3.12"
        assert args.memory is False
        assert args.log_level == LogLevel.DEBUG
        assert args.log_file == "run.log"

    def test_memory_default_off(self):
        assert _cli(memory=False).parse([]).memory is False
        assert _cli(memory=False).parse(["--memory"]).memory is True

    @pytest.mark.parametrize(
        "argv",
        [
            ["--targets", "net7.0"],
            ["--targets", "current,net7.0"],
            ["--targets", " , "],
            ["--as-target", "net7.0"],
            ["--size", "-5"],
            ["--size", "big"],
            ["-n", "0"],
            ["-n", "-3"],
            ["-w", "-1"],
            ["--log-level", "loud"],
            ["--log-level", "trace"],
        ],
    )
    def test_invalid_values_are_usage_errors(self, argv, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _cli().parse(argv)
        assert excinfo.value.code == 2
        assert "error:" in capsys.readouterr().err
