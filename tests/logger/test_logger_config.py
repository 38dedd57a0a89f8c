"""Tests for logger configuration."""

import pytest

from aggbench.logging import LoggerConfig, LogLevel


class TestLoggerConfig:
    """Validate LoggerConfig inputs."""

    def test_default_values(self) -> None:
        cfg = LoggerConfig()
        assert cfg.base_level == LogLevel.INFO
        assert cfg.do_stdout is True
        assert cfg.flush_interval_s == 1.0
        assert cfg.buffer_size == 1000

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"flush_interval_s": 0.0},
            {"buffer_size": 0},
            {"str_format": "%(asctime)s only"},
        ],
    )
    def test_invalid_values(self, kwargs) -> None:
        with pytest.raises(ValueError):
            LoggerConfig(**kwargs)

    def test_levels_are_ordered(self) -> None:
        assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARNING < LogLevel.ERROR
