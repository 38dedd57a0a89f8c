"""Log levels and logger settings."""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40


@dataclass
class LoggerConfig:
    """Settings for a Logger.

    Args:
        base_level: Messages below this level are dropped.
        do_stdout: Echo flushed lines to stdout.
        str_format: %-style line format; %(asctime)s, %(levelname)s and
            %(name)s are optional, %(message)s is required.
        flush_interval_s: Oldest age a buffered line may reach before the next
            log call flushes the buffer.
        buffer_size: Buffered lines that force a flush.
    """

    base_level: LogLevel = LogLevel.INFO
    do_stdout: bool = True
    str_format: str = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    flush_interval_s: float = 1.0
    buffer_size: int = 1000

    def __post_init__(self) -> None:
        if self.flush_interval_s <= 0.0:
            raise ValueError(
                f"Invalid flush interval; expected >0 but got {self.flush_interval_s}"
            )
        if "%(message)s" not in self.str_format:
            raise ValueError("Format string must contain '%(message)s' placeholder")
        if self.buffer_size <= 0:
            raise ValueError(
                f"Invalid buffer size; expected >0 but got {self.buffer_size}"
            )
