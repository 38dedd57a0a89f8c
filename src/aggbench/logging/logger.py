"""Buffered synchronous logger."""

import sys
import time
import traceback
from datetime import datetime, timezone

from aggbench.logging.config import LoggerConfig, LogLevel
from aggbench.logging.handlers import BaseLogHandler


class Logger:
    """Formats messages into a buffer and pushes it to stdout and handlers.

    The buffer is flushed when it holds ``buffer_size`` lines, when its oldest
    line is ``flush_interval_s`` old, on any WARNING or ERROR, and on shutdown.

    Args:
        name: Logger name substituted for %(name)s.
        config: Logger settings; defaults to LoggerConfig().
        handlers: Extra destinations for flushed lines.

    Raises:
        TypeError: If a handler is not a BaseLogHandler.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig | None = None,
        handlers: list[BaseLogHandler] | None = None,
    ) -> None:
        self.name = name
        self.config = config if config is not None else LoggerConfig()
        self._handlers = list(handlers) if handlers is not None else []
        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler class; expected BaseLogHandler but got {type(handler)}"
                )

        self._buffer: list[str] = []
        self._oldest_s = time.time()
        self._closed = False

    def _flush_buffer(self) -> None:
        if not self._buffer:
            return
        lines, self._buffer = self._buffer, []
        if self.config.do_stdout:
            for line in lines:
                print(line)
        for handler in self._handlers:
            handler.push(lines)

    def _log(self, level: LogLevel, msg: str) -> None:
        if self._closed or level < self.config.base_level:
            return
        try:
            line = self.config.str_format % {
                "asctime": datetime.now(timezone.utc).isoformat(),
                "name": self.name,
                "levelname": level.name,
                "message": msg,
            }
        except (KeyError, TypeError, ValueError):
            traceback.print_exc(file=sys.stderr)
            return

        now = time.time()
        if not self._buffer:
            self._oldest_s = now
        self._buffer.append(line)

        if (
            level >= LogLevel.WARNING
            or len(self._buffer) >= self.config.buffer_size
            or now - self._oldest_s >= self.config.flush_interval_s
        ):
            self._flush_buffer()

    def debug(self, msg: str) -> None:
        self._log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        self._log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        self._log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        self._log(LogLevel.ERROR, msg)

    def shutdown(self) -> None:
        """Flush what is buffered, close handlers and ignore later messages."""
        if self._closed:
            return
        self._flush_buffer()
        self._closed = True
        for handler in self._handlers:
            handler.close()
