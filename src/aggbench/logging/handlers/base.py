from abc import ABC, abstractmethod


class BaseLogHandler(ABC):
    """Destination for lines flushed by a Logger."""

    @abstractmethod
    def push(self, buffer: list[str]) -> None:
        """Write a batch of formatted log lines."""

    def close(self) -> None:
        """Release the destination; the logger calls this on shutdown."""
