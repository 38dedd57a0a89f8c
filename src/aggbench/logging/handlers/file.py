from pathlib import Path
from typing import TextIO

from aggbench.logging.handlers.base import BaseLogHandler


class FileLogHandler(BaseLogHandler):
    """Appends flushed log lines to a file.

    The file is opened on the first push and stays open until close().

    Args:
        filepath: File receiving the lines.
        create: Create missing parent directories instead of failing.

    Raises:
        FileNotFoundError: If the parent directory is missing and create is False.
    """

    def __init__(self, filepath: str | Path, create: bool = False) -> None:
        self.filepath = Path(filepath)
        parent = self.filepath.parent
        if create:
            parent.mkdir(parents=True, exist_ok=True)
        elif not parent.is_dir():
            raise FileNotFoundError(f"Log directory does not exist: {parent}")
        self._file: TextIO | None = None

    def push(self, buffer: list[str]) -> None:
        if self._file is None:
            self._file = self.filepath.open("a", encoding="utf-8")
        self._file.write("\n".join(buffer) + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
