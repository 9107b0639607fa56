"""Clock/path provider: timestamps and log file paths."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Protocol, runtime_checkable

# Fixed width, sorts lexicographically in chronological order.
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
FILE_SUFFIX = ".csv"


@runtime_checkable
class Clock(Protocol):
    def timestamp(self) -> str: ...

    def compose_path(self, directory: Path, timestamp: str, name: str) -> Path: ...


def log_file_name(timestamp: str, name: str) -> str:
    return f"{timestamp}_{name}{FILE_SUFFIX}"


class SystemClock:
    """Local wall-clock time at second resolution."""

    def __init__(self, fmt: str = TIMESTAMP_FORMAT) -> None:
        self._fmt = fmt

    def timestamp(self) -> str:
        return datetime.now().strftime(self._fmt)

    def compose_path(self, directory: Path, timestamp: str, name: str) -> Path:
        return Path(directory) / log_file_name(timestamp, name)
