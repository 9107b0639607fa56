"""Exceptions raised by fieldlog.

All errors surface synchronously to the immediate caller. Nothing is retried
and nothing is swallowed: a failed write means the record may not be durable.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class FieldlogError(Exception):
    """Base class for every error fieldlog raises."""


class InvalidConfiguration(FieldlogError, ValueError):
    """A logger was requested with an invalid name, headers, or severity class."""


class SchemaMismatch(FieldlogError, ValueError):
    """A record's field names do not exactly match the logger's headers.

    Attributes:
        missing: Headers the record did not supply, sorted.
        unexpected: Fields the record supplied that are not headers, sorted.
    """

    def __init__(
        self,
        missing: Iterable[str] = (),
        unexpected: Iterable[str] = (),
        message: str | None = None,
    ) -> None:
        self.missing: tuple[str, ...] = tuple(sorted(missing))
        self.unexpected: tuple[str, ...] = tuple(sorted(unexpected))
        if message is None:
            parts = []
            if self.missing:
                parts.append(f"missing fields: {', '.join(self.missing)}")
            if self.unexpected:
                parts.append(f"unexpected fields: {', '.join(self.unexpected)}")
            message = "Record does not match headers (" + "; ".join(parts) + ")"
        super().__init__(message)


class SinkIOFailure(FieldlogError, OSError):
    """The log directory could not be created or the log file could not be written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
