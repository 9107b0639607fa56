"""Logger factory: validate a configuration once, return a bound LogSink.

Usage:
    from fieldlog import SeverityClass, create_logger

    log_update = create_logger(
        "UserUpdate",
        ["User", "Property", "Value", "Message"],
        SeverityClass.INFORMATIONAL,
    )
    log_update({"User": "john", "Property": "DisplayName",
                "Value": "John Doe", "Message": "User display name updated"})

Nothing is written at construction time apart from creating the log
directory. The CSV file appears on the first accepted record, so a logger
that never logs leaves no file behind.

Two loggers created with the same name in the same second share a file path.
That collision is not detected.
"""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from fieldlog.clock import Clock, SystemClock
from fieldlog.config import FieldlogSettings, get_settings
from fieldlog.errors import InvalidConfiguration, SinkIOFailure
from fieldlog.logging import get_logger, is_configured, setup_logging
from fieldlog.severity import SeverityClass, style_for
from fieldlog.sink import LoggerConfig, LogSink
from fieldlog.terminal import TerminalWriter, TyperTerminalWriter

# The name becomes part of a file name inside the log directory.
_PATH_SEPARATORS = {sep for sep in ("/", os.sep, os.altsep) if sep}


def validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidConfiguration(f"Logger name must be a non-empty string, got {name!r}")
    if any(ch.isspace() for ch in name):
        raise InvalidConfiguration(f"Logger name must not contain whitespace: {name!r}")
    if any(sep in name for sep in _PATH_SEPARATORS):
        raise InvalidConfiguration(f"Logger name must not contain a path separator: {name!r}")
    if "\x00" in name:
        raise InvalidConfiguration(f"Logger name must not contain NUL: {name!r}")
    return name


def validate_headers(headers: Any) -> tuple[str, ...]:
    if isinstance(headers, str) or not isinstance(headers, Iterable):
        raise InvalidConfiguration(
            f"Headers must be a sequence of field names, got {type(headers).__name__}"
        )
    resolved = tuple(headers)
    if not resolved:
        raise InvalidConfiguration("Headers must not be empty")
    for h in resolved:
        if not isinstance(h, str) or not h:
            raise InvalidConfiguration(f"Header names must be non-empty strings, got {h!r}")
    dupes = sorted(h for h, n in Counter(resolved).items() if n > 1)
    if dupes:
        raise InvalidConfiguration(f"Duplicate headers: {', '.join(dupes)}")
    return resolved


def ensure_log_dir(directory: Path) -> Path:
    """Create the log directory if needed. Idempotent."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        get_logger(__name__).error("log_dir.create_failed", path=str(directory), error=str(e))
        raise SinkIOFailure(
            f"Could not create log directory {directory}: {e}", path=directory
        ) from e
    return directory


def create_logger(
    name: str,
    headers: Iterable[str],
    severity_class: SeverityClass | str,
    *,
    suppress_console: bool = False,
    suppress_file: bool = False,
    log_dir: Path | str | None = None,
    terminal: TerminalWriter | None = None,
    clock: Clock | None = None,
    settings: FieldlogSettings | None = None,
) -> LogSink:
    """Build a LogSink bound to name, headers, and severity class.

    Args:
        name: Log name, non-empty, free of whitespace and path separators.
            Used in the file name.
        headers: Ordered, unique field names. Every record must supply exactly these.
        severity_class: A SeverityClass or its value ("informational", "exceptional").
        suppress_console: Skip terminal output.
        suppress_file: Skip the CSV file.
        log_dir: Output directory. Defaults to settings, then <program dir>/Logs.
        terminal: Console collaborator. Defaults to TyperTerminalWriter().
        clock: Timestamp/path collaborator. Defaults to SystemClock().
        settings: Package settings. Defaults to get_settings(). Also used to set up
            diagnostics logging when setup_logging() has not been called yet.

    Raises:
        InvalidConfiguration: name, headers, or severity_class are invalid.
        SinkIOFailure: the log directory could not be created.
    """
    name = validate_name(name)
    resolved_headers = validate_headers(headers)
    severity = SeverityClass.parse(severity_class)

    settings = settings or get_settings()
    if not is_configured():
        setup_logging(settings)
    clock = clock or SystemClock()
    directory = Path(log_dir) if log_dir is not None else settings.resolved_log_dir()
    ensure_log_dir(directory)

    config = LoggerConfig(
        name=name,
        headers=resolved_headers,
        severity_class=severity,
        style=style_for(severity),
        file_path=clock.compose_path(directory, clock.timestamp(), name),
        suppress_console=bool(suppress_console),
        suppress_file=bool(suppress_file),
        write_bom=settings.write_bom,
    )

    get_logger(__name__).debug(
        "logger.created",
        logger_name=name,
        headers=list(resolved_headers),
        severity_class=severity.value,
        file_path=str(config.file_path),
    )
    return LogSink(config, terminal or TyperTerminalWriter())
