"""LogSink: the bound, reusable logging operation produced by create_logger()."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fieldlog.csvfile import CsvFileSink
from fieldlog.errors import SchemaMismatch, SinkIOFailure
from fieldlog.logging import get_logger
from fieldlog.severity import PresentationStyle, SeverityClass
from fieldlog.terminal import TerminalWriter


@dataclass(frozen=True)
class LoggerConfig:
    """Resolved configuration snapshot owned by one LogSink."""

    name: str
    headers: tuple[str, ...]
    severity_class: SeverityClass
    style: PresentationStyle
    file_path: Path
    suppress_console: bool = False
    suppress_file: bool = False
    write_bom: bool = True


def check_shape(headers: tuple[str, ...], record: Any) -> None:
    """Raise SchemaMismatch unless the record's keys equal the header set."""
    if not isinstance(record, Mapping):
        raise SchemaMismatch(
            missing=headers,
            message=f"Record must be a mapping of field name to value, got {type(record).__name__}",
        )
    expected = set(headers)
    supplied = set(record)
    if supplied != expected:
        raise SchemaMismatch(
            missing=expected - supplied,
            unexpected=(str(k) for k in supplied - expected),
        )


def display_value(value: Any) -> str:
    # Matches the CSV writer, which writes None as an empty field.
    return "" if value is None else str(value)


def render_lines(headers: tuple[str, ...], record: Mapping[str, Any]) -> list[str]:
    return [f"{h}: {display_value(record[h])}" for h in headers]


class LogSink:
    """Validate a record, then write it to the console and the CSV file.

    Both sinks are updated only after the shape check passes and the CSV row
    has been encoded. None is shown as an empty value on both sides. A failed
    append raises SinkIOFailure after the console lines have been written, so
    the caller always learns that the record may not be durable.
    """

    def __init__(self, config: LoggerConfig, terminal: TerminalWriter) -> None:
        self._config = config
        self._terminal = terminal
        self._file = CsvFileSink(config.file_path, config.headers, write_bom=config.write_bom)

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def headers(self) -> tuple[str, ...]:
        return self._config.headers

    @property
    def file_path(self) -> Path:
        return self._config.file_path

    def write(self, record: Mapping[str, Any]) -> None:
        cfg = self._config
        try:
            check_shape(cfg.headers, record)
        except SchemaMismatch as e:
            get_logger(__name__).debug(
                "record.rejected",
                logger_name=cfg.name,
                missing=list(e.missing),
                unexpected=list(e.unexpected),
            )
            raise

        data = None
        if not cfg.suppress_file:
            try:
                data = self._file.prepare([record[h] for h in cfg.headers])
            except (OSError, UnicodeError) as e:
                raise self._io_failure(e) from e

        if not cfg.suppress_console:
            for line in render_lines(cfg.headers, record):
                self._terminal.write_line(line, cfg.style)

        if data is not None:
            try:
                self._file.append(data)
            except OSError as e:
                raise self._io_failure(e) from e

        get_logger(__name__).debug("record.written", logger_name=cfg.name, fields=len(cfg.headers))

    __call__ = write

    def _io_failure(self, error: Exception) -> SinkIOFailure:
        cfg = self._config
        get_logger(__name__).error(
            "sink.io_failure",
            logger_name=cfg.name,
            path=str(cfg.file_path),
            error=str(error),
        )
        return SinkIOFailure(
            f"Could not write log record to {cfg.file_path}: {error}", path=cfg.file_path
        )

    def __repr__(self) -> str:
        return (
            f"LogSink(name={self._config.name!r}, headers={list(self._config.headers)!r}, "
            f"severity_class={self._config.severity_class.value!r}, file_path={str(self._config.file_path)!r})"
        )
