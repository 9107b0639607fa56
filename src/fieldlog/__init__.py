"""fieldlog: record-validating, dual-sink structured logger factory.

Public API:
    create_logger(name, headers, severity_class) -- build a bound LogSink
    LogSink.write(record) / LogSink(record)      -- validate and log one record

Each LogSink checks that a record supplies exactly its headers, then echoes
"<header>: <value>" lines to the terminal and appends a CSV row to
<log dir>/<timestamp>_<name>.csv.
"""

from fieldlog.clock import Clock, SystemClock
from fieldlog.config import FieldlogSettings, get_settings, reset_settings
from fieldlog.errors import FieldlogError, InvalidConfiguration, SchemaMismatch, SinkIOFailure
from fieldlog.factory import create_logger
from fieldlog.logging import get_logger, setup_logging, shutdown_logging
from fieldlog.severity import PresentationStyle, SeverityClass
from fieldlog.sink import LoggerConfig, LogSink
from fieldlog.terminal import TerminalWriter, TyperTerminalWriter

__all__ = [
    # Factory
    "create_logger",
    "LogSink",
    "LoggerConfig",
    # Severity / presentation
    "SeverityClass",
    "PresentationStyle",
    # Collaborators
    "TerminalWriter",
    "TyperTerminalWriter",
    "Clock",
    "SystemClock",
    # Settings
    "FieldlogSettings",
    "get_settings",
    "reset_settings",
    # Diagnostics logging
    "get_logger",
    "setup_logging",
    "shutdown_logging",
    # Errors
    "FieldlogError",
    "InvalidConfiguration",
    "SchemaMismatch",
    "SinkIOFailure",
]
