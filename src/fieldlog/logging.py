"""Diagnostics logging for fieldlog itself.

This is the package's own channel (logger created, record rejected, file
write failed). It is separate from the console lines and CSV rows a LogSink
produces for its caller.

    get_logger(name)        -- structlog BoundLogger over logging.getLogger(name)
    setup_logging(settings) -- attach the rendering handler to "fieldlog"
    shutdown_logging()      -- detach and close it again

get_logger() wraps the stdlib logger with a fixed processor chain instead of
relying on structlog.configure(), so the host application's structlog setup
is left alone. Events reach stdlib handlers as event dicts; the handler that
setup_logging() installs renders them with structlog's ProcessorFormatter.

Settings:
    FIELDLOG_LOG_DESTINATION=stderr (default) | jsonl
    FIELDLOG_LOG_FORMAT=console (default) | json
    FIELDLOG_LOG_LEVEL=WARNING (default)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from fieldlog.errors import InvalidConfiguration

if TYPE_CHECKING:
    from fieldlog.config import FieldlogSettings

PACKAGE_LOGGER = "fieldlog"

# Silent until setup_logging() runs; no last-resort stderr output.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_PROCESSORS: list = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def get_logger(name: str = PACKAGE_LOGGER, **initial_values: Any) -> Any:
    """Return a logger that accepts logger.info("event", key=value)."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


def _renderer(settings: FieldlogSettings) -> Any:
    if settings.log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    raise InvalidConfiguration(
        f"Unknown log format: {settings.log_format!r}. Available: ['console', 'json']"
    )


def _handler(settings: FieldlogSettings) -> logging.Handler:
    if settings.log_destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if settings.log_destination == "jsonl":
        if settings.jsonl_path:
            path = Path(settings.jsonl_path)
        else:
            path = settings.resolved_log_dir() / "fieldlog.jsonl"
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(str(path), mode="a", encoding="utf-8")
    raise InvalidConfiguration(
        f"Unknown log destination: {settings.log_destination!r}. Available: ['stderr', 'jsonl']"
    )


def _managed_handlers() -> list[logging.Handler]:
    return [
        h for h in logging.getLogger(PACKAGE_LOGGER).handlers
        if getattr(h, "_fieldlog_managed", False)
    ]


def is_configured() -> bool:
    return bool(_managed_handlers())


def setup_logging(settings: FieldlogSettings) -> logging.Handler:
    """Render fieldlog diagnostics per settings. Replaces an earlier setup.

    Only the handler installed here is replaced; external handlers on the
    "fieldlog" logger (pytest caplog, host handlers) are preserved.
    """
    renderer = _renderer(settings)
    handler = _handler(settings)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )
    handler._fieldlog_managed = True  # type: ignore[attr-defined]

    shutdown_logging()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.WARNING))
    return handler


def shutdown_logging() -> None:
    """Detach and close the handler installed by setup_logging()."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for h in _managed_handlers():
        package_logger.removeHandler(h)
        h.close()
    package_logger.setLevel(logging.NOTSET)
