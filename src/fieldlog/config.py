"""Package settings: YAML config + env var overrides.

Priority: explicit kwarg > env var > YAML file > default.
Env vars use the FIELDLOG_{FIELD_NAME} convention (e.g. FIELDLOG_WRITE_BOM=off).
YAML file default: ~/.fieldlog/config.yaml (override with FIELDLOG_CONFIG).

Diagnostics logging (see fieldlog.logging):
    Destination: FIELDLOG_LOG_DESTINATION=stderr (default) | jsonl
    Renderer: FIELDLOG_LOG_FORMAT=console (default) | json
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from fieldlog.errors import InvalidConfiguration

_TRUTHY = {"1", "true", "on", "yes"}
_FALSY = {"0", "false", "off", "no"}
_DEFAULT_PATH = Path("~/.fieldlog/config.yaml").expanduser()

LOG_DIR_NAME = "Logs"


def program_dir() -> Path:
    """Directory of the running program, falling back to the cwd."""
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 and argv0 != "-c":
        return Path(argv0).resolve().parent
    return Path.cwd()


def default_log_dir() -> Path:
    return program_dir() / LOG_DIR_NAME


def _parse_bool(key: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    val = str(raw).strip().lower()
    if val in _TRUTHY:
        return True
    if val in _FALSY:
        return False
    raise InvalidConfiguration(f"{key}={raw!r} is not a valid boolean")


@dataclass(frozen=True)
class FieldlogSettings:
    """Process-wide defaults for loggers and for fieldlog's own diagnostics."""

    # CSV output
    log_dir: Path | None = None  # None: <program dir>/Logs
    write_bom: bool = True

    # Diagnostics logging
    log_destination: str = "stderr"  # "stderr" | "jsonl"
    log_level: str = "WARNING"
    log_format: str = "console"  # "console" | "json"
    jsonl_path: str | None = None

    def resolved_log_dir(self) -> Path:
        return Path(self.log_dir) if self.log_dir is not None else default_log_dir()

    @classmethod
    def load(cls, path: Path | None = None, **overrides: Any) -> FieldlogSettings:
        """Load settings from a YAML file, then env vars, then explicit overrides."""
        file_path = path
        if file_path is None:
            env_path = os.environ.get("FIELDLOG_CONFIG")
            file_path = Path(env_path).expanduser() if env_path else _DEFAULT_PATH

        file_values: dict[str, Any] = {}
        if file_path.exists():
            raw = yaml.safe_load(file_path.read_text()) or {}
            if isinstance(raw, dict):
                file_values = raw

        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            name = f.name
            env_key = f"FIELDLOG_{name.upper()}"
            if name in overrides:
                value = overrides[name]
            elif env_key in os.environ:
                value = os.environ[env_key]
            elif name in file_values:
                value = file_values[name]
            else:
                continue

            if name == "write_bom":
                kwargs[name] = _parse_bool(env_key, value)
            elif name == "log_dir":
                kwargs[name] = Path(value).expanduser() if value is not None else None
            elif value is None:
                kwargs[name] = None
            else:
                kwargs[name] = str(value)

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Singleton
_settings: FieldlogSettings | None = None


def get_settings(path: Path | None = None) -> FieldlogSettings:
    """Get the singleton FieldlogSettings instance."""
    global _settings
    if _settings is None:
        _settings = FieldlogSettings.load(path)
    return _settings


def reset_settings() -> None:
    """Reset for testing."""
    global _settings
    _settings = None
