"""Shared fixtures: isolated settings, a recording terminal, a fixed clock."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fieldlog.clock import SystemClock
from fieldlog.config import FieldlogSettings, reset_settings
from fieldlog.logging import shutdown_logging
from fieldlog.severity import PresentationStyle

FIXED_TIMESTAMP = "2026-10-19_09-30-00"


def events(caplog, event: str) -> list[dict]:
    """Event dicts logged under the given event name."""
    return [
        r.msg for r in caplog.records
        if isinstance(r.msg, dict) and r.msg.get("event") == event
    ]


class RecordingTerminal:
    """TerminalWriter double that keeps every (line, style) pair."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, PresentationStyle]] = []

    def write_line(self, text: str, style: PresentationStyle) -> None:
        self.lines.append((text, style))

    @property
    def texts(self) -> list[str]:
        return [text for text, _ in self.lines]


class FixedClock:
    """Clock double with a constant timestamp."""

    def __init__(self, timestamp: str = FIXED_TIMESTAMP) -> None:
        self._timestamp = timestamp
        self._paths = SystemClock()

    def timestamp(self) -> str:
        return self._timestamp

    def compose_path(self, directory: Path, timestamp: str, name: str) -> Path:
        return self._paths.compose_path(directory, timestamp, name)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep user config and FIELDLOG_* env vars out of every test."""
    for key in list(os.environ):
        if key.startswith("FIELDLOG_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("FIELDLOG_CONFIG", str(tmp_path / "no-such-config.yaml"))
    reset_settings()
    shutdown_logging()
    yield
    reset_settings()
    shutdown_logging()


@pytest.fixture()
def terminal() -> RecordingTerminal:
    return RecordingTerminal()


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def log_dir(tmp_path) -> Path:
    return tmp_path / "Logs"


@pytest.fixture()
def settings(log_dir) -> FieldlogSettings:
    return FieldlogSettings(log_dir=log_dir)
