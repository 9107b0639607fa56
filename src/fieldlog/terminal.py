"""Terminal writer: the console half of a LogSink.

A LogSink only needs "write this line with this style". The default writer
renders styles through typer's styled echo; tests swap in a recorder.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import typer

from fieldlog.severity import PresentationStyle


@runtime_checkable
class TerminalWriter(Protocol):
    """Writes one line of text with a presentation style."""

    def write_line(self, text: str, style: PresentationStyle) -> None: ...


DEFAULT_PALETTE: dict[PresentationStyle, dict[str, Any]] = {
    PresentationStyle.NORMAL: {},
    PresentationStyle.EMPHASIZED: {"fg": typer.colors.RED, "bold": True},
}


class TyperTerminalWriter:
    """Echo lines to stdout (or stderr) with typer.secho styling."""

    def __init__(
        self,
        *,
        err: bool = False,
        palette: dict[PresentationStyle, dict[str, Any]] | None = None,
    ) -> None:
        self._err = err
        self._palette = dict(DEFAULT_PALETTE if palette is None else palette)

    def write_line(self, text: str, style: PresentationStyle) -> None:
        typer.secho(text, err=self._err, **self._palette.get(style, {}))
