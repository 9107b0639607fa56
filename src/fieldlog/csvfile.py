"""CSV file sink: append one row per record, header line written lazily."""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from pathlib import Path
from typing import Any

BOM = b"\xef\xbb\xbf"


class CsvFileSink:
    """Append CSV rows to a file, writing the header line when the file is new.

    The row (and the header line for a new file) is rendered and encoded in
    memory first, then appended with a single write. An unencodable value
    therefore leaves the file untouched. Two sinks on the same path are not
    coordinated.
    """

    def __init__(self, path: Path, headers: Sequence[str], *, write_bom: bool = True) -> None:
        self._path = Path(path)
        self._headers = tuple(headers)
        self._write_bom = write_bom

    @property
    def path(self) -> Path:
        return self._path

    def header_line(self) -> str:
        return ",".join(self._headers) + "\n"

    def render(self, values: Sequence[Any], *, new_file: bool) -> bytes:
        """Encode one row, prefixed with BOM and header line for a new file.

        Raises UnicodeEncodeError for values that are not valid UTF-8 text.
        """
        buf = io.StringIO(newline="")
        if new_file:
            buf.write(self.header_line())
        csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n").writerow(values)
        data = buf.getvalue().encode("utf-8")
        if new_file and self._write_bom:
            data = BOM + data
        return data

    def prepare(self, values: Sequence[Any]) -> bytes:
        return self.render(values, new_file=not self._path.exists())

    def append(self, data: bytes) -> None:
        with open(self._path, "ab") as f:
            f.write(data)

    def write(self, values: Sequence[Any]) -> None:
        """Append one row. Raises OSError or UnicodeError on failure."""
        self.append(self.prepare(values))
