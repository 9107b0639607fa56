"""Severity classes and the console presentation style each one selects."""

from __future__ import annotations

from enum import Enum
from typing import Any

from fieldlog.errors import InvalidConfiguration


class PresentationStyle(str, Enum):
    """Style tag handed to the terminal writer with every console line."""

    NORMAL = "normal"
    EMPHASIZED = "emphasized"


class SeverityClass(str, Enum):
    """Closed set of severity classes. Controls console styling, not file content."""

    INFORMATIONAL = "informational"
    EXCEPTIONAL = "exceptional"

    @classmethod
    def parse(cls, value: Any) -> SeverityClass:
        """Resolve a member or its string value (case-insensitive).

        Anything else raises InvalidConfiguration; there is no default.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise InvalidConfiguration(
            f"Unknown severity class: {value!r}. "
            f"Available: {[m.value for m in cls]}"
        )


_STYLES: dict[SeverityClass, PresentationStyle] = {
    SeverityClass.INFORMATIONAL: PresentationStyle.NORMAL,
    SeverityClass.EXCEPTIONAL: PresentationStyle.EMPHASIZED,
}


def style_for(severity: SeverityClass) -> PresentationStyle:
    return _STYLES[severity]
