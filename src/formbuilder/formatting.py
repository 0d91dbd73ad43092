"""
Output formatting for rendered questionnaires.

Rendering produces plain text. Colour is an optional decoration applied
through a FormatConfig value that callers pass down explicitly; there is
no process-wide colour switch.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from termcolor import colored


# Semantic roles -> (termcolor colour, attributes)
STYLES = {
    "title": ("blue", ("bold",)),
    "number": ("cyan", ()),
    "muted": ("dark_grey", ()),
    "selected": ("green", ()),
    "error": ("red", ()),
    "warning": ("yellow", ()),
    "success": ("green", ()),
}


@dataclass(frozen=True)
class FormatConfig:
    """
    Formatting options threaded through every render call.

    Properties:
        color: when False, every styling call returns its text unchanged
    """

    color: bool = False

    @classmethod
    def plain(cls) -> "FormatConfig":
        return cls(color=False)

    @classmethod
    def colored(cls) -> "FormatConfig":
        return cls(color=True)

    @classmethod
    def for_stream(cls, mode: str = "auto", stream: Optional[TextIO] = None) -> "FormatConfig":
        """Resolve an auto/always/never colour mode against an output stream."""
        if mode == "always":
            return cls.colored()
        if mode == "never":
            return cls.plain()
        stream = stream if stream is not None else sys.stdout
        isatty = getattr(stream, "isatty", None)
        return cls(color=bool(isatty and isatty()))

    def colorize(self, text: str, color: Optional[str] = None, attrs: Iterable[str] = ()) -> str:
        if not self.color:
            return text
        return colored(text, color, attrs=list(attrs) or None, force_color=True)

    def style(self, text: str, role: str) -> str:
        color, attrs = STYLES[role]
        return self.colorize(text, color, attrs)


def format_value(value: object) -> str:
    """
    Display form of a scalar answer or expected value.

    Booleans are shown in lower case (true/false) to match how they are
    written in configuration files; None is shown as an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = ["FormatConfig", "STYLES", "format_value"]
