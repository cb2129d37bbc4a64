"""Terminal capability detection.

Decides once, per stream, whether ANSI styling should be emitted. Honours
the NO_COLOR and FORCE_COLOR conventions and TERM=dumb.
"""

from __future__ import annotations

import enum
import os
from typing import TextIO

from termtint.errors import ConfigError


class ColorMode(enum.Enum):
    """How a Printer decides whether to style its output."""

    AUTO = "auto"      # Style only when the stream is a terminal
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def parse(cls, value: str, key: str = "color") -> ColorMode:
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ConfigError(key, value, expected=f"one of {choices}") from None


def is_terminal(stream: object) -> bool:
    """True if stream is connected to an interactive character device.

    Streams without isatty, and closed or detached streams whose isatty
    raises, count as not a terminal.
    """
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        return False


def use_color(stream: TextIO) -> bool:
    """True if stream should get color under the environment's conventions.

    NO_COLOR (non-empty) always wins, then FORCE_COLOR (non-empty), then
    TERM=dumb, then the stream's own TTY check.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("TERM") == "dumb":
        return False
    return is_terminal(stream)


def resolve_styling(stream: TextIO, mode: ColorMode = ColorMode.AUTO) -> bool:
    """Turn a ColorMode into the fixed styling flag for a Printer."""
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    return use_color(stream)
