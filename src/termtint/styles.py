"""ANSI SGR style tokens and escape-sequence composition.

Everything in this module is pure: no I/O and no dependence on whether
the output is a terminal. Deciding *whether* to style is the Printer's
job (see termtint.printer).
"""

from __future__ import annotations

import enum
from collections.abc import Iterable

from termtint.errors import UnknownStyleError

START_MARKER = "\033["
END_MARKER = "m"
SEPARATOR = ";"


class Style(enum.Enum):
    """A single SGR instruction. Values are the SGR parameter codes."""

    RESET = "0"
    BOLD = "1"      # Somewhat brighter on most terminals
    DEFAULT = "22"  # Normal weight

    FOREGROUND_BLACK = "30"
    FOREGROUND_RED = "31"
    FOREGROUND_GREEN = "32"
    FOREGROUND_YELLOW = "33"
    FOREGROUND_BLUE = "34"
    FOREGROUND_MAGENTA = "35"
    FOREGROUND_CYAN = "36"
    FOREGROUND_WHITE = "37"

    BACKGROUND_BLACK = "40"
    BACKGROUND_RED = "41"
    BACKGROUND_GREEN = "42"
    BACKGROUND_YELLOW = "43"
    BACKGROUND_BLUE = "44"
    BACKGROUND_MAGENTA = "45"
    BACKGROUND_CYAN = "46"
    BACKGROUND_WHITE = "47"

    @property
    def code(self) -> str:
        """The SGR parameter, e.g. '1' for BOLD."""
        return self.value

    @property
    def label(self) -> str:
        """Short command-line name, e.g. 'bold', 'fg-red', 'bg-white'."""
        name = self.name.lower()
        if name.startswith("foreground_"):
            return "fg-" + name[len("foreground_"):]
        if name.startswith("background_"):
            return "bg-" + name[len("background_"):]
        return name

    @classmethod
    def from_name(cls, name: str) -> Style:
        """Look up a style by label or member name.

        Matching is case-insensitive and treats '_' and '-' alike, so
        'fg-red', 'FOREGROUND_RED' and 'foreground-red' all give
        Style.FOREGROUND_RED.
        """
        key = name.strip().lower().replace("_", "-")
        if key.startswith("foreground-"):
            key = "fg-" + key[len("foreground-"):]
        elif key.startswith("background-"):
            key = "bg-" + key[len("background-"):]
        for style in cls:
            if style.label == key:
                return style
        raise UnknownStyleError(name)


def parse_styles(names: Iterable[str]) -> list[Style]:
    """Convert style names to Style members, keeping their order."""
    return [Style.from_name(name) for name in names]


def join(styles: Iterable[Style]) -> str:
    """Join style codes with the SGR separator.

    >>> join([Style.BOLD, Style.FOREGROUND_BLACK])
    '1;30'
    """
    return SEPARATOR.join(style.code for style in styles)


def activate(*styles: Style) -> str:
    """Return the escape sequence that switches on all given styles.

    With no styles this is the bare ``ESC[m`` sequence.
    """
    return START_MARKER + join(styles) + END_MARKER


def apply_styles(message: str, *styles: Style) -> str:
    """Wrap message in the activation sequence and a trailing reset.

    Without styles the message is returned untouched.
    """
    if not styles:
        return message
    return activate(*styles) + message + activate(Style.RESET)
