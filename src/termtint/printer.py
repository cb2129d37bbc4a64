"""Printer: conditional ANSI styling on top of a text stream.

A Printer is bound to a sink and a styling flag fixed at construction. If
the flag is off every operation writes the plain message, so applications
can use one colorized output API and still get clean text when output is
redirected.

Quick start:
    from termtint import Style, stdout

    p = stdout()
    p.printf("Welcome to %s output!", p.styled("colored", Style.FOREGROUND_CYAN), Style.BOLD)
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from termtint.styles import Style, apply_styles
from termtint.terminal import ColorMode, resolve_styling


class Printer:
    """Writes optionally styled text to a borrowed sink.

    The sink is never closed, flushed or otherwise managed by the Printer.
    There is no internal locking: callers writing from several threads
    must serialize calls themselves (e.g. one Printer per thread, or a
    lock around the sink).

    Attributes:
        sink: The text stream written to.
        styling: Whether escape sequences are emitted. Read-only; build a
            new Printer to change it.
    """

    __slots__ = ("_sink", "_styling")

    def __init__(self, sink: TextIO, styling: bool) -> None:
        self._sink = sink
        self._styling = bool(styling)

    @classmethod
    def for_stream(cls, stream: TextIO, mode: ColorMode = ColorMode.AUTO) -> Printer:
        """Create a Printer that styles only if stream is a terminal.

        The capability is checked here, once, and never again.
        """
        return cls(stream, resolve_styling(stream, mode))

    @property
    def sink(self) -> TextIO:
        """The stream this Printer writes to."""
        return self._sink

    @property
    def styling(self) -> bool:
        """True if escape sequences are emitted."""
        return self._styling

    def __repr__(self) -> str:
        return f"Printer(sink={self._sink!r}, styling={self._styling})"

    def print(self, message: str, *styles: Style) -> Any:
        """Write message with styles applied.

        Returns whatever the sink's write() returns. Exceptions from the
        sink propagate unchanged.
        """
        if not self._styling:
            return self._sink.write(message)
        return self._sink.write(apply_styles(message, *styles))

    def println(self, message: str, *styles: Style) -> Any:
        """Like print() with a newline appended before styling.

        The reset sequence therefore comes after the newline.
        """
        return self.print(message + "\n", *styles)

    def printf(self, template: str, *args_and_styles: Any) -> Any:
        """%-format template and print it.

        Any Style among args_and_styles is taken out of the format
        arguments and used to style the whole line instead, wherever it
        appears:

            p.printf("hello, %s", "world", Style.FOREGROUND_RED)

        prints "hello, world" in red if styling is on. Formatting errors
        are raised before anything is written.
        """
        values = []
        styles = []
        for arg in args_and_styles:
            if isinstance(arg, Style):
                styles.append(arg)
            else:
                values.append(arg)
        return self.print(template % tuple(values), *styles)

    def styled(self, text: str, *styles: Style) -> str:
        """Return text styled for embedding in a larger message.

        No output is written. When styling is off text comes back as is.
        """
        if not self._styling:
            return text
        return apply_styles(text, *styles)


def stdout(mode: ColorMode = ColorMode.AUTO) -> Printer:
    """Printer for sys.stdout, styled if stdout is a terminal."""
    return Printer.for_stream(sys.stdout, mode)


def stderr(mode: ColorMode = ColorMode.AUTO) -> Printer:
    """Printer for sys.stderr, styled if stderr is a terminal."""
    return Printer.for_stream(sys.stderr, mode)
