"""termtint: ANSI-styled terminal output that degrades to plain text.

A Printer wraps a text stream and applies ANSI SGR styles only when the
stream is an interactive terminal, so the same calls produce clean text
when output is redirected to a file or pipe.
"""

from termtint.errors import ConfigError, UnknownStyleError
from termtint.printer import Printer, stderr, stdout
from termtint.styles import Style, activate, apply_styles, join, parse_styles
from termtint.terminal import ColorMode, is_terminal, resolve_styling, use_color

__version__ = "0.1.0"

__all__ = [
    "ColorMode",
    "ConfigError",
    "Printer",
    "Style",
    "UnknownStyleError",
    "activate",
    "apply_styles",
    "is_terminal",
    "join",
    "parse_styles",
    "resolve_styling",
    "stderr",
    "stdout",
    "use_color",
]
