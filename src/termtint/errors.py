"""Error types raised while turning user input into styles or settings.

The printing path itself defines no errors: a failing sink raises its own
exception (usually OSError) straight through to the caller.
"""

from __future__ import annotations


class UnknownStyleError(ValueError):
    """A style name that matches no Style member."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown style: {name!r}")
        self.name = name


class ConfigError(ValueError):
    """An invalid value in termtint.toml or on the command line.

    Attributes:
        key: Dotted setting name (e.g. 'output.color').
        value: The rejected value.
    """

    def __init__(self, key: str, value: object, expected: str = "") -> None:
        message = f"invalid value for {key}: {value!r}"
        if expected:
            message += f" (expected {expected})"
        super().__init__(message)
        self.key = key
        self.value = value
