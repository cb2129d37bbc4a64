"""Load output settings from termtint.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from termtint.errors import ConfigError
from termtint.styles import Style, parse_styles
from termtint.terminal import ColorMode

DEFAULT_CONFIG_PATH = Path("termtint.toml")

STREAMS = ("stdout", "stderr")


@dataclass
class OutputConfig:
    """Where output goes and when it is styled."""

    color: ColorMode = ColorMode.AUTO
    stream: str = "stdout"


@dataclass
class StylesConfig:
    """Styles used when the command line names none."""

    default: list[Style] = field(default_factory=list)


@dataclass
class TermtintConfig:
    """Full configuration loaded from termtint.toml."""

    output: OutputConfig = field(default_factory=OutputConfig)
    styles: StylesConfig = field(default_factory=StylesConfig)


def _section(data: dict, name: str) -> dict:
    """Return the [name] table, which must be a TOML table if present."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(name, section, expected="a table")
    return section


def _build_output(data: dict) -> OutputConfig:
    """Build the [output] section from parsed TOML data."""
    section = _section(data, "output")
    if not section:
        return OutputConfig()

    stream = section.get("stream", "stdout")
    if stream not in STREAMS:
        raise ConfigError("output.stream", stream, expected=" or ".join(STREAMS))

    return OutputConfig(
        color=ColorMode.parse(section.get("color", "auto"), key="output.color"),
        stream=stream,
    )


def _build_styles(data: dict) -> StylesConfig:
    """Build the [styles] section from parsed TOML data."""
    names = _section(data, "styles").get("default", [])
    if isinstance(names, str):
        names = [names]
    elif not isinstance(names, list):
        raise ConfigError("styles.default", names, expected="a list of style names")
    for name in names:
        if not isinstance(name, str):
            raise ConfigError("styles.default", name, expected="a style name")
    return StylesConfig(default=parse_styles(names))


def load_config(config_path: Path | str | None = None) -> TermtintConfig:
    """Load configuration from a TOML file.

    If config_path is None, looks for termtint.toml in the current
    directory. A missing file raises FileNotFoundError.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return TermtintConfig(
        output=_build_output(data),
        styles=_build_styles(data),
    )
