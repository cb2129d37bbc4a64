"""Tests for loading termtint.toml."""

import tomllib

import pytest

from termtint.config import (
    OutputConfig,
    StylesConfig,
    TermtintConfig,
    load_config,
)
from termtint.errors import ConfigError, UnknownStyleError
from termtint.styles import Style
from termtint.terminal import ColorMode


class TestDefaults:
    def test_dataclass_defaults(self):
        config = TermtintConfig()
        assert config.output == OutputConfig(color=ColorMode.AUTO, stream="stdout")
        assert config.styles == StylesConfig(default=[])

    def test_empty_file(self, write_config):
        config = load_config(write_config(""))
        assert config == TermtintConfig()


class TestLoadConfig:
    def test_full_file(self, write_config):
        path = write_config("""\
            [output]
            color = "always"
            stream = "stderr"

            [styles]
            default = ["bold", "fg-cyan"]
        """)
        config = load_config(path)
        assert config.output.color is ColorMode.ALWAYS
        assert config.output.stream == "stderr"
        assert config.styles.default == [Style.BOLD, Style.FOREGROUND_CYAN]

    def test_accepts_str_path(self, write_config):
        path = write_config('[output]\ncolor = "never"\n')
        assert load_config(str(path)).output.color is ColorMode.NEVER

    def test_single_default_style_string(self, write_config):
        path = write_config('[styles]\ndefault = "fg-red"\n')
        assert load_config(path).styles.default == [Style.FOREGROUND_RED]

    def test_default_path_is_cwd(self, write_config, tmp_path, monkeypatch):
        write_config('[output]\nstream = "stderr"\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().output.stream == "stderr"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")


class TestInvalidConfig:
    def test_bad_color(self, write_config):
        path = write_config('[output]\ncolor = "rainbow"\n')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "output.color"

    def test_bad_stream(self, write_config):
        path = write_config('[output]\nstream = "stdin"\n')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "output.stream"

    def test_unknown_style(self, write_config):
        path = write_config('[styles]\ndefault = ["bold", "glitter"]\n')
        with pytest.raises(UnknownStyleError):
            load_config(path)

    def test_styles_wrong_type(self, write_config):
        path = write_config("[styles]\ndefault = 3\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_malformed_toml(self, write_config):
        path = write_config("[output\n")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)

    def test_output_not_a_table(self, write_config):
        path = write_config('output = "x"\n')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "output"

    def test_styles_not_a_table(self, write_config):
        path = write_config("styles = 3\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "styles"

    def test_non_string_style_name(self, write_config):
        path = write_config("[styles]\ndefault = [1]\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.key == "styles.default"
        assert exc_info.value.value == 1
