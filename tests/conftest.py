"""Shared test fixtures for termtint."""

import textwrap

import pytest

ESC = "\033"


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch):
    """Keep the caller's NO_COLOR/FORCE_COLOR/TERM out of detection tests."""
    for name in ("NO_COLOR", "FORCE_COLOR", "TERM"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_config(tmp_path):
    """Return a function that writes a termtint.toml and returns its path."""

    def _write(body: str, name: str = "termtint.toml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(body))
        return path

    return _write
