"""Tests for configuration loading and module side-effect behavior."""

from __future__ import annotations

import importlib
import logging
import sys
import textwrap
from typing import TYPE_CHECKING

import pytest

from should_color import ResolverConfig
from should_color.config import load_config
from should_color.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from _pytest.monkeypatch import MonkeyPatch


def _write(tmp_path: Path, body: str) -> Path:
    py = tmp_path / "pyproject.toml"
    py.write_text(textwrap.dedent(body), encoding="utf-8")
    return py


def test_import_has_no_side_effects(monkeypatch: MonkeyPatch) -> None:
    """Importing the package should not configure logging."""
    basic_called = False

    def fake_basic(*args, **kwargs):
        nonlocal basic_called
        basic_called = True

    monkeypatch.setattr(logging, "basicConfig", fake_basic)
    for name in [m for m in sys.modules if m == "should_color" or m.startswith("should_color.")]:
        monkeypatch.delitem(sys.modules, name)

    importlib.import_module("should_color")

    assert not basic_called


def test_load_config_from_table(tmp_path: Path) -> None:
    py = _write(
        tmp_path,
        """
        [tool.should-color]
        no-color = false
        clicolor = true
        """,
    )
    assert load_config(py) == ResolverConfig(enable_no_color=False)


def test_load_config_without_table(tmp_path: Path) -> None:
    py = _write(tmp_path, '[project]\nname = "x"\n')
    assert load_config(py) == ResolverConfig()


def test_load_config_uses_cwd(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    _write(tmp_path, "[tool.should-color]\nclicolor-force = false\n")
    monkeypatch.chdir(tmp_path)
    assert load_config() == ResolverConfig(enable_clicolor_force=False)


def test_load_config_missing_default_file(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert load_config() == ResolverConfig()


def test_load_config_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.toml")


def test_load_config_malformed_toml(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    py = _write(tmp_path, "[tool.should-color\n")
    with caplog.at_level(logging.WARNING, logger="should_color"):
        assert load_config(py) == ResolverConfig()
    assert "Failed to parse" in caplog.text


def test_load_config_bad_value(tmp_path: Path) -> None:
    py = _write(tmp_path, '[tool.should-color]\nclicolor = "0"\n')
    with pytest.raises(ConfigError):
        load_config(py)


def test_load_config_table_not_a_table(tmp_path: Path) -> None:
    py = _write(tmp_path, '[tool]\nshould-color = "on"\n')
    with pytest.raises(ConfigError, match="must be a table"):
        load_config(py)


def test_load_config_tool_not_a_table(tmp_path: Path) -> None:
    py = _write(tmp_path, "tool = 1\n")
    with pytest.raises(ConfigError, match=r"\[tool\] .* must be a table"):
        load_config(py)
