"""Tests for the environment variable readers."""

from __future__ import annotations

import pytest

from should_color import env
from should_color.types import ColorChoice

TRUE_LIKE = ["", "1", "false", "true", "=", "no"]


class TestReadClicolorForce:
    def test_unset(self) -> None:
        assert env.read_clicolor_force() is None

    def test_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLICOLOR_FORCE", "0")
        assert env.read_clicolor_force() is False
        assert env.clicolor_force_choice() is None

    @pytest.mark.parametrize("value", TRUE_LIKE)
    def test_true_like(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("CLICOLOR_FORCE", value)
        assert env.read_clicolor_force() is True
        assert env.clicolor_force_choice() is ColorChoice.ALWAYS


class TestReadClicolor:
    def test_unset(self) -> None:
        assert env.read_clicolor() is None
        assert env.clicolor_choice() is None

    def test_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLICOLOR", "0")
        assert env.read_clicolor() is False
        assert env.clicolor_choice() is ColorChoice.NEVER

    @pytest.mark.parametrize("value", TRUE_LIKE)
    def test_true_like(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("CLICOLOR", value)
        assert env.read_clicolor() is True
        assert env.clicolor_choice() is ColorChoice.ALWAYS


class TestReadNoColor:
    def test_unset(self) -> None:
        assert env.read_no_color() is False
        assert env.no_color_choice() is None

    @pytest.mark.parametrize("value", ["", "0", "1", "false", "true", "="])
    def test_any_value_counts(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("NO_COLOR", value)
        assert env.read_no_color() is True
        assert env.no_color_choice() is ColorChoice.NEVER


def test_explicit_environ_ignores_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert env.read_no_color({}) is False
    assert env.read_clicolor({"CLICOLOR": "0"}) is False
    assert env.read_clicolor_force({"CLICOLOR_FORCE": ""}) is True


def test_readers_do_not_mutate_environ() -> None:
    snapshot = {"CLICOLOR": "1"}
    env.read_clicolor(snapshot)
    env.read_clicolor_force(snapshot)
    env.read_no_color(snapshot)
    assert snapshot == {"CLICOLOR": "1"}


def test_raw_values() -> None:
    assert env.raw_values({"NO_COLOR": ""}) == {
        "CLICOLOR_FORCE": None,
        "CLICOLOR": None,
        "NO_COLOR": "",
    }


def test_variable_names() -> None:
    assert (env.CLICOLOR_FORCE, env.CLICOLOR, env.NO_COLOR) == ("CLICOLOR_FORCE", "CLICOLOR", "NO_COLOR")
