from __future__ import annotations

import pytest
from typer.testing import CliRunner

from should_color.env import ENV_VARS


class FakeStream:
    """Minimal stream exposing a configurable ``isatty``."""

    def __init__(self, *, tty: bool) -> None:
        self.tty = tty
        self.written: list[str] = []

    def isatty(self) -> bool:
        return self.tty

    def write(self, text: str) -> int:
        self.written.append(text)
        return len(text)

    def flush(self) -> None:
        pass


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without any of the color variables set."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def tty() -> FakeStream:
    return FakeStream(tty=True)


@pytest.fixture
def pipe() -> FakeStream:
    return FakeStream(tty=False)
