"""Central configuration and constants for ``should-color``."""

from __future__ import annotations

import tomllib
from pathlib import Path

from should_color._meta import logger
from should_color.errors import ConfigError
from should_color.resolver import ResolverConfig

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# Table read from pyproject.toml.
TOOL_TABLE = "should-color"


def _get_table_from_pyproject(pyproject: Path) -> dict[str, object] | None:
    """Extract the ``[tool.should-color]`` table from *pyproject*."""
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", pyproject, e)
        return None

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        msg = f"[tool] in {pyproject} must be a table"
        raise ConfigError(msg)
    table = tool.get(TOOL_TABLE)
    if table is None:
        return None
    if not isinstance(table, dict):
        msg = f"[tool.{TOOL_TABLE}] in {pyproject} must be a table"
        raise ConfigError(msg)
    return table


def load_config(pyproject: Path | None = None) -> ResolverConfig:
    """Load the resolver configuration from a ``pyproject.toml``.

    Without an explicit path ``./pyproject.toml`` is used when it exists. An explicit path that
    does not exist raises :class:`ConfigError`; everything else missing yields the defaults.
    """
    if pyproject is not None:
        path = pyproject.resolve()
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
    else:
        path = Path("./pyproject.toml").resolve()
        if not path.is_file():
            return ResolverConfig()

    table = _get_table_from_pyproject(path)
    if table is None:
        return ResolverConfig()

    logger.info("Using should-color settings from %s", path)
    return ResolverConfig.from_mapping(table)


__all__ = ["LOG_FORMAT", "TOOL_TABLE", "load_config"]
