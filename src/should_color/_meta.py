"""Installed version and package logger, importable without pulling in the rest of should-color."""

from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("should-color")

logger = logging.getLogger("should_color")

__all__ = ["__version__", "logger"]
