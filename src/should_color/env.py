"""Readers for the color-related environment variables.

Three conventions are recognised:

- ``CLICOLOR_FORCE`` (https://bixense.com/clicolors/): any value other than ``"0"`` forces color,
  even when the output is not a terminal.
- ``CLICOLOR`` (same source): ``"0"`` disables color, any other value enables it.
- ``NO_COLOR`` (https://no-color.org): presence alone disables color, whatever the value.

A variable set to the empty string counts as set. The ``CLICOLOR`` family has a falsy token
(``"0"``); ``NO_COLOR`` has none.

Every reader accepts an optional *environ* mapping so callers can resolve against a snapshot;
``os.environ`` is used otherwise. Nothing here writes to the environment.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from should_color.types import ColorChoice

if TYPE_CHECKING:
    from collections.abc import Mapping

CLICOLOR_FORCE = "CLICOLOR_FORCE"
"""Name of the ``CLICOLOR_FORCE`` environment variable."""
CLICOLOR = "CLICOLOR"
"""Name of the ``CLICOLOR`` environment variable."""
NO_COLOR = "NO_COLOR"
"""Name of the ``NO_COLOR`` environment variable."""

FALSY_TOKEN = "0"

ENV_VARS: tuple[str, ...] = (CLICOLOR_FORCE, CLICOLOR, NO_COLOR)


def _lookup(name: str, environ: Mapping[str, str] | None) -> str | None:
    env = os.environ if environ is None else environ
    return env.get(name)


def read_clicolor_force(environ: Mapping[str, str] | None = None) -> bool | None:
    """Return ``None`` if ``CLICOLOR_FORCE`` is unset, ``False`` if it is ``"0"``, else ``True``."""
    value = _lookup(CLICOLOR_FORCE, environ)
    if value is None:
        return None
    return value != FALSY_TOKEN


def read_clicolor(environ: Mapping[str, str] | None = None) -> bool | None:
    """Return ``None`` if ``CLICOLOR`` is unset, ``False`` if it is ``"0"``, else ``True``."""
    value = _lookup(CLICOLOR, environ)
    if value is None:
        return None
    return value != FALSY_TOKEN


def read_no_color(environ: Mapping[str, str] | None = None) -> bool:
    """Return whether ``NO_COLOR`` is present, with any value including ``""``."""
    return _lookup(NO_COLOR, environ) is not None


def clicolor_force_choice(environ: Mapping[str, str] | None = None) -> ColorChoice | None:
    """Map ``CLICOLOR_FORCE`` to ``ALWAYS`` when it is true-like, else ``None``."""
    return ColorChoice.ALWAYS if read_clicolor_force(environ) else None


def clicolor_choice(environ: Mapping[str, str] | None = None) -> ColorChoice | None:
    """Map ``CLICOLOR`` to ``ALWAYS``/``NEVER``, or ``None`` when unset."""
    value = read_clicolor(environ)
    if value is None:
        return None
    return ColorChoice.ALWAYS if value else ColorChoice.NEVER


def no_color_choice(environ: Mapping[str, str] | None = None) -> ColorChoice | None:
    """Map a present ``NO_COLOR`` to ``NEVER``, else ``None``."""
    return ColorChoice.NEVER if read_no_color(environ) else None


def raw_values(environ: Mapping[str, str] | None = None) -> dict[str, str | None]:
    """Return the raw value of each recognised variable (``None`` when unset)."""
    return {name: _lookup(name, environ) for name in ENV_VARS}


__all__ = [
    "CLICOLOR",
    "CLICOLOR_FORCE",
    "ENV_VARS",
    "FALSY_TOKEN",
    "NO_COLOR",
    "clicolor_choice",
    "clicolor_force_choice",
    "no_color_choice",
    "raw_values",
    "read_clicolor",
    "read_clicolor_force",
    "read_no_color",
]
