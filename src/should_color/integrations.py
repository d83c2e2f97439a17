"""Conversions between :class:`ColorChoice` and the color settings of click, typer and rich.

click expresses color as a tri-state ``bool | None`` (``Context.color`` and the ``color`` context
setting): ``True`` forces color, ``False`` strips it and ``None`` lets click decide from the
stream. The mapping below is a plain value translation in both directions.
"""

from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING, Any

import click
from rich.console import Console

from should_color.errors import InvalidColorChoiceError
from should_color.resolver import resolve
from should_color.stream import for_stream, stream_is_terminal
from should_color.types import ColorChoice

if TYPE_CHECKING:
    from collections.abc import Mapping

    from should_color.resolver import ResolverConfig

_TO_CLICK: dict[ColorChoice, bool | None] = {
    ColorChoice.NEVER: False,
    ColorChoice.AUTO: None,
    ColorChoice.ALWAYS: True,
}


def to_click_color(choice: ColorChoice) -> bool | None:
    """Translate *choice* into click's ``color`` tri-state."""
    return _TO_CLICK[choice]


def from_click_color(value: bool | None) -> ColorChoice:  # noqa: FBT001
    """Translate click's ``color`` tri-state into a :class:`ColorChoice`."""
    if value is None:
        return ColorChoice.AUTO
    return ColorChoice.ALWAYS if value else ColorChoice.NEVER


def click_color(
    default: ColorChoice = ColorChoice.AUTO,
    *,
    config: ResolverConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool | None:
    """Resolve from the environment alone and return a value for click's ``color`` setting.

    Intended for help output, before any ``--color`` option has been parsed::

        @click.command(context_settings={"color": click_color()})
        def main(): ...
    """
    return to_click_color(resolve(None, default, config=config, environ=environ))


class ColorChoiceParamType(click.ParamType):
    """click parameter type accepting ``never``, ``auto`` or ``always``."""

    name = "when"

    def convert(self, value, param, ctx):
        if isinstance(value, ColorChoice):
            return value
        try:
            return ColorChoice.from_str(value)
        except InvalidColorChoiceError as exc:
            self.fail(str(exc), param, ctx)
        return None

    def get_metavar(self, param, ctx=None):
        return "[" + "|".join(choice.value for choice in ColorChoice) + "]"


COLOR_CHOICE = ColorChoiceParamType()


def color_option(*param_decls: str, **attrs: Any):
    """Decorator adding a ``--color WHEN`` option that yields ``ColorChoice | None``."""
    attrs.setdefault("type", COLOR_CHOICE)
    attrs.setdefault("default", None)
    attrs.setdefault("help", "When to use colors: never, auto or always.")
    return click.option(*(param_decls or ("--color",)), **attrs)


# --------------------------------------------------------------------------- #
# rich                                                                        #
# --------------------------------------------------------------------------- #


def console_kwargs(choice: ColorChoice, stream: IO[str] | None = None) -> dict[str, Any]:
    """Return ``rich.console.Console`` keyword arguments honoring *choice* for *stream*."""
    target = sys.stdout if stream is None else stream
    color = for_stream(choice, stream_is_terminal(target))
    return {
        "file": target,
        "force_terminal": color,
        "color_system": "standard" if color else None,
        "no_color": not color,
    }


def make_console(choice: ColorChoice, stream: IO[str] | None = None, **kwargs: Any) -> Console:
    """Build a rich console that colorizes exactly when *choice* says so for *stream*.

    Extra *kwargs* go to ``Console``; the keys produced by :func:`console_kwargs` always win.
    """
    return Console(**{**kwargs, **console_kwargs(choice, stream)})


__all__ = [
    "COLOR_CHOICE",
    "ColorChoiceParamType",
    "click_color",
    "color_option",
    "console_kwargs",
    "from_click_color",
    "make_console",
    "to_click_color",
]
