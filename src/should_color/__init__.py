"""Determine whether command line output should use colors or not."""

from should_color._meta import __version__, logger
from should_color.env import (
    CLICOLOR,
    CLICOLOR_FORCE,
    NO_COLOR,
    read_clicolor,
    read_clicolor_force,
    read_no_color,
)
from should_color.errors import ConfigError, InvalidColorChoiceError, ShouldColorError
from should_color.resolver import Resolver, ResolverConfig, preference, resolve
from should_color.stream import for_stream, should_colorize, stream_is_terminal
from should_color.types import ColorChoice

__all__ = [
    "CLICOLOR",
    "CLICOLOR_FORCE",
    "NO_COLOR",
    "ColorChoice",
    "ConfigError",
    "InvalidColorChoiceError",
    "Resolver",
    "ResolverConfig",
    "ShouldColorError",
    "__version__",
    "for_stream",
    "logger",
    "preference",
    "read_clicolor",
    "read_clicolor_force",
    "read_no_color",
    "resolve",
    "should_colorize",
    "stream_is_terminal",
]
