"""Centralised exception hierarchy for should-color.

Resolving a color choice never fails; these exceptions are raised only at the boundaries where
text is parsed into a :class:`~should_color.types.ColorChoice` or configuration is loaded.
"""

from __future__ import annotations


class ShouldColorError(Exception):
    """Base class for all custom should-color exceptions."""


class InvalidColorChoiceError(ShouldColorError, ValueError):
    """A string could not be parsed into a color choice."""


class ConfigError(ShouldColorError):
    """Resolver configuration contains an invalid value."""


__all__ = [
    "ConfigError",
    "InvalidColorChoiceError",
    "ShouldColorError",
]
