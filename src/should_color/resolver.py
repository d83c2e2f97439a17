"""Resolution of the output color choice.

The choice is determined by taking into account, from higher to lower priority:

1. the ``CLICOLOR_FORCE`` environment variable,
2. the explicit user preference (for instance a ``--color`` command line option),
3. the ``CLICOLOR`` environment variable,
4. the ``NO_COLOR`` environment variable,
5. the application default.

The first signal that fires wins. Each environment check can be switched off through
:class:`ResolverConfig`; a disabled check never reads its variable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from should_color._meta import logger
from should_color.env import (
    CLICOLOR,
    CLICOLOR_FORCE,
    NO_COLOR,
    clicolor_choice,
    clicolor_force_choice,
    no_color_choice,
)
from should_color.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from should_color.types import ColorChoice


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Which environment checks take part in resolution."""

    enable_clicolor: bool = True
    enable_clicolor_force: bool = True
    enable_no_color: bool = True

    # keys accepted in a ``[tool.should-color]`` table
    KEYS: ClassVar[dict[str, str]] = {
        "clicolor": "enable_clicolor",
        "clicolor-force": "enable_clicolor_force",
        "no-color": "enable_no_color",
    }

    @classmethod
    def from_mapping(cls, table: Mapping[str, object]) -> ResolverConfig:
        """Build a config from a mapping of ``KEYS`` to booleans.

        Unknown keys are logged and ignored. A non-boolean value raises :class:`ConfigError`.
        """
        values: dict[str, bool] = {}
        for key, value in table.items():
            field = cls.KEYS.get(key)
            if field is None:
                logger.warning("Ignoring unknown should-color setting: %s", key)
                continue
            if not isinstance(value, bool):
                msg = f"Setting {key!r} must be a boolean, got {value!r}"
                raise ConfigError(msg)
            values[field] = value
        return cls(**values)


class Resolver:
    """Combine environment signals, a user preference and a default into one choice."""

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self.config = config or ResolverConfig()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"

    def preference(
        self,
        user_preference: ColorChoice | None,
        environ: Mapping[str, str] | None = None,
    ) -> ColorChoice | None:
        """Return the choice dictated by the signals, or ``None`` if none of them fires."""
        cfg = self.config

        if cfg.enable_clicolor_force:
            choice = clicolor_force_choice(environ)
            if choice is not None:
                logger.debug("%s is set: forcing %s", CLICOLOR_FORCE, choice)
                return choice

        if user_preference is not None:
            logger.debug("using explicit preference: %s", user_preference)
            return user_preference

        if cfg.enable_clicolor:
            choice = clicolor_choice(environ)
            if choice is not None:
                logger.debug("%s is set: %s", CLICOLOR, choice)
                return choice

        if cfg.enable_no_color:
            choice = no_color_choice(environ)
            if choice is not None:
                logger.debug("%s is set: %s", NO_COLOR, choice)
                return choice

        return None

    def resolve(
        self,
        user_preference: ColorChoice | None,
        default: ColorChoice,
        environ: Mapping[str, str] | None = None,
    ) -> ColorChoice:
        """Resolve the final choice, falling back to *default* when no signal fires."""
        choice = self.preference(user_preference, environ)
        if choice is None:
            logger.debug("no color signal: using default %s", default)
            return default
        return choice


_DEFAULT_RESOLVER = Resolver()


def _resolver_for(config: ResolverConfig | None) -> Resolver:
    return _DEFAULT_RESOLVER if config is None else Resolver(config)


def preference(
    user_preference: ColorChoice | None,
    *,
    config: ResolverConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> ColorChoice | None:
    """Module-level shortcut for :meth:`Resolver.preference`."""
    return _resolver_for(config).preference(user_preference, environ)


def resolve(
    user_preference: ColorChoice | None,
    default: ColorChoice,
    *,
    config: ResolverConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> ColorChoice:
    """Resolve the output color choice.

    Examples
    --------
    With ``CLICOLOR_FORCE=1`` in the environment the force wins over everything::

        >>> resolve(ColorChoice.NEVER, ColorChoice.NEVER, environ={"CLICOLOR_FORCE": "1"})
        <ColorChoice.ALWAYS: 'always'>

    With nothing set the default is returned::

        >>> resolve(None, ColorChoice.AUTO, environ={})
        <ColorChoice.AUTO: 'auto'>
    """
    return _resolver_for(config).resolve(user_preference, default, environ)


__all__ = ["Resolver", "ResolverConfig", "preference", "resolve"]
