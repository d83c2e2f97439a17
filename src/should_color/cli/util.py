"""Utilities and helper functions for implementing CLI-specific functionality."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

import typer

from should_color._meta import logger
from should_color.cli.errors import EXIT_CONFIG
from should_color.config import LOG_FORMAT, load_config
from should_color.errors import ConfigError

if TYPE_CHECKING:  # pragma: no cover
    from pathlib import Path

    from should_color.resolver import ResolverConfig


@dataclasses.dataclass(slots=True)
class CliOptions:
    """Global flags collected by the root callback."""

    debug: bool = False
    quiet: bool = False
    verbose: bool = False


def configure_logging(*, quiet: bool, verbose: bool, debug: bool) -> None:
    level = logging.ERROR if quiet else (logging.DEBUG if (verbose or debug) else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if debug:
        logger.debug("debug logging enabled")


def load_config_or_exit(pyproject: Path | None, opts: CliOptions) -> ResolverConfig:
    try:
        return load_config(pyproject)
    except ConfigError as exc:
        if opts.debug:
            raise
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIG) from exc


def options_from(ctx: typer.Context) -> CliOptions:
    obj = ctx.find_object(CliOptions)
    return obj if obj is not None else CliOptions()
