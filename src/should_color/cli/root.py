from __future__ import annotations

from typing import Annotated

import typer
from typer.main import get_command

from should_color import __version__
from should_color.cli import env, show
from should_color.cli.util import CliOptions, configure_logging
from should_color.integrations import click_color


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"should-color {__version__}")
        raise typer.Exit


def create_app() -> typer.Typer:
    app = typer.Typer(
        help="Show how should-color resolves the color choice in the current environment.",
        context_settings={"help_option_names": ["-h", "--help"], "color": click_color()},
        no_args_is_help=True,
    )

    @app.callback()
    def _root(  # noqa: PLR0913
        ctx: typer.Context,
        *,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                help="Show version and exit.",
                callback=_version_callback,
                is_eager=True,
            ),
        ] = False,
        quiet: Annotated[bool, typer.Option("-q", "--quiet", help="Only log errors.")] = False,
        verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Verbose logging.")] = False,
        debug: Annotated[
            bool,
            typer.Option("--debug", help="Debug logging; re-raise errors with tracebacks."),
        ] = False,
    ) -> None:
        if quiet and verbose:
            msg = "--quiet and --verbose cannot be combined"
            raise typer.BadParameter(msg, param_hint="--quiet")
        configure_logging(quiet=quiet, verbose=verbose, debug=debug)
        ctx.obj = CliOptions(debug=debug, quiet=quiet, verbose=verbose)

    show.register(app)
    env.register(app)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
