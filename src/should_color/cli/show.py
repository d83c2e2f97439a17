from __future__ import annotations

import sys
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from should_color.cli.errors import EXIT_OK
from should_color.cli.util import load_config_or_exit, options_from
from should_color.integrations import make_console
from should_color.resolver import Resolver
from should_color.stream import for_stream, stream_is_terminal
from should_color.types import ColorChoice


def register(app: typer.Typer) -> None:
    @app.command("show")
    def show(
        ctx: typer.Context,
        color: Annotated[
            ColorChoice | None,
            typer.Option("--color", metavar="WHEN", case_sensitive=False, help="Coloring preference."),
        ] = None,
        default: Annotated[
            ColorChoice,
            typer.Option("--default", metavar="WHEN", case_sensitive=False, help="Application default."),
        ] = ColorChoice.AUTO,
        config: Annotated[
            Path | None,
            typer.Option("--config", help="pyproject.toml to read [tool.should-color] from."),
        ] = None,
    ) -> None:
        """Resolve the color choice and report the decision for stdout and stderr."""
        opts = options_from(ctx)
        resolver = Resolver(load_config_or_exit(config, opts))
        choice = resolver.resolve(color, default)

        color_stdout = for_stream(choice, stream_is_terminal(sys.stdout))
        color_stderr = for_stream(choice, stream_is_terminal(sys.stderr))

        typer.echo(f"         cli = {color.value if color else None}")
        typer.echo(f"color_choice = {choice.value}")

        out = make_console(choice, sys.stdout, highlight=False)
        out.print(f"[italic bright_green]Colorize stdout[/]: [bright_yellow]{color_stdout}[/]")
        err = make_console(choice, sys.stderr, highlight=False)
        err.print(f"[underline bright_red]Colorize stderr[/]: [bright_yellow]{color_stderr}[/]")

        raise typer.Exit(code=EXIT_OK)


__all__ = ["register"]
