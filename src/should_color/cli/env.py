from __future__ import annotations

import json
import sys
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer
from rich import box
from rich.table import Table

from should_color.cli.errors import EXIT_OK
from should_color.cli.util import load_config_or_exit, options_from
from should_color.env import (
    CLICOLOR,
    CLICOLOR_FORCE,
    NO_COLOR,
    clicolor_choice,
    clicolor_force_choice,
    no_color_choice,
    raw_values,
)
from should_color.integrations import make_console
from should_color.resolver import Resolver, ResolverConfig
from should_color.types import ColorChoice


def _signal_rows(config: ResolverConfig) -> list[dict[str, object]]:
    values = raw_values()
    checks = (
        (CLICOLOR_FORCE, config.enable_clicolor_force, clicolor_force_choice),
        (CLICOLOR, config.enable_clicolor, clicolor_choice),
        (NO_COLOR, config.enable_no_color, no_color_choice),
    )
    rows: list[dict[str, object]] = []
    for name, enabled, reader in checks:
        choice = reader() if enabled else None
        rows.append({
            "variable": name,
            "value": values[name],
            "enabled": enabled,
            "choice": choice.value if choice else None,
        })
    return rows


def _render_table(rows: list[dict[str, object]], preference: ColorChoice | None) -> Table:
    table = Table(title="Color signals", box=box.SIMPLE_HEAVY, header_style="bold")
    table.add_column("Variable", style="cyan")
    table.add_column("Value")
    table.add_column("Enabled", justify="center")
    table.add_column("Choice")
    for row in rows:
        value = row["value"]
        table.add_row(
            str(row["variable"]),
            "[dim]unset[/dim]" if value is None else repr(value),
            "yes" if row["enabled"] else "[dim]no[/dim]",
            str(row["choice"] or "-"),
        )
    table.caption = f"environment preference: {preference.value if preference else 'none'}"
    return table


def register(app: typer.Typer) -> None:
    @app.command("env")
    def env(
        ctx: typer.Context,
        *,
        as_json: Annotated[bool, typer.Option("--json", help="Emit JSON instead of a table.")] = False,
        config: Annotated[
            Path | None,
            typer.Option("--config", help="pyproject.toml to read [tool.should-color] from."),
        ] = None,
    ) -> None:
        """List the color environment variables and what each of them maps to."""
        opts = options_from(ctx)
        resolver_config = load_config_or_exit(config, opts)
        rows = _signal_rows(resolver_config)
        preference = Resolver(resolver_config).preference(None)

        if as_json:
            payload = {"signals": rows, "preference": preference.value if preference else None}
            typer.echo(json.dumps(payload, indent=2))
            raise typer.Exit(code=EXIT_OK)

        choice = preference or ColorChoice.AUTO
        make_console(choice, sys.stdout).print(_render_table(rows, preference))
        raise typer.Exit(code=EXIT_OK)


__all__ = ["register"]
