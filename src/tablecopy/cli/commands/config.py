"""Configuration management CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from tablecopy.cli.commands._shared import get_config
from tablecopy.core.config import DEFAULT_CONFIG_PATH
from tablecopy.core.exceptions import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

config_app = typer.Typer(help="Configuration management commands")


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if not ctx.invoked_subcommand:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _on_off(value: bool) -> str:
    return "on" if value else "off"


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Display resolved configuration with source attribution."""
    try:
        resolved = get_config(ctx)
    except ConfigError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(exc.exit_code) from exc
    sources = resolved.sources

    typer.echo("Export Settings (resolved):")
    general_fields = [
        ("default_format", resolved.default_format.value),
        ("table_name", resolved.table_name or "not set"),
    ]
    for field_name, value in general_fields:
        typer.echo(f"  {field_name}: {value} ({sources.get(field_name, 'default')})")

    typer.echo("")
    typer.echo("Options:")
    for field_name, value in resolved.options.model_dump().items():
        source = sources.get(field_name, "default")
        typer.echo(f"  {field_name}: {_on_off(value)} ({source})")

    typer.echo("")
    monitoring = "enabled" if resolved.sentry_dsn else "disabled"
    typer.echo(f"Error Reporting: {monitoring}")

    config_path: Path | None = ctx.ensure_object(dict).get("config_file")
    typer.echo(f"Config File: {config_path or DEFAULT_CONFIG_PATH}")
