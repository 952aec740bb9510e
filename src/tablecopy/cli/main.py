"""tablecopy main entry point and command registration."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import sentry_sdk
import typer

from tablecopy.__about__ import __version__
from tablecopy.cli.commands.config import config_app
from tablecopy.cli.commands.export import export_command
from tablecopy.core.config import load_config, resolve_config
from tablecopy.core.exceptions import ConfigError, TableCopyError
from tablecopy.core.logging import setup_logging
from tablecopy.core.monitoring import setup_sentry

app = typer.Typer(
    help="tablecopy - export rendered tables as text, CSV, TSV or SQL",
    no_args_is_help=True,
)

app.add_typer(config_app, name="config")
app.command("export")(export_command)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tablecopy {__version__}")
        raise typer.Exit()


def _sentry_dsn(config_file: Path | None) -> str | None:
    try:
        return resolve_config(load_config(config_file)).sentry_dsn
    except ConfigError:
        # reported by the command that needs the configuration
        return None


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable verbose logging"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log warnings and errors"),
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config file"),
    ] = None,
) -> None:
    """tablecopy - export rendered tables as text, CSV, TSV or SQL."""
    setup_logging(verbose=verbose, quiet=quiet)
    setup_sentry(_sentry_dsn(config_file))

    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file


def run() -> None:
    """Entry point with global error handling."""
    try:
        app()
    except TableCopyError as e:
        sentry_sdk.capture_exception(e)
        typer.echo(f"Error: {e.message}", err=True)
        raise SystemExit(e.exit_code) from None
    except SystemExit:
        raise
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except Exception as e:
        sentry_sdk.capture_exception(e)
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None
