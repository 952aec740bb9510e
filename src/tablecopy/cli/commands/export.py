"""The export command: rendered table in, text/CSV/TSV/SQL out."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from tablecopy.cli.commands._shared import build_selection, get_config
from tablecopy.cli.output import open_sink
from tablecopy.core.exceptions import TableCopyError
from tablecopy.core.export import export_data
from tablecopy.core.layout import detect_layout
from tablecopy.core.lines import BufferLineSource
from tablecopy.core.logging import get_logger
from tablecopy.core.models import ClipboardFormat, CopyCommand
from tablecopy.core.table_source import read_table_lines


def export_command(
    ctx: typer.Context,
    file: Annotated[
        Path | None,
        typer.Argument(help="psql aligned output to export (default: stdin)"),
    ] = None,
    format: Annotated[
        ClipboardFormat | None,
        typer.Option("--format", "-f", help="Output format"),
    ] = None,
    command: Annotated[
        CopyCommand,
        typer.Option("--command", "-c", help="Part of the table to export"),
    ] = CopyCommand.ALL,
    cursor_row: Annotated[
        int,
        typer.Option("--cursor-row", help="Cursor data row (1-based)"),
    ] = 1,
    cursor_column: Annotated[
        int,
        typer.Option("--cursor-column", help="Cursor column (1-based)"),
    ] = 1,
    rows: Annotated[
        int,
        typer.Option("--rows", "-n", help="Row count for top/bottom"),
    ] = 0,
    percent: Annotated[
        float,
        typer.Option("--percent", help="Percent of data rows for top/bottom"),
    ] = 0.0,
    table_name: Annotated[
        str | None,
        typer.Option("--table-name", "-t", help="Target table for INSERT formats"),
    ] = None,
    select_rows: Annotated[
        str | None,
        typer.Option("--select-rows", help="Selected data rows A:B (1-based)"),
    ] = None,
    select_columns: Annotated[
        str | None,
        typer.Option("--select-columns", help="Selected columns A:B (1-based)"),
    ] = None,
    bookmark: Annotated[
        list[int] | None,
        typer.Option("--bookmark", "-b", help="Bookmarked data row (1-based), repeatable"),
    ] = None,
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Search string for --command searched"),
    ] = None,
    ignore_case: Annotated[
        bool,
        typer.Option("--ignore-case", "-i", help="Case-insensitive search"),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to file instead of stdout"),
    ] = None,
    force8bit: Annotated[
        bool | None,
        typer.Option("--force8bit/--no-force8bit", help="Treat input as 8-bit text"),
    ] = None,
    empty_string_is_null: Annotated[
        bool | None,
        typer.Option(
            "--empty-string-is-null/--empty-string-is-empty",
            help="Export empty fields as NULL",
        ),
    ] = None,
    no_cursor: Annotated[
        bool | None,
        typer.Option("--no-cursor/--cursor", help="Pager has the row cursor hidden"),
    ] = None,
    vertical_cursor: Annotated[
        bool | None,
        typer.Option(
            "--vertical-cursor/--no-vertical-cursor",
            help="Pager shows the column cursor",
        ),
    ] = None,
) -> None:
    """Export a rendered table as text, CSV, TSV or SQL INSERT statements."""
    log = get_logger(__name__)

    try:
        config = get_config(
            ctx,
            format=format,
            table_name=table_name,
            force8bit=force8bit,
            empty_string_is_null=empty_string_is_null,
            no_cursor=no_cursor,
            vertical_cursor=vertical_cursor,
        )
        options = config.options

        lines = read_table_lines(file, force8bit=options.force8bit)
        layout = detect_layout(lines)
        selection = build_selection(layout, select_rows, select_columns)
        bookmarks = [layout.first_data_row + n - 1 for n in bookmark or []]
        source = BufferLineSource(
            lines, bookmarks=bookmarks, search=search, ignore_case=ignore_case
        )
        log.debug(
            "detected layout",
            lines=len(source),
            columns=layout.columns,
            first_data_row=layout.first_data_row,
            last_data_row=layout.last_data_row,
        )

        with open_sink(output, force8bit=options.force8bit) as sink:
            export_data(
                source,
                layout,
                sink,
                command=command,
                format=config.default_format,
                options=options,
                selection=selection,
                cursor_row=cursor_row - 1,
                cursor_column=cursor_column,
                rows=rows,
                percent=percent,
                table_name=config.table_name,
            )
    except TableCopyError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(exc.exit_code) from exc
