"""Translate a copy command into the rows, columns and row classes to export.

``plan_export`` is pure: it looks only at its arguments and never touches
the line source or the output sink, so invalid arguments are rejected
before anything is written.
"""

from __future__ import annotations

from dataclasses import dataclass

from tablecopy.core.config import ExportOptions
from tablecopy.core.exceptions import InputError
from tablecopy.core.models import (
    ClipboardFormat,
    CopyCommand,
    ExportRange,
    Selection,
    TableLayout,
)


@dataclass
class ExportPlan:
    command: CopyCommand
    format: ClipboardFormat
    range: ExportRange
    copy_line_extended: bool = False
    save_column_names: bool = False
    print_header: bool = True
    print_header_line: bool = True
    print_border: bool = True
    print_footer: bool = True
    print_title: bool = True


def rows_for_request(total: int, rows: int, percent: float) -> int:
    """Number of data rows requested by a top/bottom command.

    A non-zero percent takes precedence over ``rows``; the result is
    rounded down and clamped to ``0..total``.
    """
    if rows < 0 or percent < 0.0:
        msg = f"Row count and percent must not be negative (rows={rows}, percent={percent})"
        raise InputError(msg)
    if percent != 0.0:
        rows = int(total * (percent / 100.0))
    return min(rows, total)


def plan_export(
    command: CopyCommand,
    format: ClipboardFormat,
    layout: TableLayout,
    *,
    options: ExportOptions | None = None,
    selection: Selection | None = None,
    cursor_row: int = 0,
    cursor_column: int = 1,
    rows: int = 0,
    percent: float = 0.0,
) -> ExportPlan:
    """Compute the export range and row-class flags for one copy request.

    ``cursor_row`` is relative to the first data row, ``cursor_column`` is
    a one-based column number.
    """
    options = options or ExportOptions()
    selection = selection or Selection()
    has_selection = selection.is_active
    first = layout.first_data_row

    plan = ExportPlan(
        command=command,
        format=format,
        range=ExportRange(min_row=first, max_row=layout.last_row),
        copy_line_extended=command is CopyCommand.LINE_EXTENDED,
    )
    rng = plan.range

    if plan.copy_line_extended and not format.is_dsv:
        plan.format = ClipboardFormat.CSV

    if plan.copy_line_extended or plan.format.is_insert:
        plan.save_column_names = True

    is_copy = command is CopyCommand.COPY

    if command in (CopyCommand.LINE, CopyCommand.LINE_EXTENDED) or (
        is_copy and not options.no_cursor and not has_selection
    ):
        rng.min_row = rng.max_row = cursor_row + first
        plan.print_footer = False

    if (is_copy and options.vertical_cursor) or command is CopyCommand.COLUMN:
        try:
            extent = layout.column_range(cursor_column)
        except ValueError as e:
            raise InputError(str(e)) from e
        rng.xmin, rng.xmax = extent.xmin, extent.xmax
        plan.print_footer = False

    # the cell under both cursors: no header, header line or border
    if is_copy and not options.no_cursor and options.vertical_cursor:
        plan.print_header = False
        plan.print_header_line = False
        plan.print_border = False

    if command in (CopyCommand.TOP, CopyCommand.BOTTOM):
        total = layout.data_rows
        count = rows_for_request(total, rows, percent)
        skip = total - count if command is CopyCommand.BOTTOM else 0
        rng.min_row = first + skip
        rng.max_row = first + skip + count - 1
        plan.print_footer = False

    if command in (CopyCommand.MARKED, CopyCommand.SEARCHED):
        plan.print_footer = False

    if (is_copy and has_selection) or command is CopyCommand.SELECTED:
        if selection.first_row is not None:
            rng.min_row = selection.first_row + first
            rng.max_row = rng.min_row + selection.rows - 1

        if selection.has_columns and selection.first_column is not None:
            rng.xmin = selection.first_column
            rng.xmax = selection.first_column + selection.columns - 1

        if rng.min_row > first or rng.max_row < layout.last_data_row:
            plan.print_footer = False

    if plan.format is not ClipboardFormat.TEXT:
        plan.print_border = False
        plan.print_footer = False
        plan.print_header_line = False

    if plan.save_column_names:
        plan.print_header = True
    plan.print_title = plan.print_footer

    return plan
