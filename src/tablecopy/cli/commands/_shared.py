"""Shared CLI plumbing for command modules.

Config resolution and argument parsing helpers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tablecopy.core.config import load_config, resolve_config
from tablecopy.core.exceptions import InputError
from tablecopy.core.models import Selection

if TYPE_CHECKING:
    import typer

    from tablecopy.core.config import ResolvedConfig
    from tablecopy.core.models import TableLayout


def get_config(ctx: typer.Context, **cli_overrides: Any) -> ResolvedConfig:
    obj = ctx.ensure_object(dict)
    config = load_config(obj.get("config_file"))
    return resolve_config(config, **cli_overrides)


def parse_span(value: str, option: str) -> tuple[int, int]:
    """Parse ``A:B`` (or ``A``) into a one-based inclusive span."""
    first, sep, last = value.partition(":")
    try:
        start = int(first)
        end = int(last) if sep else start
    except ValueError:
        msg = f"Invalid {option} value: '{value}'. Expected N or A:B"
        raise InputError(msg) from None
    if start < 1 or end < start:
        msg = f"Invalid {option} value: '{value}'. Need 1 <= A <= B"
        raise InputError(msg)
    return start, end


def build_selection(
    layout: TableLayout,
    select_rows: str | None,
    select_columns: str | None,
) -> Selection | None:
    """Selection from one-based data row and column number spans.

    Column numbers are mapped to the display positions delimiting them.
    """
    if select_rows is None and select_columns is None:
        return None

    selection = Selection()
    if select_rows is not None:
        start, end = parse_span(select_rows, "--select-rows")
        selection.first_row = start - 1
        selection.rows = end - start + 1

    if select_columns is not None:
        start, end = parse_span(select_columns, "--select-columns")
        if end > len(layout.column_ranges):
            msg = f"Column {end} out of range 1..{len(layout.column_ranges)}"
            raise InputError(msg)
        xmin = layout.column_range(start).xmin
        xmax = layout.column_range(end).xmax
        selection.first_column = xmin
        selection.columns = xmax - xmin + 1

    return selection
