"""Export rows of a rendered table to text, CSV, TSV or SQL INSERT statements.

``export_data`` plans the request, walks the line source and feeds every
selected row through ``FieldIterator``; the coalesced fields and tokens go
to ``process_item``, which hands them to the formatter registered for the
target format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TextIO

import structlog

# formatter modules register themselves on import
import tablecopy.formatters.dsv  # noqa: F401
import tablecopy.formatters.insert  # noqa: F401
import tablecopy.formatters.text  # noqa: F401
from tablecopy.core.config import ExportOptions
from tablecopy.core.exceptions import InputError, OutputError
from tablecopy.core.iterator import FieldIterator, iter_fields
from tablecopy.core.models import ClipboardFormat, CopyCommand, ExportRange, Role
from tablecopy.core.quoting import quote_sql_identifier
from tablecopy.core.ranges import plan_export
from tablecopy.formatters.base import registry

if TYPE_CHECKING:
    from types import TracebackType

    from tablecopy.core.lines import LineSource
    from tablecopy.core.models import Line, Selection, TableLayout
    from tablecopy.core.quoting import FieldText
    from tablecopy.formatters.base import ItemFormatter


@dataclass
class ExportState:
    """Mutable context of one export call.

    ``colno`` counts the exported fields of the current row; ``colnames``
    is allocated on the first captured header field and indexed by that
    count, so header and data rows filtered by the same column range stay
    aligned.
    """

    sink: TextIO
    format: ClipboardFormat
    range: ExportRange
    columns: int = 0
    copy_line_extended: bool = False
    table_ident: FieldText | None = None
    force8bit: bool = False
    empty_string_is_null: bool = False
    colno: int = 0
    colnames: list[str | None] | None = None
    formatter: ItemFormatter = field(init=False)

    def __post_init__(self) -> None:
        self.formatter = registry.get(self.format)

    def __enter__(self) -> ExportState:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def table_name(self) -> str | None:
        return None if self.table_ident is None else self.table_ident.text

    def in_range(self, xpos: int) -> bool:
        return self.range.contains_x(xpos)

    def write(self, text: str) -> None:
        try:
            self.sink.write(text)
        except (OSError, ValueError) as e:
            self._write_failed(e)

    def flush(self) -> None:
        try:
            self.sink.flush()
        except (OSError, ValueError) as e:
            self._write_failed(e)

    def _write_failed(self, e: OSError | ValueError) -> None:
        # ValueError is what a closed stream raises
        log = structlog.get_logger()
        reason = getattr(e, "strerror", None) or str(e)
        log.error("cannot write export output", error=reason, format=self.format.value)
        msg = f"Cannot write ({reason})"
        raise OutputError(msg) from e

    def capture_colname(self, name: str) -> None:
        if self.colnames is None:
            self.colnames = [None] * self.columns
        if self.colno >= len(self.colnames):
            self.colnames.extend([None] * (self.colno - len(self.colnames) + 1))
        self.colnames[self.colno] = name
        self.colno += 1

    def colname(self, index: int) -> str:
        if self.colnames is None or not 0 <= index < len(self.colnames):
            return ""
        return self.colnames[index] or ""

    def captured_colnames(self) -> list[str]:
        """Captured names in column order, up to the first missing one."""
        names: list[str] = []
        for name in self.colnames or []:
            if name is None:
                break
            names.append(name)
        return names

    def close(self) -> None:
        self.colnames = None
        self.table_ident = None


def process_item(
    state: ExportState,
    role: Role,
    text: str,
    xpos: int,
    is_colname: bool = False,
) -> None:
    """Write one token (or coalesced data field) in the state's format.

    Raises OutputError when the sink fails.
    """
    state.formatter.process_item(state, role, text, xpos, is_colname)


def _export_row(
    state: ExportState,
    line: Line,
    layout: TableLayout,
    is_colname: bool,
    force8bit: bool,
) -> None:
    state.colno = 0
    tokens = FieldIterator(line.text, layout.template_for(is_colname), force8bit)
    for token in iter_fields(tokens):
        process_item(state, token.role, token.text, token.xpos, is_colname)
    process_item(state, Role.TERMINATOR, "", -1, is_colname)


def export_data(
    source: LineSource,
    layout: TableLayout,
    sink: TextIO,
    *,
    command: CopyCommand = CopyCommand.ALL,
    format: ClipboardFormat = ClipboardFormat.CSV,
    options: ExportOptions | None = None,
    selection: Selection | None = None,
    cursor_row: int = 0,
    cursor_column: int = 1,
    rows: int = 0,
    percent: float = 0.0,
    table_name: str | None = None,
) -> int:
    """Export the rows selected by ``command`` to ``sink``.

    Returns the number of exported data rows. Raises InputError for invalid
    arguments (before anything is written) and OutputError when the sink
    fails; output written before a failure is left in place.
    """
    log = structlog.get_logger()
    options = options or ExportOptions()
    command = CopyCommand(command)

    plan = plan_export(
        command,
        ClipboardFormat(format),
        layout,
        options=options,
        selection=selection,
        cursor_row=cursor_row,
        cursor_column=cursor_column,
        rows=rows,
        percent=percent,
    )

    table_ident = None
    if plan.format.is_insert:
        if not table_name or not table_name.strip():
            msg = "A table name is required for INSERT export"
            raise InputError(msg)
        table_ident = quote_sql_identifier(table_name)

    plan_details: dict[str, Any] = {
        "command": plan.command.value,
        "format": plan.format.value,
        "min_row": plan.range.min_row,
        "max_row": plan.range.max_row,
        "xmin": plan.range.xmin,
        "xmax": plan.range.xmax,
    }
    log.debug("export plan", **plan_details)

    borders = {layout.border_top_row, layout.border_bottom_row} - {None}
    exported = 0

    with ExportState(
        sink=sink,
        format=plan.format,
        range=plan.range,
        columns=layout.columns,
        copy_line_extended=plan.copy_line_extended,
        table_ident=table_ident,
        force8bit=options.force8bit,
        empty_string_is_null=options.empty_string_is_null,
    ) as state:
        for line in source.lines():
            rn = line.rownum
            if rn > layout.last_row:
                break

            if layout.first_data_row <= rn <= layout.last_data_row:
                if not plan.range.contains_row(rn):
                    continue
                if command is CopyCommand.MARKED:
                    if line.info is None or not line.info.bookmark:
                        continue
                elif command is CopyCommand.SEARCHED:
                    info = source.refresh_info(line)
                    if info is None or not info.found:
                        continue
                _export_row(state, line, layout, False, options.force8bit)
                exported += 1
                continue

            is_border = rn in borders
            is_header_line = rn == layout.border_head_row
            is_footer = layout.footer_row is not None and rn >= layout.footer_row
            is_title = rn < layout.title_rows

            if is_border and not plan.print_border:
                continue
            if is_header_line and not plan.print_header_line:
                continue
            if rn < layout.fixed_rows and not plan.print_header:
                continue
            if is_title or is_footer:
                if (is_title and plan.print_title) or (is_footer and plan.print_footer):
                    # titles and footers do not follow the template; copy them whole
                    state.write(line.text)
                    process_item(state, Role.TERMINATOR, "", -1)
                continue

            is_colname = not is_border and not is_header_line and rn < layout.fixed_rows
            _export_row(state, line, layout, is_colname, options.force8bit)

        state.flush()

    log.debug("export finished", rows=exported, format=plan.format.value)
    return exported
