"""CSV and TSV output, including the extended one-field-per-line form."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tablecopy.core.models import ClipboardFormat, Role
from tablecopy.core.quoting import csv_escape, text_of, trim
from tablecopy.formatters.base import registry

if TYPE_CHECKING:
    from tablecopy.core.export import ExportState

_SEPARATORS: dict[ClipboardFormat, str] = {
    ClipboardFormat.CSV: ",",
    ClipboardFormat.TSV: "\t",
}


class DSVFormatter:
    """Delimiter-separated values.

    In extended copy-line mode header fields are captured as column names
    and every data field is written as its own ``<colname>,<value>`` line.
    """

    def __init__(self, format: ClipboardFormat = ClipboardFormat.CSV) -> None:
        self.format = ClipboardFormat(format)
        self.separator = _SEPARATORS[self.format]

    def process_item(
        self,
        state: ExportState,
        role: Role,
        text: str,
        xpos: int,
        is_colname: bool,
    ) -> None:
        if role is Role.TERMINATOR:
            if not state.copy_line_extended:
                state.write("\n")
            return

        if role is not Role.DATA or not state.in_range(xpos):
            return

        value = csv_escape(
            text_of(trim(text)),
            force8bit=state.force8bit,
            empty_string_is_null=state.empty_string_is_null,
        )

        if state.copy_line_extended:
            if is_colname:
                state.capture_colname(text_of(value))
                return
            state.write(f"{state.colname(state.colno)},{text_of(value)}\n")
        else:
            if state.colno > 0:
                state.write(self.separator)
            if value is not None:
                state.write(value.text)

        state.colno += 1


registry.register(ClipboardFormat.CSV, DSVFormatter)
registry.register(ClipboardFormat.TSV, DSVFormatter)
