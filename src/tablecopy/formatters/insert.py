"""SQL INSERT statements, terse or one value per commented line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tablecopy.core.cells import string_width
from tablecopy.core.models import ClipboardFormat, Role
from tablecopy.core.quoting import quote_sql_identifier, quote_sql_literal, text_of, trim
from tablecopy.formatters.base import registry

if TYPE_CHECKING:
    from tablecopy.core.export import ExportState

# "INSERT INTO " plus the opening parenthesis
_COLUMN_INDENT = len("INSERT INTO ") + 1
_VALUE_INDENT = " " * 10


class InsertFormatter:
    """One ``INSERT INTO <table>(<cols>) VALUES(...)`` statement per row.

    Header rows only capture the identifier-quoted column names; the first
    data field of every following row opens a statement listing them, and
    the row terminator closes it.
    """

    def __init__(self, format: ClipboardFormat = ClipboardFormat.INSERT) -> None:
        self.format = ClipboardFormat(format)
        self.commented = self.format is ClipboardFormat.INSERT_COMMENTED

    def process_item(
        self,
        state: ExportState,
        role: Role,
        text: str,
        xpos: int,
        is_colname: bool,
    ) -> None:
        if role is Role.TERMINATOR:
            if not is_colname and state.colno > 0:
                self._close_statement(state)
            return

        if role is not Role.DATA or not state.in_range(xpos):
            return

        if is_colname:
            name = quote_sql_identifier(text_of(trim(text)))
            state.capture_colname(text_of(name))
            return

        if state.colno == 0:
            self._open_statement(state)
        elif self.commented:
            state.write(
                f",\t\t -- {state.colno}. {state.colname(state.colno - 1)}\n"
                f"{_VALUE_INDENT}"
            )
        else:
            state.write(", ")

        value = quote_sql_literal(
            text_of(trim(text)),
            force8bit=state.force8bit,
            empty_string_is_null=state.empty_string_is_null,
        )
        state.write(value.text)
        state.colno += 1

    def _close_statement(self, state: ExportState) -> None:
        if self.commented:
            state.write(f");\t\t -- {state.colno}. {state.colname(state.colno - 1)}\n")
        else:
            state.write(");\n")

    def _open_statement(self, state: ExportState) -> None:
        table_name = state.table_name or ""
        state.write(f"INSERT INTO {table_name}")

        names = state.captured_colnames()
        if names:
            state.write("(")
            if self.commented:
                indent = " " * (string_width(table_name, state.force8bit) + _COLUMN_INDENT)
                last = len(names) - 1
                for i, name in enumerate(names):
                    if i > 0:
                        state.write(indent)
                    closing = ")" if i == last else ","
                    state.write(f"{name}{closing}\t\t -- {i + 1}.\n")
            else:
                state.write(", ".join(names))
                state.write(")")

        state.write("   VALUES(" if self.commented else " VALUES(")


registry.register(ClipboardFormat.INSERT, InsertFormatter)
registry.register(ClipboardFormat.INSERT_COMMENTED, InsertFormatter)
