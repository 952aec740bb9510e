"""Plain text: the rendered table slice, copied verbatim."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tablecopy.core.models import ClipboardFormat, Role
from tablecopy.formatters.base import registry

if TYPE_CHECKING:
    from tablecopy.core.export import ExportState

_RANGE_FILTERED = (Role.DATA, Role.SEPARATOR)


class TextFormatter:
    def __init__(self, format: ClipboardFormat = ClipboardFormat.TEXT) -> None:
        self.format = format

    def process_item(
        self,
        state: ExportState,
        role: Role,
        text: str,
        xpos: int,
        is_colname: bool,
    ) -> None:
        if role is Role.TERMINATOR:
            state.write("\n")
            return

        # outer borders are kept even when a column range is active
        if role in _RANGE_FILTERED and not state.in_range(xpos):
            return

        state.write(text)


registry.register(ClipboardFormat.TEXT, TextFormatter)
