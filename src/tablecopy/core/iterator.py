"""Walk a rendered row against its template, one display column at a time."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tablecopy.core.cells import char_width
from tablecopy.core.models import Role, Token

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tablecopy.core.models import Template


class FieldIterator:
    """Yield one ``Token`` per row character, tagged with its template role.

    The row and the template advance in lock-step by display width, so a
    double-width character consumes two template positions and the next
    token's role is read after both. Iteration stops at the end of the row,
    at the end of the template, or at a TERMINATOR role.
    """

    def __init__(
        self,
        row: str | None,
        template: Template | None,
        force8bit: bool = False,
    ) -> None:
        self.row = row
        self.template = template
        self.force8bit = force8bit
        self.pos = 0
        self.xpos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self.row is None or self.template is None:
            raise StopIteration
        if self.pos >= len(self.row) or self.xpos >= len(self.template):
            raise StopIteration

        role = self.template[self.xpos]
        if role is Role.TERMINATOR:
            raise StopIteration

        char = self.row[self.pos]
        width = char_width(char, self.force8bit)
        token = Token(role=role, text=char, size=len(char), xpos=self.xpos)

        self.pos += token.size
        self.xpos += width
        return token


def iter_fields(tokens: Iterator[Token]) -> Iterator[Token]:
    """Merge runs of DATA tokens into one token per field.

    A merged field carries the x-position of its last character. Non-data
    tokens pass through unchanged, after any pending field.
    """
    chunks: list[str] = []
    field_xpos = -1

    for token in tokens:
        if token.role is Role.DATA:
            chunks.append(token.text)
            field_xpos = token.xpos
            continue

        if chunks:
            text = "".join(chunks)
            yield Token(role=Role.DATA, text=text, size=len(text), xpos=field_xpos)
            chunks = []

        yield token

    if chunks:
        text = "".join(chunks)
        yield Token(role=Role.DATA, text=text, size=len(text), xpos=field_xpos)
