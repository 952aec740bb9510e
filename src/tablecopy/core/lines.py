"""Line sources feeding rows of a rendered table into the export engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from tablecopy.core.models import Line, LineInfo

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class LineSource(Protocol):
    """Sequential access to the lines of a rendered table."""

    def lines(self) -> Iterator[Line]:
        """Yield every line in row order, with its metadata if known."""
        ...

    def refresh_info(self, line: Line) -> LineInfo | None:
        """Recompute metadata for ``line`` (bookmark and search flags)."""
        ...


class BufferLineSource:
    """Lines held in memory, with bookmarks and an optional search string.

    Search hits are evaluated lazily: ``lines()`` reports only bookmarks,
    and ``refresh_info`` adds the ``found`` flag for the current pattern.
    """

    def __init__(
        self,
        rows: Iterable[str],
        bookmarks: Iterable[int] = (),
        search: str | None = None,
        ignore_case: bool = False,
    ) -> None:
        self.rows = [row.rstrip("\r\n") for row in rows]
        self.bookmarks = set(bookmarks)
        self.search = search
        self.ignore_case = ignore_case

    def __len__(self) -> int:
        return len(self.rows)

    def lines(self) -> Iterator[Line]:
        for rownum, text in enumerate(self.rows):
            info = LineInfo(bookmark=True) if rownum in self.bookmarks else None
            yield Line(text=text, rownum=rownum, info=info)

    def matches(self, text: str) -> bool:
        if not self.search:
            return False
        if self.ignore_case:
            return self.search.casefold() in text.casefold()
        return self.search in text

    def refresh_info(self, line: Line) -> LineInfo | None:
        bookmark = line.rownum in self.bookmarks
        found = self.matches(line.text)
        if not bookmark and not found:
            return None
        line.info = LineInfo(bookmark=bookmark, found=found)
        return line.info
