"""Output sink selection for exported data."""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

from tablecopy.core.exceptions import OutputError
from tablecopy.core.table_source import input_encoding

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path
    from typing import TextIO


@contextmanager
def _stdout_sink(force8bit: bool) -> Iterator[TextIO]:
    """Stdout as is, or re-wrapped as latin-1 so 8-bit text passes unchanged."""
    if not force8bit:
        yield sys.stdout
        return

    sys.stdout.flush()
    stream = io.TextIOWrapper(
        sys.stdout.buffer, encoding="latin-1", newline="", write_through=True
    )
    try:
        yield stream
    finally:
        stream.flush()
        # hand the buffer back to sys.stdout instead of closing it
        stream.detach()


@contextmanager
def open_sink(path: Path | None, force8bit: bool = False) -> Iterator[TextIO]:
    """Yield stdout, or ``path`` opened for writing.

    Line endings are written as produced (no newline translation). In
    force-8-bit mode both stdout and files are written as latin-1, so every
    input byte comes out unchanged.
    """
    if path is None:
        with _stdout_sink(force8bit) as stream:
            yield stream
        return

    try:
        f = open(path, "w", encoding=input_encoding(force8bit), newline="")
    except OSError as e:
        msg = f"Cannot open output file {path}: {e.strerror or e}"
        raise OutputError(msg) from e

    with f:
        yield f
