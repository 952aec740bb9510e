"""Resolve the table text to export.

Resolves the rendered table from one of two sources:
1. File path, highest priority
2. stdin, when no file is given and stdin is not a terminal
"""

from __future__ import annotations

import sys
from pathlib import Path

from tablecopy.core.exceptions import InputError


def input_encoding(force8bit: bool) -> str:
    """Force-8-bit mode reads every byte as one character."""
    return "latin-1" if force8bit else "utf-8"


def read_table_lines(file_path: str | Path | None, force8bit: bool = False) -> list[str]:
    """Read table lines from a file or stdin, without line terminators.

    Rows are split on LF only; a trailing CR is dropped.

    Raises InputError when no source is available or the text cannot be
    decoded.
    """
    encoding = input_encoding(force8bit)

    if file_path is not None:
        p = Path(file_path)
        if not p.exists():
            msg = f"Input file not found: {file_path}"
            raise InputError(msg)
        data = p.read_bytes()
    elif not sys.stdin.isatty():
        data = sys.stdin.buffer.read()
    else:
        msg = "No input provided. Pass a file path or pipe psql output to stdin."
        raise InputError(msg)

    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as e:
        msg = f"Input is not valid {encoding}: {e}. Try --force8bit."
        raise InputError(msg) from e

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]
