"""Terminal cell width helpers.

Rows are ``str``, so one character is one storage unit. In force-8-bit
mode every character also occupies exactly one terminal cell; otherwise
widths come from rich's cell tables (wide CJK glyphs take two cells,
combining marks none).
"""

from __future__ import annotations

from rich.cells import cell_len, get_character_cell_size


def char_width(char: str, force8bit: bool = False) -> int:
    if force8bit:
        return 1
    return get_character_cell_size(char)


def string_width(text: str, force8bit: bool = False) -> int:
    if force8bit:
        return len(text)
    return cell_len(text)
