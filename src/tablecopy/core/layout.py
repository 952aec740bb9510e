"""Detect the layout of a table printed by psql in aligned mode.

Supports border styles 0, 1 and 2 with ASCII or Unicode single/double
line drawing, e.g.::

     id | name
    ----+-------
      1 | alice
    (1 row)

The header separator line drives everything: its dash runs are the data
columns, the characters between them are separators and borders.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tablecopy.core.exceptions import InputError
from tablecopy.core.models import ColumnRange, Role, TableLayout

if TYPE_CHECKING:
    from collections.abc import Sequence

_DASHES = frozenset("-─═━")
_LEFT_EDGES = frozenset("+├╞╟┣┌╒╓┏└╘╙┗")
_RIGHT_EDGES = frozenset("+┤╡╢┫┐╕╖┓┘╛╜┛")
_RULE_CHARS = _DASHES | _LEFT_EDGES | _RIGHT_EDGES | frozenset(" ┼╪╫╋┬┴╤╧╥╨┳┻")
_VERTICALS = frozenset("|│║┃")

_FOOTER_RE = re.compile(r"^\(\d+ rows?\)$")


def is_rule_line(text: str) -> bool:
    """True for border lines such as ``+----+---+`` or ``----+----``."""
    stripped = text.strip()
    return bool(stripped) and _RULE_CHARS.issuperset(text) and not _DASHES.isdisjoint(text)


def _fits_rule(row: str, rule: str) -> bool:
    """True when ``row`` has column bars wherever ``rule`` has joints.

    A title printed above a bordered table has no bars there, so the top
    border under it is not mistaken for the header separator.
    """
    for x, char in enumerate(rule.rstrip()):
        if char in _DASHES:
            continue
        cell = row[x] if x < len(row) else " "
        if char == " ":
            if not cell.isspace():
                return False
        elif cell not in _VERTICALS:
            return False
    return True


def _headline_index(lines: Sequence[str]) -> int:
    for i in range(1, len(lines)):
        above = lines[i - 1]
        if (
            is_rule_line(lines[i])
            and above.strip()
            and not is_rule_line(above)
            and _fits_rule(above, lines[i])
        ):
            return i
    msg = "Cannot detect table layout: no header separator line found"
    raise InputError(msg)


def template_from_rule(rule: str) -> tuple[Role, ...]:
    roles: list[Role] = []
    last = len(rule) - 1
    for i, char in enumerate(rule):
        if char in _DASHES:
            roles.append(Role.DATA)
        elif i == 0 and char in _LEFT_EDGES:
            roles.append(Role.LEFT_BORDER)
        elif i == last and char in _RIGHT_EDGES:
            roles.append(Role.RIGHT_BORDER)
        else:
            roles.append(Role.SEPARATOR)
    return tuple(roles)


def column_ranges(template: Sequence[Role]) -> list[ColumnRange]:
    """Delimiting positions of every run of DATA roles."""
    ranges: list[ColumnRange] = []
    start: int | None = None
    for x, role in enumerate([*template, Role.TERMINATOR]):
        if role is Role.DATA:
            if start is None:
                start = x
        elif start is not None:
            ranges.append(ColumnRange(xmin=start - 1, xmax=x))
            start = None
    return ranges


def detect_layout(lines: Sequence[str]) -> TableLayout:
    """Build a ``TableLayout`` from the lines of psql aligned output.

    Raises InputError when no header separator line can be found.
    """
    headline = _headline_index(lines)
    template = template_from_rule(lines[headline].rstrip())
    ranges = column_ranges(template)

    border_top = headline - 2 if headline >= 2 and is_rule_line(lines[headline - 2]) else None
    # anything above the top border, or above the column names, is a title
    title_rows = border_top if border_top is not None else headline - 1
    first_data_row = headline + 1

    i = first_data_row
    while i < len(lines):
        text = lines[i]
        if not text.strip() or is_rule_line(text) or _FOOTER_RE.match(text.strip()):
            break
        i += 1
    last_data_row = i - 1

    border_bottom = None
    if i < len(lines) and is_rule_line(lines[i]):
        border_bottom = i
        i += 1

    last_row = len(lines) - 1
    while last_row >= i and not lines[last_row].strip():
        last_row -= 1

    while i <= last_row and not lines[i].strip():
        i += 1
    footer_row = i if i <= last_row else None

    return TableLayout(
        first_data_row=first_data_row,
        last_data_row=last_data_row,
        last_row=max(last_row, last_data_row),
        border_top_row=border_top,
        border_head_row=headline,
        border_bottom_row=border_bottom,
        fixed_rows=first_data_row,
        title_rows=title_rows,
        footer_row=footer_row,
        columns=len(ranges),
        column_ranges=ranges,
        template=template,
    )
