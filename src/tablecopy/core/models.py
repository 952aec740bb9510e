"""Data models for table export.

The layout, selection and line metadata describe the rendered table that
is being exported; they are produced by the pager (or by
``tablecopy.core.layout`` for plain text input) and are read-only here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator, model_validator


class Role(StrEnum):
    """Structural role of one display column of a rendered row."""

    DATA = "d"
    SEPARATOR = "I"
    LEFT_BORDER = "L"
    RIGHT_BORDER = "R"
    TERMINATOR = "N"


Template = tuple[Role, ...]


def parse_template(codes: str) -> Template:
    """Build a template from role codes, e.g. ``"LddIdddR"``.

    A trailing newline is accepted and ends the template.
    """
    roles: list[Role] = []
    for code in codes:
        if code == "\n":
            break
        try:
            roles.append(Role(code))
        except ValueError:
            msg = f"Unknown template role code: {code!r}"
            raise ValueError(msg) from None
    return tuple(roles)


class ClipboardFormat(StrEnum):
    TEXT = "text"
    CSV = "csv"
    TSV = "tsv"
    INSERT = "insert"
    INSERT_COMMENTED = "insert-commented"

    @property
    def is_insert(self) -> bool:
        return self in (ClipboardFormat.INSERT, ClipboardFormat.INSERT_COMMENTED)

    @property
    def is_dsv(self) -> bool:
        return self in (ClipboardFormat.CSV, ClipboardFormat.TSV)


class CopyCommand(StrEnum):
    """Which part of the table a copy request exports."""

    ALL = "all"
    COPY = "copy"
    LINE = "line"
    LINE_EXTENDED = "line-extended"
    COLUMN = "column"
    SELECTED = "selected"
    TOP = "top"
    BOTTOM = "bottom"
    MARKED = "marked"
    SEARCHED = "searched"


@dataclass(frozen=True, slots=True)
class Token:
    """One display column of a row, tagged with its template role."""

    role: Role
    text: str
    size: int
    xpos: int


@dataclass
class LineInfo:
    bookmark: bool = False
    found: bool = False


@dataclass
class Line:
    text: str
    rownum: int
    info: LineInfo | None = None


class ColumnRange(BaseModel):
    """Display positions delimiting one column (exclusive on both ends)."""

    xmin: int
    xmax: int


class TableLayout(BaseModel):
    """Row classification and column geometry of a rendered table.

    Row numbers are zero-based line numbers in the line source. Rows before
    ``fixed_rows`` form the fixed header, the first ``title_rows`` of them
    being a table title; ``footer_row`` is the first footer line, if any.
    """

    first_data_row: int
    last_data_row: int
    last_row: int
    border_top_row: int | None = None
    border_head_row: int | None = None
    border_bottom_row: int | None = None
    fixed_rows: int = 0
    title_rows: int = 0
    footer_row: int | None = None
    columns: int
    column_ranges: list[ColumnRange] = Field(default_factory=list)
    template: Template
    header_template: Template | None = None

    @field_validator("template", "header_template", mode="before")
    @classmethod
    def parse_role_codes(cls, v: object) -> object:
        if isinstance(v, str):
            return parse_template(v)
        return v

    @model_validator(mode="after")
    def check_rows(self) -> TableLayout:
        if self.first_data_row < 0:
            msg = f"first_data_row must be >= 0, got {self.first_data_row}"
            raise ValueError(msg)
        if self.last_row < self.last_data_row:
            msg = "last_row must not precede last_data_row"
            raise ValueError(msg)
        return self

    @property
    def data_rows(self) -> int:
        return max(self.last_data_row - self.first_data_row + 1, 0)

    def template_for(self, is_header: bool) -> Template:
        if is_header and self.header_template is not None:
            return self.header_template
        return self.template

    def column_range(self, column: int) -> ColumnRange:
        """Extent of a one-based column number."""
        if not 1 <= column <= len(self.column_ranges):
            msg = f"Column {column} out of range 1..{len(self.column_ranges)}"
            raise ValueError(msg)
        return self.column_ranges[column - 1]


class Selection(BaseModel):
    """Rectangular selection; row numbers are relative to the first data row."""

    first_row: int | None = None
    rows: int = 0
    first_column: int | None = None
    columns: int = 0

    @property
    def has_rows(self) -> bool:
        return self.first_row is not None and self.rows > 0

    @property
    def has_columns(self) -> bool:
        return self.first_column is not None and self.columns > 0

    @property
    def is_active(self) -> bool:
        return self.has_rows or self.has_columns


class ExportRange(BaseModel):
    """Inclusive row bounds plus the display positions delimiting columns."""

    min_row: int
    max_row: int
    xmin: int | None = None
    xmax: int | None = None

    def contains_row(self, rownum: int) -> bool:
        return self.min_row <= rownum <= self.max_row

    def contains_x(self, xpos: int) -> bool:
        if self.xmin is None or self.xmax is None:
            return True
        return self.xmin < xpos < self.xmax
