"""Trimming and quoting of exported field values.

Every routine returns either ``Borrowed`` (the input text passed through
unchanged, possibly narrowed to a slice), ``Owned`` (new text was built),
or ``None`` for a NULL result. Callers that cache values can tell from the
type whether they hold the row's own text or a derived copy.
"""

from __future__ import annotations

from dataclasses import dataclass

# Glyph the table renderer prints in place of SQL NULL.
NULL_SENTINEL = "∅"

_CSV_SPECIAL = frozenset('",\t\r\n')
_IDENT_FIRST = frozenset("abcdefghijklmnopqrstuvwxyz")
_IDENT_CHARS = _IDENT_FIRST | frozenset("0123456789_")
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class Borrowed:
    text: str

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Owned:
    text: str

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


FieldText = Borrowed | Owned


def text_of(value: FieldText | None) -> str:
    """Text of a result; a NULL result reads as the empty string."""
    return "" if value is None else value.text


def _wrap(text: str, quote: str) -> Owned:
    return Owned(quote + text.replace(quote, quote * 2) + quote)


def _is_null_sentinel(text: str, force8bit: bool) -> bool:
    return not force8bit and text == NULL_SENTINEL


def trim(text: str | None) -> Borrowed | None:
    """Strip leading and trailing spaces. Returns None when nothing is left."""
    if not text:
        return None
    trimmed = text.strip(" ")
    if not trimmed:
        return None
    return Borrowed(trimmed)


def csv_escape(
    text: str | None,
    force8bit: bool = False,
    empty_string_is_null: bool = False,
) -> FieldText | None:
    """Format a value for CSV/TSV output (RFC 4180 quoting).

    The NULL sentinel becomes an empty (NULL) field. An empty value becomes
    ``""`` so it stays distinguishable from NULL, unless empty strings are
    treated as NULL.
    """
    if text is not None and _is_null_sentinel(text, force8bit):
        return None

    if not text:
        if empty_string_is_null:
            return None
        return Owned('""')

    if _CSV_SPECIAL.isdisjoint(text):
        return Borrowed(text)

    return _wrap(text, '"')


def quote_sql_identifier(text: str | None) -> FieldText | None:
    """Double-quote an identifier unless it is a plain lowercase name.

    Values already starting with ``"`` are taken as quoted.
    """
    if text is None:
        return None
    if not text or text.startswith('"'):
        return Borrowed(text)

    if text[0] in _IDENT_FIRST and _IDENT_CHARS.issuperset(text):
        return Borrowed(text)

    return _wrap(text, '"')


def _is_numeric(text: str) -> bool:
    digits = text.replace(".", "", 1)
    return bool(digits) and _DIGITS.issuperset(digits)


def quote_sql_literal(
    text: str | None,
    force8bit: bool = False,
    empty_string_is_null: bool = False,
) -> FieldText:
    """Format a value as a SQL literal.

    ``NULL``/``null`` and unsigned decimal numbers pass unquoted; the NULL
    sentinel becomes ``NULL``; everything else is single-quoted.
    """
    if not text:
        return Owned("NULL") if empty_string_is_null else Owned("''")

    if text in ("NULL", "null"):
        return Borrowed(text)

    if _is_null_sentinel(text, force8bit):
        return Owned("NULL")

    if _is_numeric(text):
        return Borrowed(text)

    return _wrap(text, "'")
