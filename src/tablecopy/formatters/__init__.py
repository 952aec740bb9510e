"""Per-format token writers used by the export engine."""

from tablecopy.formatters.base import FormatterRegistry, ItemFormatter, registry
from tablecopy.formatters.dsv import DSVFormatter
from tablecopy.formatters.insert import InsertFormatter
from tablecopy.formatters.text import TextFormatter

__all__ = [
    "DSVFormatter",
    "FormatterRegistry",
    "InsertFormatter",
    "ItemFormatter",
    "TextFormatter",
    "registry",
]
