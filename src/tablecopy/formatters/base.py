"""Item formatter protocol and registry.

An item formatter turns the tokens of one rendered row into text of one
output format. It keeps no state of its own: column counters and captured
column names live on the ``ExportState`` of the running export.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tablecopy.core.export import ExportState
    from tablecopy.core.models import ClipboardFormat, Role


@runtime_checkable
class ItemFormatter(Protocol):
    """Protocol for per-token output formatters."""

    def process_item(
        self,
        state: ExportState,
        role: Role,
        text: str,
        xpos: int,
        is_colname: bool,
    ) -> None:
        """Write the output for one token or coalesced field.

        ``is_colname`` is set for tokens of fixed header rows.
        """
        ...


class FormatterRegistry:
    """Registry for looking up item formatters by clipboard format."""

    def __init__(self) -> None:
        self._formatters: dict[str, type[ItemFormatter]] = {}

    def register(self, name: str, formatter_class: type[ItemFormatter]) -> None:
        self._formatters[name] = formatter_class

    def get(self, name: ClipboardFormat | str, **kwargs: object) -> ItemFormatter:
        """Return a formatter instance for ``name``.

        Raises KeyError if the format is not registered.
        """
        if name not in self._formatters:
            available = ", ".join(self.available)
            msg = f"Unknown format {name!r}. Available: {available}"
            raise KeyError(msg)
        return self._formatters[name](format=name, **kwargs)  # type: ignore[call-arg]

    @property
    def available(self) -> list[str]:
        return sorted(self._formatters)


# Global registry instance populated by formatter modules.
registry = FormatterRegistry()
