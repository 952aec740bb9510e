"""tablecopy - export engine for rendered terminal tables."""

from tablecopy.__about__ import __version__

__all__ = ["__version__"]
