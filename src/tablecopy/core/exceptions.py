"""Exception hierarchy for tablecopy.

All exceptions carry an exit_code for CLI return value mapping.
"""

from tablecopy.core.exit_codes import ExitCode


class TableCopyError(Exception):
    """Base exception for all tablecopy errors."""

    exit_code: int = ExitCode.GENERAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InputError(TableCopyError):
    """Invalid export arguments, unreadable or unrecognized input."""

    exit_code: int = ExitCode.INPUT_ERROR


class OutputError(TableCopyError):
    """The output sink failed while data was being written."""

    exit_code: int = ExitCode.OUTPUT_ERROR


class ConfigError(TableCopyError):
    """Malformed config file or invalid option values."""

    exit_code: int = ExitCode.CONFIG_ERROR
