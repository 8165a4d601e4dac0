"""History storage exceptions."""

from .base import TimeCalculatorException


class HistoryEntryNotFoundError(TimeCalculatorException):
    """Raised when a history entry id is not in the store."""

    pass


class StorageError(TimeCalculatorException):
    """Raised when the history database cannot be read or written."""

    pass
