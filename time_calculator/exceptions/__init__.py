"""Custom exceptions for Time Calculator."""

from .base import TimeCalculatorException
from .history import HistoryEntryNotFoundError, StorageError
from .restore import RestoreFailure

__all__ = [
    "TimeCalculatorException",
    "RestoreFailure",
    "HistoryEntryNotFoundError",
    "StorageError",
]
