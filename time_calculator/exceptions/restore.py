"""Restore-related exceptions."""

from .base import TimeCalculatorException


class RestoreFailure(TimeCalculatorException):
    """Raised when a stored calculation ledger cannot be decoded."""

    pass
