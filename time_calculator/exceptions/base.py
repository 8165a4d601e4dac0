"""Base exception classes for Time Calculator."""


class TimeCalculatorException(Exception):
    """Base exception for all Time Calculator errors.

    All custom exceptions in the time_calculator package should inherit
    from this base class for consistent error handling.
    """

    pass
