"""Utility functions for Time Calculator."""

from .duration import (
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    format_compact,
    format_duration,
    format_hours_minutes,
    parse,
    round_half_away_from_zero,
    split_duration,
    total_hours,
)

__all__ = [
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "parse",
    "format_duration",
    "format_compact",
    "format_hours_minutes",
    "split_duration",
    "total_hours",
    "round_half_away_from_zero",
]
