"""Conversion between HHMMSS digit strings and signed second counts."""

import math

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600

# Digits shown as HHMMSS once a buffer is left-padded
FIELD_DIGITS = 6


def parse(buffer: str) -> int:
    """Parse a digit buffer into a signed number of seconds.

    The buffer is read right to left: the last two digits are seconds, the two
    before them are minutes, and whatever remains is hours. Short buffers are
    left-padded with zeros, so ``"130"`` means 00:01:30.

    Characters other than digits and a leading ``-`` are ignored, and a buffer
    with no digits at all parses to zero.

    Args:
        buffer: Raw buffer text, e.g. ``"013000"`` or ``"-000130"``

    Returns:
        Signed total seconds
    """
    cleaned = "".join(ch for ch in buffer if ch.isdigit() or ch == "-")
    negative = cleaned.startswith("-")
    digits = cleaned.replace("-", "")
    if not digits:
        return 0

    padded = digits.rjust(FIELD_DIGITS, "0")
    hours = int(padded[:-4])
    minutes = int(padded[-4:-2])
    seconds = int(padded[-2:])

    total = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
    return -total if negative else total


def split_duration(seconds: int) -> tuple[int, int, int]:
    """Decompose the magnitude of a duration into (hours, minutes, seconds).

    Hours are not wrapped, so 100 hours stays 100.
    """
    magnitude = abs(seconds)
    hours, remainder = divmod(magnitude, SECONDS_PER_HOUR)
    minutes, secs = divmod(remainder, SECONDS_PER_MINUTE)
    return hours, minutes, secs


def format_duration(seconds: int) -> str:
    """Format seconds as ``[-]HH:MM:SS``.

    Args:
        seconds: Signed total seconds

    Returns:
        Display string; the hour field grows past two digits when needed
    """
    hours, minutes, secs = split_duration(seconds)
    sign = "-" if seconds < 0 else ""
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"


def format_compact(seconds: int) -> str:
    """Format seconds as ``[-]HHMMSS``, the buffer form of a computed value.

    Args:
        seconds: Signed total seconds

    Returns:
        Digit string that ``parse`` maps back to ``seconds``
    """
    hours, minutes, secs = split_duration(seconds)
    sign = "-" if seconds < 0 else ""
    return f"{sign}{hours:02d}{minutes:02d}{secs:02d}"


def format_hours_minutes(seconds: int) -> str:
    """Format seconds as a short ``Xh Ym`` summary used in history rows."""
    hours, minutes, _ = split_duration(seconds)
    sign = "-" if seconds < 0 else ""
    return f"{sign}{hours}h {minutes}m"


def total_hours(seconds: int) -> float:
    """Express a duration in (fractional) hours."""
    return seconds / SECONDS_PER_HOUR


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties going away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
