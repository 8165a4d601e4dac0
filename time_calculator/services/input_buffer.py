"""Digit-entry buffer for the value currently being typed."""

import logging
from dataclasses import dataclass

from time_calculator.utils.duration import (
    FIELD_DIGITS,
    format_compact,
    format_duration,
    parse,
    round_half_away_from_zero,
)

logger = logging.getLogger(__name__)

EMPTY_BUFFER = "0"
PERCENT_FACTOR = 0.01


@dataclass(frozen=True)
class InputBuffer:
    """Immutable HHMMSS digit buffer.

    Every operation returns a new buffer and never fails: invalid input leaves
    the buffer unchanged. Typing stops at six digits; a computed value loaded
    with ``from_seconds`` may carry a ``-`` sign and, past 99 hours, more digits.
    """

    text: str = EMPTY_BUFFER

    @classmethod
    def from_seconds(cls, seconds: int) -> "InputBuffer":
        """Load a computed value back into the buffer."""
        return cls(format_compact(seconds))

    @property
    def digit_count(self) -> int:
        return sum(1 for ch in self.text if ch.isdigit())

    @property
    def seconds(self) -> int:
        """Signed seconds represented by the buffer."""
        return parse(self.text)

    def display(self) -> str:
        """Buffer rendered as ``[-]HH:MM:SS``."""
        return format_duration(self.seconds)

    def append_digit(self, digit: str) -> "InputBuffer":
        """Append one digit, replacing the ``"0"`` placeholder.

        Args:
            digit: A single character ``0``-``9``

        Returns:
            The new buffer (unchanged when full or when ``digit`` is not a digit)
        """
        if len(digit) != 1 or not digit.isdigit():
            return self
        if self.text == EMPTY_BUFFER:
            return InputBuffer(digit)
        if self.digit_count >= FIELD_DIGITS:
            logger.debug(f"Buffer full, ignoring digit {digit}")
            return self
        return InputBuffer(self.text + digit)

    def backspace(self) -> "InputBuffer":
        """Remove the last character; an emptied buffer goes back to ``"0"``."""
        remaining = self.text[:-1]
        if not remaining or remaining == "-":
            return InputBuffer()
        return InputBuffer(remaining)

    def clear(self) -> "InputBuffer":
        return InputBuffer()

    def percent(self) -> "InputBuffer":
        """Replace the value with one percent of itself, rounded to whole seconds."""
        return InputBuffer.from_seconds(round_half_away_from_zero(self.seconds * PERCENT_FACTOR))

    def __str__(self) -> str:
        return self.text
