"""Arithmetic operators that can follow a committed value."""

from enum import Enum


class Operator(str, Enum):
    """Binary operator; the value is the key symbol and the stored symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        """Symbol shown on the keypad and in the running trace."""
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator | None":
        """Look up an operator by its symbol, or None if it is not one."""
        try:
            return cls(symbol)
        except ValueError:
            return None
