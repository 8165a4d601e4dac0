"""Data models for Time Calculator."""

from .history import HistoryEntry
from .operator import Operator
from .step import CalculationStep, decode_steps, encode_steps
from .theme import TAG_COLORS, ColorScheme, ColorTag, resolve_entry_color

__all__ = [
    "Operator",
    "CalculationStep",
    "encode_steps",
    "decode_steps",
    "HistoryEntry",
    "ColorScheme",
    "ColorTag",
    "TAG_COLORS",
    "resolve_entry_color",
]
