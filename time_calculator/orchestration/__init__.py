"""Orchestration layer coordinating the calculation engine."""

from .calculation_session import (
    KEY_BACKSPACE,
    KEY_CLEAR,
    KEY_EVALUATE,
    KEY_PERCENT,
    KEY_SYMBOLS,
    CalculationSession,
    CalculatorState,
    Evaluation,
    restored_state,
    transition,
)

__all__ = [
    "CalculationSession",
    "CalculatorState",
    "Evaluation",
    "transition",
    "restored_state",
    "KEY_SYMBOLS",
    "KEY_CLEAR",
    "KEY_BACKSPACE",
    "KEY_PERCENT",
    "KEY_EVALUATE",
]
