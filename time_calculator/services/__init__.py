"""Business logic services for Time Calculator."""

from .evaluator import apply_operator, fold
from .history_service import HistoryService
from .input_buffer import EMPTY_BUFFER, InputBuffer
from .preferences_service import (
    THEME_KEY,
    InMemoryPreferencesStore,
    JsonPreferencesStore,
    ThemeService,
)
from .step_ledger import StepLedger

__all__ = [
    "InputBuffer",
    "EMPTY_BUFFER",
    "StepLedger",
    "fold",
    "apply_operator",
    "HistoryService",
    "JsonPreferencesStore",
    "InMemoryPreferencesStore",
    "ThemeService",
    "THEME_KEY",
]
