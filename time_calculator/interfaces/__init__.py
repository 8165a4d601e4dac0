"""Interface protocols for Time Calculator."""

from .history_sink import HistorySink
from .preferences_store import PreferencesStore
from .presenter import PresenterProtocol

__all__ = ["HistorySink", "PreferencesStore", "PresenterProtocol"]
