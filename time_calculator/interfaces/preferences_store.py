"""Protocol for persisted key-value preferences."""

from typing import Any, Protocol


class PreferencesStore(Protocol):
    """Interface for a small persisted key-value store.

    The theme service reads and writes its selection through this protocol so
    the storage backend (JSON file, QSettings, memory) is chosen by the caller.
    """

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for ``key``, or ``default``."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Persist ``value`` under ``key``."""
        ...
