"""QSettings-backed preferences store."""

from typing import Any

from PyQt6.QtCore import QSettings

ORGANIZATION_NAME = "TimeCalculator"
APPLICATION_NAME = "GUI"


class QSettingsPreferencesStore:
    """PreferencesStore implementation that keeps values in QSettings.

    Values are stored as strings; callers persist names, not objects.
    """

    def __init__(self, settings: QSettings | None = None):
        """Initialize the store.

        Args:
            settings: QSettings to use, defaults to the application settings
        """
        self._settings = settings or QSettings(ORGANIZATION_NAME, APPLICATION_NAME)

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.value(key, default)

    def set(self, key: str, value: Any) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()
