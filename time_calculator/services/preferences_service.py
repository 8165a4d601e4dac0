"""Persisted preferences and the theme selection built on them."""

import json
import logging
from pathlib import Path
from typing import Any

from time_calculator.interfaces import PreferencesStore
from time_calculator.models import ColorScheme

logger = logging.getLogger(__name__)

THEME_KEY = "selectedTheme"


class JsonPreferencesStore:
    """Key-value preferences kept in a JSON object on disk.

    Implements PreferencesStore. A missing or corrupt file reads as empty.
    """

    def __init__(self, file_path: Path):
        """Initialize the store.

        Args:
            file_path: Path of the JSON file
        """
        self._file_path = file_path

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def _load(self) -> dict[str, Any]:
        """Load preferences from the JSON file."""
        if not self._file_path.exists():
            return {}
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                return data
            logger.warning(f"Ignoring preferences file {self._file_path}: not an object")
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self._file_path}: {e}")
        return {}

    def _save(self, data: dict[str, Any]) -> None:
        """Save preferences to the JSON file."""
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )


class InMemoryPreferencesStore:
    """Non-persistent PreferencesStore for previews and tests."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class ThemeService:
    """Resolve and persist the selected color scheme.

    The selection is read from the injected store every time, so several
    front ends sharing one store agree on the current scheme.
    """

    def __init__(self, store: PreferencesStore, default: ColorScheme = ColorScheme.BLUE):
        """Initialize the theme service.

        Args:
            store: Where the selection is persisted
            default: Scheme used when nothing valid is stored
        """
        self._store = store
        self._default = default

    @staticmethod
    def available_schemes() -> list[ColorScheme]:
        return list(ColorScheme)

    def current_scheme(self) -> ColorScheme:
        """Get the persisted scheme, or the default if none is stored."""
        saved = self._store.get(THEME_KEY)
        scheme = ColorScheme.from_name(saved) if isinstance(saved, str) else None
        if scheme is None:
            if saved is not None:
                logger.warning(f"Unknown saved theme {saved!r}, using {self._default.display_name}")
            return self._default
        return scheme

    def apply_scheme(self, scheme: ColorScheme) -> ColorScheme:
        """Select a scheme and persist it.

        Args:
            scheme: The scheme to select

        Returns:
            The selected scheme
        """
        self._store.set(THEME_KEY, scheme.display_name)
        return scheme
