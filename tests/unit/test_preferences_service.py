"""Tests for preferences_service module."""

import json

import pytest

from time_calculator.models import ColorScheme
from time_calculator.services.preferences_service import (
    THEME_KEY,
    InMemoryPreferencesStore,
    JsonPreferencesStore,
    ThemeService,
)


class TestJsonPreferencesStore:
    """Tests for JsonPreferencesStore."""

    @pytest.fixture
    def store(self, tmp_path):
        return JsonPreferencesStore(tmp_path / "prefs" / "preferences.json")

    def test_missing_file_reads_default(self, store):
        assert store.get("anything") is None
        assert store.get("anything", "fallback") == "fallback"

    def test_set_creates_file(self, store, tmp_path):
        store.set("key", "value")
        path = tmp_path / "prefs" / "preferences.json"
        assert json.loads(path.read_text(encoding="utf-8")) == {"key": "value"}

    def test_set_keeps_other_keys(self, store):
        store.set("a", 1)
        store.set("b", 2)
        assert store.get("a") == 1
        assert store.get("b") == 2

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text("{oops", encoding="utf-8")
        assert JsonPreferencesStore(path).get(THEME_KEY) is None

    def test_non_object_file_reads_empty(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert JsonPreferencesStore(path).get("a") is None


class TestThemeService:
    """Tests for ThemeService."""

    def test_default_scheme(self, memory_preferences):
        assert ThemeService(memory_preferences).current_scheme() is ColorScheme.BLUE

    def test_custom_default(self, memory_preferences):
        service = ThemeService(memory_preferences, default=ColorScheme.ORANGE)
        assert service.current_scheme() is ColorScheme.ORANGE

    def test_apply_persists_display_name(self, memory_preferences):
        service = ThemeService(memory_preferences)
        assert service.apply_scheme(ColorScheme.RED) is ColorScheme.RED
        assert memory_preferences.get(THEME_KEY) == "Red"
        assert service.current_scheme() is ColorScheme.RED

    def test_selection_survives_new_service(self, tmp_path):
        """A new service over the same file should see the saved scheme."""
        path = tmp_path / "preferences.json"
        ThemeService(JsonPreferencesStore(path)).apply_scheme(ColorScheme.ORANGE)
        assert ThemeService(JsonPreferencesStore(path)).current_scheme() is ColorScheme.ORANGE

    @pytest.mark.parametrize("saved", ["Purple", 42, ""])
    def test_invalid_saved_value_uses_default(self, saved):
        store = InMemoryPreferencesStore({THEME_KEY: saved})
        assert ThemeService(store).current_scheme() is ColorScheme.BLUE

    def test_available_schemes(self):
        assert ThemeService.available_schemes() == [
            ColorScheme.ORANGE,
            ColorScheme.BLUE,
            ColorScheme.RED,
        ]
