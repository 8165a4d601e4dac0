"""Tests for configuration and its GUI persistence."""

import json
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from time_calculator.config import TimeCalculatorConfig, create_default_config
from time_calculator.gui.utils.config_manager import GUIConfigManager


class TestTimeCalculatorConfig:
    """Tests for TimeCalculatorConfig."""

    def test_defaults(self):
        config = create_default_config()
        assert config.default_color_tag == "blue"
        assert config.label_timestamp_format == "%Y-%m-%d %H:%M:%S"
        assert config.history_limit == 50
        assert config.history_db_path.name == "history.db"

    def test_overrides(self):
        config = create_default_config(history_limit=5, default_color_tag="red")
        assert config.history_limit == 5
        assert config.default_color_tag == "red"

    def test_string_paths_are_converted(self):
        config = TimeCalculatorConfig(history_db_path="/tmp/h.db", preferences_path="/tmp/p.json")
        assert config.history_db_path == Path("/tmp/h.db")
        assert isinstance(config.preferences_path, Path)

    def test_frozen(self):
        config = create_default_config()
        with pytest.raises(FrozenInstanceError):
            config.history_limit = 1


class TestGUIConfigManager:
    """Tests for GUIConfigManager."""

    @pytest.fixture(autouse=True)
    def config_file(self, tmp_path, monkeypatch):
        path = tmp_path / "gui_config.json"
        monkeypatch.setattr(GUIConfigManager, "CONFIG_FILE", path)
        return path

    def test_load_without_file_gives_defaults(self):
        assert not GUIConfigManager.config_exists()
        assert GUIConfigManager.load_config() == create_default_config()

    def test_save_and_load(self, tmp_path):
        config = create_default_config(
            history_db_path=tmp_path / "h.db",
            history_limit=7,
        )
        GUIConfigManager.save_config(config)
        assert GUIConfigManager.config_exists()
        assert GUIConfigManager.load_config() == config

    def test_paths_saved_as_strings(self, tmp_path, config_file):
        GUIConfigManager.save_config(create_default_config(history_db_path=tmp_path / "h.db"))
        data = json.loads(config_file.read_text(encoding="utf-8"))
        assert data["history_db_path"] == str(tmp_path / "h.db")

    def test_unknown_keys_ignored(self, config_file):
        config_file.write_text(json.dumps({"history_limit": 3, "window": "big"}), encoding="utf-8")
        assert GUIConfigManager.load_config().history_limit == 3

    def test_invalid_file_gives_defaults(self, config_file):
        config_file.write_text("not json", encoding="utf-8")
        assert GUIConfigManager.load_config() == create_default_config()

    def test_non_object_file_gives_defaults(self, config_file):
        config_file.write_text("[1, 2]", encoding="utf-8")
        assert GUIConfigManager.load_config() == create_default_config()

    def test_delete_config(self, config_file):
        GUIConfigManager.save_config(create_default_config())
        GUIConfigManager.delete_config()
        assert not config_file.exists()
        GUIConfigManager.delete_config()  # Should not raise
