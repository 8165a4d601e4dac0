"""Saved calculator settings for the desktop window.

The GUI reads ``gui_config.json`` at startup. Only fields of
TimeCalculatorConfig are taken from it; other keys are skipped so a file
written by a different version still loads.
"""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from time_calculator.config import TimeCalculatorConfig, create_default_config

logger = logging.getLogger(__name__)


def _config_fields(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise TypeError(f"expected a JSON object, got {type(raw).__name__}")
    names = {f.name for f in fields(TimeCalculatorConfig)}
    return {key: value for key, value in raw.items() if key in names}


class GUIConfigManager:
    """Reads and writes the calculator config as JSON beside the history database."""

    CONFIG_FILE = Path.home() / ".time_calculator" / "gui_config.json"

    @classmethod
    def save_config(cls, config: TimeCalculatorConfig) -> None:
        """Write ``config``, storing path fields as plain strings.

        Raises:
            OSError: If the settings directory or file cannot be written
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            name: str(value) if isinstance(value, Path) else value
            for name, value in asdict(config).items()
        }
        cls.CONFIG_FILE.write_text(
            json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
        )

    @classmethod
    def load_config(cls) -> TimeCalculatorConfig:
        """Read the saved config; defaults are used when there is no usable file."""
        if not cls.CONFIG_FILE.is_file():
            return create_default_config()

        try:
            overrides = _config_fields(json.loads(cls.CONFIG_FILE.read_text(encoding="utf-8")))
            return create_default_config(**overrides)
        except (TypeError, ValueError) as e:
            logger.warning(f"Ignoring unreadable settings in {cls.CONFIG_FILE}: {e}")
            return create_default_config()

    @classmethod
    def config_exists(cls) -> bool:
        return cls.CONFIG_FILE.is_file()

    @classmethod
    def delete_config(cls) -> None:
        """Forget the saved settings; the next load returns the defaults."""
        cls.CONFIG_FILE.unlink(missing_ok=True)
