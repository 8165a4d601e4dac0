"""Configuration classes for Time Calculator."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class TimeCalculatorConfig:
    """Immutable configuration for the calculator and its history store.

    The config is frozen so the session and the front ends can share one
    instance without worrying about accidental modification.
    """

    # Storage settings
    history_db_path: Path = field(
        default_factory=lambda: Path.home() / ".time_calculator" / "history.db"
    )
    preferences_path: Path = field(
        default_factory=lambda: Path.home() / ".time_calculator" / "preferences.json"
    )

    # History entry defaults
    default_color_tag: str = "blue"
    label_timestamp_format: str = "%Y-%m-%d %H:%M:%S"  # Default label for new entries
    history_limit: int = 50  # Entries shown by list views

    # Appearance
    default_theme: str = "blue"

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.history_db_path, str):
            object.__setattr__(self, "history_db_path", Path(self.history_db_path))
        if isinstance(self.preferences_path, str):
            object.__setattr__(self, "preferences_path", Path(self.preferences_path))
