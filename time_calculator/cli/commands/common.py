"""Helpers shared by the CLI commands."""

from time_calculator.config import TimeCalculatorConfig, create_default_config
from time_calculator.services import HistoryService


def config_from_args(args) -> TimeCalculatorConfig:
    """Create the configuration, applying path overrides from the command line."""
    overrides = {}
    if getattr(args, "history_db", None):
        overrides["history_db_path"] = args.history_db
    if getattr(args, "preferences", None):
        overrides["preferences_path"] = args.preferences
    return create_default_config(**overrides)


def open_history(config: TimeCalculatorConfig) -> HistoryService:
    """Create the history service and make sure its table exists."""
    service = HistoryService(config.history_db_path)
    service.initialize()
    return service
