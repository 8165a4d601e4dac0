"""Default configuration values for Time Calculator."""

from .config import TimeCalculatorConfig


def create_default_config(**overrides) -> TimeCalculatorConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        TimeCalculatorConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            default_color_tag="green",
            history_limit=20
        )
    """
    return TimeCalculatorConfig(**overrides)
