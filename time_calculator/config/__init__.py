"""Configuration management for Time Calculator."""

from .config import TimeCalculatorConfig
from .defaults import create_default_config

__all__ = ["TimeCalculatorConfig", "create_default_config"]
