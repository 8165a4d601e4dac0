"""Command-line interface for Time Calculator."""
