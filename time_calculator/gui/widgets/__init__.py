"""Widgets for the Time Calculator window."""
