"""Dialogs for editing calculations and history entries."""
