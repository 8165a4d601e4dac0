"""PyQt6 desktop front end for Time Calculator."""
