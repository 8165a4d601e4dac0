"""
Time Calculator - HH:MM:SS Duration Arithmetic

A keypad-driven calculator that chains durations with arithmetic operators,
evaluates the running expression, and keeps restorable calculation history.
"""

__version__ = "1.0.0"
__author__ = "Time Calculator Contributors"
