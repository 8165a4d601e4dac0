"""Presenter protocol for output abstraction."""

from typing import Protocol

from time_calculator.models import HistoryEntry


class PresenterProtocol(Protocol):
    """Interface for presenting output to the user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    commands to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_calculation(self, display: str, trace: str) -> None:
        """Display the current value and the running expression.

        Args:
            display: Current value as HH:MM:SS
            trace: Running-expression readout
        """
        ...

    def show_history_entry(self, entry: HistoryEntry) -> None:
        """Display a single history entry in detail.

        Args:
            entry: The entry to display
        """
        ...

    def show_history(self, entries: list[HistoryEntry], total_seconds: int) -> None:
        """Display a list of history entries and their running total.

        Args:
            entries: Entries to list, newest first
            total_seconds: Sum of the results the list was drawn from
        """
        ...
