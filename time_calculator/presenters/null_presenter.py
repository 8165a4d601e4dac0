"""Null presenter for testing (no output)."""

from time_calculator.models import HistoryEntry


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_calculation(self, display: str, trace: str) -> None:
        """Display the current value and running expression (no-op)."""
        pass

    def show_history_entry(self, entry: HistoryEntry) -> None:
        """Display a history entry (no-op)."""
        pass

    def show_history(self, entries: list[HistoryEntry], total_seconds: int) -> None:
        """Display a list of history entries (no-op)."""
        pass
