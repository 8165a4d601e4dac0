"""Console presenter for CLI output."""

from time_calculator.models import HistoryEntry
from time_calculator.utils import format_duration, format_hours_minutes


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_calculation(self, display: str, trace: str) -> None:
        """Display the running expression above the current value."""
        if trace:
            print(f"  {trace}")
        print(f"  = {display}")

    def show_history_entry(self, entry: HistoryEntry) -> None:
        """Display a single history entry in detail."""
        print(f"\n{entry.label or '(no label)'}")
        print(f"  ID:       {entry.id}")
        print(f"  Result:   {entry.display_string} ({entry.summary})")
        print(f"  Color:    {entry.color_tag}")
        print(f"  Created:  {entry.created_at:%Y-%m-%d %H:%M:%S}")
        print(f"  Modified: {entry.last_modified:%Y-%m-%d %H:%M:%S}")
        print(f"  Steps:    {entry.expression}")

    def show_history(self, entries: list[HistoryEntry], total_seconds: int) -> None:
        """Display a list of history entries followed by the running total."""
        print(f"\nHistory ({len(entries)} entries):")
        print("=" * 60)

        for entry in entries:
            print(f"{entry.id[:8]}  {entry.display_string:>12s}  {entry.label}")

        print("-" * 60)
        print(f"Total: {format_duration(total_seconds)} ({format_hours_minutes(total_seconds)})")
