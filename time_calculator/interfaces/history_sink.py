"""Protocol for the collaborator that receives new history entries."""

from typing import Protocol

from time_calculator.models import HistoryEntry


class HistorySink(Protocol):
    """Anything that accepts history entries produced by evaluate.

    The SQLite history service implements this; tests and previews can pass a
    simple list-backed recorder instead.
    """

    def record(self, entry: HistoryEntry) -> None:
        """Store a newly created history entry.

        Args:
            entry: The entry produced by an evaluate key press
        """
        ...
