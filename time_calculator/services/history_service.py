"""SQLite-backed calculation history service."""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime, timezone
from pathlib import Path

from time_calculator.exceptions import RestoreFailure, StorageError
from time_calculator.models import HistoryEntry, decode_steps, encode_steps

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".time_calculator" / "history.db"


class HistoryService:
    """Service for storing and querying calculation history.

    Uses SQLite for persistent storage across sessions. Each method opens its
    own connection, so the service can be shared by the CLI and the GUI.
    Entries are immutable records: edits write a new label/color and bump
    ``last_modified`` but never touch the result or the steps.
    """

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        """Initialize the history service.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path

    def initialize(self) -> None:
        """Create the database and table if they don't exist.

        Raises:
            StorageError: If the database directory or file cannot be created
        """
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create history directory: {e}") from e

        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS calculation_history (
                    id TEXT PRIMARY KEY,
                    result_seconds INTEGER NOT NULL DEFAULT 0,
                    label TEXT NOT NULL DEFAULT '',
                    color_tag TEXT NOT NULL DEFAULT '',
                    created_at TEXT NOT NULL,
                    last_modified TEXT NOT NULL,
                    steps TEXT NOT NULL DEFAULT '[]'
                )
                """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_history_created
                ON calculation_history(created_at)
                """)
        logger.info(f"History database initialized at {self.db_path}")

    def record(self, entry: HistoryEntry) -> None:
        """Insert a new history entry.

        Args:
            entry: Entry produced by an evaluate key press
        """
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO calculation_history
                    (id, result_seconds, label, color_tag,
                     created_at, last_modified, steps)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    entry.id,
                    entry.result_seconds,
                    entry.label,
                    entry.color_tag,
                    entry.created_at.isoformat(),
                    entry.last_modified.isoformat(),
                    encode_steps(entry.steps),
                ),
            )

    def get_history(self, limit: int = 50) -> list[HistoryEntry]:
        """Get the most recent history entries.

        Args:
            limit: Maximum number of entries to return

        Returns:
            List of entries, newest first
        """
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM calculation_history "
                "ORDER BY created_at DESC, rowid DESC LIMIT ?",
                (limit,),
            ).fetchall()
        return [self._row_to_entry(row) for row in rows]

    def get_entries_on(self, day: date) -> list[HistoryEntry]:
        """Get every entry created on a calendar day.

        Args:
            day: Day to match against the stored creation timestamp

        Returns:
            List of entries, newest first
        """
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM calculation_history WHERE substr(created_at, 1, 10) = ? "
                "ORDER BY created_at DESC, rowid DESC",
                (day.isoformat(),),
            ).fetchall()
        return [self._row_to_entry(row) for row in rows]

    def get_total_seconds(self, day: date | None = None) -> int:
        """Sum the results of stored entries.

        Args:
            day: Only count entries created on this day, or None for all

        Returns:
            Signed total in seconds (0 when nothing matches)
        """
        query = "SELECT COALESCE(SUM(result_seconds), 0) FROM calculation_history"
        params: tuple = ()
        if day is not None:
            query += " WHERE substr(created_at, 1, 10) = ?"
            params = (day.isoformat(),)
        with self._connect() as conn:
            row = conn.execute(query, params).fetchone()
        return int(row[0])

    def get_entry(self, entry_id: str) -> HistoryEntry | None:
        """Get a specific history entry by ID.

        Args:
            entry_id: The entry identifier

        Returns:
            The entry, or None if not found
        """
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM calculation_history WHERE id = ?",
                (entry_id,),
            ).fetchone()
        if row is None:
            return None
        return self._row_to_entry(row)

    def resolve_id(self, prefix: str) -> str | None:
        """Expand an abbreviated entry ID.

        Args:
            prefix: Full ID or leading characters of one

        Returns:
            The full ID if exactly one entry matches, otherwise None
        """
        if not prefix:
            return None
        escaped = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT id FROM calculation_history WHERE id LIKE ? ESCAPE '\\' LIMIT 2",
                (f"{escaped}%",),
            ).fetchall()
        if len(rows) != 1:
            return None
        return rows[0]["id"]

    def get_steps_payload(self, entry_id: str) -> str | None:
        """Get the raw stored steps JSON for an entry.

        Args:
            entry_id: The entry identifier

        Returns:
            The payload text, or None if the entry is not found
        """
        with self._connect() as conn:
            row = conn.execute(
                "SELECT steps FROM calculation_history WHERE id = ?",
                (entry_id,),
            ).fetchone()
        if row is None:
            return None
        return row[0]

    def update_entry(
        self,
        entry_id: str,
        label: str | None = None,
        color_tag: str | None = None,
    ) -> HistoryEntry | None:
        """Change the label and/or color of an entry.

        Args:
            entry_id: The entry identifier
            label: New label, or None to keep the current one
            color_tag: New color tag, or None to keep the current one

        Returns:
            The updated entry, or None if not found
        """
        entry = self.get_entry(entry_id)
        if entry is None:
            return None

        updated = entry.with_details(
            modified_at=datetime.now(timezone.utc),
            label=label,
            color_tag=color_tag,
        )
        with self._connect() as conn:
            conn.execute(
                """
                UPDATE calculation_history
                SET label = ?, color_tag = ?, last_modified = ?
                WHERE id = ?
                """,
                (
                    updated.label,
                    updated.color_tag,
                    updated.last_modified.isoformat(),
                    entry_id,
                ),
            )
        return updated

    def delete_entry(self, entry_id: str) -> bool:
        """Delete a history entry.

        Args:
            entry_id: The entry identifier

        Returns:
            True if a row was deleted, False if not found
        """
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM calculation_history WHERE id = ?",
                (entry_id,),
            )
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Deleted history entry {entry_id}")
        return deleted

    def clear_history(self) -> int:
        """Delete every history entry.

        Returns:
            Number of entries removed
        """
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM calculation_history")
            removed = cursor.rowcount
        logger.info(f"Cleared {removed} history entries")
        return removed

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection that commits on success and always closes.

        Raises:
            StorageError: If SQLite reports an error
        """
        conn = None
        try:
            conn = sqlite3.connect(str(self.db_path))
            conn.row_factory = sqlite3.Row
            with conn:
                yield conn
        except sqlite3.Error as e:
            raise StorageError(f"History database error: {e}") from e
        finally:
            if conn is not None:
                conn.close()

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> HistoryEntry:
        """Convert a database row to a HistoryEntry.

        A row whose steps column cannot be decoded still converts, with no
        steps; restoring it goes through the raw payload and reports the error.

        Args:
            row: SQLite row object

        Returns:
            The history entry
        """
        try:
            steps = decode_steps(row["steps"])
        except RestoreFailure as e:
            logger.warning(f"History entry {row['id']} has unreadable steps: {e}")
            steps = ()
        return HistoryEntry(
            id=row["id"],
            result_seconds=row["result_seconds"],
            label=row["label"],
            color_tag=row["color_tag"],
            created_at=datetime.fromisoformat(row["created_at"]),
            last_modified=datetime.fromisoformat(row["last_modified"]),
            steps=steps,
        )
