"""Local rewrite history: a store interface and its SQLite implementation."""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Protocol, runtime_checkable

from say_better.models.history import HistoryEntry

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".say-better" / "history.db"


@runtime_checkable
class HistoryStore(Protocol):
    """Append-only record store for past rewrites."""

    def append(self, entry: HistoryEntry) -> int | None:
        ...

    def list_recent(self, query: str | None = None, limit: int | None = None) -> list[HistoryEntry]:
        ...

    def clear_all(self) -> int:
        ...


class SQLiteHistoryStore:
    """SQLite-backed history with WAL mode. Entries survive until cleared."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS snippets (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    input_text TEXT NOT NULL,
                    tone TEXT NOT NULL DEFAULT 'Normal',
                    corrected TEXT NOT NULL DEFAULT '',
                    professional TEXT NOT NULL DEFAULT '',
                    casual TEXT NOT NULL DEFAULT '',
                    genz TEXT NOT NULL DEFAULT '',
                    created_at TEXT NOT NULL
                )
            """)

    def append(self, entry: HistoryEntry) -> int | None:
        """Persist an entry and return its id.

        Entries whose four variants are all empty are not stored; ``None``
        is returned instead.
        """
        if not entry.result.has_content:
            logger.debug("Skipping history entry with empty result")
            return None
        with self._connect() as conn:
            cursor = conn.execute(
                """INSERT INTO snippets
                   (input_text, tone, corrected, professional, casual, genz, created_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?)""",
                (
                    entry.input_text,
                    entry.tone,
                    entry.corrected,
                    entry.professional,
                    entry.casual,
                    entry.genz,
                    entry.created_at.isoformat(),
                ),
            )
            return cursor.lastrowid

    def list_recent(self, query: str | None = None, limit: int | None = None) -> list[HistoryEntry]:
        """Return entries newest first, optionally filtered by input text.

        Order follows the insertion id, which only grows, so wall-clock
        changes (DST, manual clock edits) cannot reorder entries.
        """
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM snippets ORDER BY id DESC"
            ).fetchall()
        entries = [self._row_to_entry(row) for row in rows]

        needle = (query or "").strip().lower()
        if needle:
            entries = [e for e in entries if needle in e.input_text.lower()]
        if limit is not None:
            entries = entries[:limit]
        return entries

    def get(self, entry_id: int) -> HistoryEntry | None:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM snippets WHERE id = ?", (entry_id,)).fetchone()
        return self._row_to_entry(row) if row else None

    def count(self) -> int:
        with self._connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM snippets").fetchone()[0]

    def clear_all(self) -> int:
        """Delete every entry. Returns count of deleted rows."""
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM snippets")
            return cursor.rowcount

    @staticmethod
    def _row_to_entry(row: tuple) -> HistoryEntry:
        return HistoryEntry(
            id=row[0],
            input_text=row[1],
            tone=row[2],
            corrected=row[3],
            professional=row[4],
            casual=row[5],
            genz=row[6],
            created_at=datetime.fromisoformat(row[7]),
        )
