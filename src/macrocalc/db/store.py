"""JSON key-value persistence on top of SQLite.

Each application record (profile, weight logs, theme flag) lives under its
own key and is written independently of the others.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Optional

logger = logging.getLogger(__name__)

PROFILE_KEY = "profile"
LOGS_KEY = "weight_logs"
THEME_KEY = "dark_mode"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


class KeyValueStore:
    """Load and save JSON-encoded values by name in a SQLite file."""

    def __init__(self, db_path: Path):
        """Open the store, creating the file and table if needed.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.executescript(SCHEMA_SQL)

    @contextmanager
    def _connect(self) -> Generator[sqlite3.Connection, None, None]:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def load(self, key: str, default: Any = None) -> Any:
        """Return the decoded value stored under ``key``.

        Args:
            key: Record name
            default: Value returned when the key is absent or unreadable

        Returns:
            The stored value, or ``default``
        """
        with self._connect() as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()

        if row is None:
            return default

        try:
            value = json.loads(row["value"])
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable record %r, using default", key)
            return default

        # A stored JSON null behaves like a missing record
        if value is None:
            return default
        return value

    def save(self, key: str, value: Any) -> None:
        """Encode ``value`` as JSON and store it under ``key``."""
        encoded = json.dumps(value)
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE
                SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (key, encoded),
            )
        logger.debug("Saved record %r", key)


# Global store instance (lazy loaded)
_store: Optional[KeyValueStore] = None


def get_store() -> KeyValueStore:
    """Get the global store instance.

    Lazily opens the database configured in settings.

    Returns:
        KeyValueStore instance
    """
    global _store
    if _store is None:
        from macrocalc.config import get_settings

        _store = KeyValueStore(get_settings().database.path)
    return _store


def set_store(store: Optional[KeyValueStore]) -> None:
    """Set the global store instance.

    Useful for testing with a temporary database. Passing None makes the
    next ``get_store`` call reopen the configured database.

    Args:
        store: KeyValueStore instance to use
    """
    global _store
    _store = store
