"""Key-value storage backends.

The project collection and the API key each live under a single key, the way
a browser's local storage would hold them.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from app_idea_generator.db.connection import get_generator_db
from app_idea_generator.db.migrations import run_migrations


class KeyValueStorage(ABC):
    """String-to-string storage with whole-value reads and writes."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Overwrite the value stored under key."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key; missing keys are ignored."""
        pass


class InMemoryKeyValueStorage(KeyValueStorage):
    """Process-local storage, used by tests and one-off sessions."""

    def __init__(self, initial: Optional[dict] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class SQLiteKeyValueStorage(KeyValueStorage):
    """Durable storage in a single SQLite table."""

    def __init__(self, db_path: Path):
        self.db_path = str(db_path)
        run_migrations(Path(self.db_path))

    def get(self, key: str) -> Optional[str]:
        with get_generator_db(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with get_generator_db(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (key, value, now)
            )
            conn.commit()

    def delete(self, key: str) -> None:
        with get_generator_db(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            conn.commit()
