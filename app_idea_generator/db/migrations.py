"""Database migrations for the local key-value store."""

import sqlite3
from pathlib import Path


MIGRATIONS = [
    # Key-value entries (project collection, API key)
    """
    CREATE TABLE IF NOT EXISTS kv_store (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
]


def run_migrations(db_path: Path) -> None:
    """Create the storage tables, creating the parent directory if needed."""
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path, timeout=10)
    try:
        cursor = conn.cursor()
        for migration in MIGRATIONS:
            cursor.execute(migration)
        conn.commit()
    finally:
        conn.close()
