"""Tests for database configuration."""

from pathlib import Path


def test_get_db_path_returns_path(monkeypatch):
    from app_idea_generator.db.config import get_db_path

    monkeypatch.delenv("APP_IDEA_DB", raising=False)
    path = get_db_path()
    assert isinstance(path, Path)
    assert path.name == "app_ideas.db"


def test_get_db_path_uses_env_override(monkeypatch):
    from app_idea_generator.db.config import get_db_path

    monkeypatch.setenv("APP_IDEA_DB", "/custom/path/test.db")
    path = get_db_path()
    assert path == Path("/custom/path/test.db")


def test_connection_uses_row_factory(tmp_path):
    import sqlite3
    from app_idea_generator.db.connection import get_generator_db
    from app_idea_generator.db.migrations import run_migrations

    db_path = tmp_path / "nested" / "ideas.db"
    run_migrations(db_path)

    with get_generator_db(str(db_path)) as conn:
        assert conn.row_factory is sqlite3.Row
        tables = [row["name"] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")]

    assert "kv_store" in tables
