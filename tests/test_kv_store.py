"""Tests for key-value storage backends."""

import pytest


@pytest.fixture
def sqlite_storage(tmp_path):
    from app_idea_generator.db.kv_store import SQLiteKeyValueStorage

    return SQLiteKeyValueStorage(tmp_path / "nested" / "ideas.db")


def test_sqlite_creates_database(tmp_path, sqlite_storage):
    assert (tmp_path / "nested" / "ideas.db").exists()


def test_sqlite_get_missing_key(sqlite_storage):
    assert sqlite_storage.get("appIdeaProjects") is None


def test_sqlite_set_overwrites(sqlite_storage):
    sqlite_storage.set("geminiApiKey", "first")
    sqlite_storage.set("geminiApiKey", "second")

    assert sqlite_storage.get("geminiApiKey") == "second"


def test_sqlite_delete(sqlite_storage):
    sqlite_storage.set("geminiApiKey", "key")
    sqlite_storage.delete("geminiApiKey")
    sqlite_storage.delete("never-set")

    assert sqlite_storage.get("geminiApiKey") is None


def test_sqlite_values_persist_across_instances(tmp_path, sqlite_storage):
    from app_idea_generator.db.kv_store import SQLiteKeyValueStorage

    sqlite_storage.set("appIdeaProjects", "[]")

    assert SQLiteKeyValueStorage(tmp_path / "nested" / "ideas.db").get("appIdeaProjects") == "[]"


def test_in_memory_storage():
    from app_idea_generator.db.kv_store import InMemoryKeyValueStorage

    storage = InMemoryKeyValueStorage({"a": "1"})
    storage.set("b", "2")
    storage.delete("a")

    assert storage.get("a") is None
    assert storage.get("b") == "2"


def test_migrations_are_idempotent(tmp_path):
    import sqlite3
    from app_idea_generator.db.migrations import run_migrations

    db_path = tmp_path / "ideas.db"
    run_migrations(db_path)
    run_migrations(db_path)

    conn = sqlite3.connect(db_path)
    tables = [row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")]
    conn.close()

    assert "kv_store" in tables
