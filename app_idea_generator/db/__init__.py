"""Local persistence: key-value storage and the stored API key."""

from app_idea_generator.db.credentials import CredentialStore
from app_idea_generator.db.kv_store import (
    InMemoryKeyValueStorage,
    KeyValueStorage,
    SQLiteKeyValueStorage,
)

__all__ = [
    "CredentialStore",
    "InMemoryKeyValueStorage",
    "KeyValueStorage",
    "SQLiteKeyValueStorage",
]
