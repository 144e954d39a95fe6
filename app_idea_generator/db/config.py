"""Storage configuration."""

import os
from pathlib import Path

# Default location of the local store (override with APP_IDEA_DB env var)
DEFAULT_DB_PATH = Path.home() / ".app-idea-generator" / "app_ideas.db"


def get_db_path() -> Path:
    """Get the storage path, with environment override support."""
    env_path = os.environ.get("APP_IDEA_DB")
    if env_path:
        return Path(env_path)
    return DEFAULT_DB_PATH
