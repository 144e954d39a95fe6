"""Storage for the Gemini API key."""

import os
from typing import Optional

from app_idea_generator.db.kv_store import KeyValueStorage
from app_idea_generator.errors import ValidationError

API_KEY_STORAGE_KEY = "geminiApiKey"
API_KEY_ENV_VAR = "GEMINI_API_KEY"


class CredentialStore:
    """Reads and writes the API key; the stored key wins over the environment."""

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = API_KEY_STORAGE_KEY,
        env_var: Optional[str] = API_KEY_ENV_VAR,
    ):
        self.storage = storage
        self.key = key
        self.env_var = env_var

    def get(self) -> str:
        """Return the API key, or an empty string when none is configured."""
        stored = self.storage.get(self.key)
        if stored:
            return stored
        if self.env_var:
            return os.environ.get(self.env_var, "").strip()
        return ""

    def set(self, api_key: str) -> None:
        api_key = (api_key or "").strip()
        if not api_key:
            raise ValidationError("API key cannot be empty", field="apiKey")
        self.storage.set(self.key, api_key)

    def clear(self) -> None:
        self.storage.delete(self.key)

    def is_configured(self) -> bool:
        return bool(self.get())
