"""Configuration for the generator."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from app_idea_generator.db.config import get_db_path

GEMINI_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models/"
DEFAULT_PRIMARY_MODEL = "gemini-2.5-pro-exp-03-25"
DEFAULT_AUXILIARY_MODEL = "gemini-2.0-flash-thinking-exp-01-21"


@dataclass
class GeneratorConfig:
    """Configuration for the generator."""

    # Paths
    db_path: Path = field(default_factory=get_db_path)

    # Remote model API
    api_base_url: str = GEMINI_API_BASE_URL
    primary_model: str = DEFAULT_PRIMARY_MODEL      # build, code and style guides
    auxiliary_model: str = DEFAULT_AUXILIARY_MODEL  # feature suggestions, surprise ideas
    request_timeout: float = 300.0  # seconds; guide generation is slow

    # Shareable links
    share_base_url: str = ""

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Create configuration from environment variables."""
        return cls(
            db_path=get_db_path(),
            api_base_url=os.environ.get("GEMINI_API_BASE_URL", GEMINI_API_BASE_URL),
            primary_model=os.environ.get("APP_IDEA_PRIMARY_MODEL", DEFAULT_PRIMARY_MODEL),
            auxiliary_model=os.environ.get("APP_IDEA_AUXILIARY_MODEL", DEFAULT_AUXILIARY_MODEL),
            request_timeout=float(os.environ.get("APP_IDEA_REQUEST_TIMEOUT_SECONDS", 300)),
            share_base_url=os.environ.get("APP_IDEA_SHARE_BASE_URL", ""),
        )
