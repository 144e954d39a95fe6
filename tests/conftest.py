"""Shared test helpers."""

import itertools

import pytest

from app_idea_generator.generation.providers.base import LLMProvider


GUIDE_TEXT = "# Ledger Build Guide\n\n## Project Overview\nA ledger."


class FakeProvider(LLMProvider):
    """Records every call; answers from a queue, then with a default text.

    Queued exceptions are raised instead of returned.
    """

    def __init__(self, responses=None, default: str = GUIDE_TEXT):
        self.responses = list(responses or [])
        self.default = default
        self.calls = []

    @property
    def name(self) -> str:
        return "fake"

    def generate(self, prompt, params, api_key):
        self.calls.append({"prompt": prompt, "params": params, "api_key": api_key})
        response = self.responses.pop(0) if self.responses else self.default
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def storage():
    from app_idea_generator.db.kv_store import InMemoryKeyValueStorage

    return InMemoryKeyValueStorage()


@pytest.fixture
def credentials(storage):
    from app_idea_generator.db.credentials import CredentialStore

    store = CredentialStore(storage, env_var=None)
    store.set("test-key")
    return store


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def config(tmp_path):
    from app_idea_generator.config import GeneratorConfig

    return GeneratorConfig(db_path=tmp_path / "ideas.db")


@pytest.fixture
def client(credentials, provider, config):
    from app_idea_generator.generation.client import GenerationClient

    return GenerationClient(credentials, provider=provider, config=config)


@pytest.fixture
def store(storage):
    from app_idea_generator.projects.store import ProjectStore

    return ProjectStore(storage)


@pytest.fixture
def orchestrator(store, client):
    from app_idea_generator.orchestrator import Orchestrator

    counter = itertools.count(1)
    return Orchestrator(
        store,
        client,
        id_factory=lambda: f"project-{next(counter)}",
        clock=lambda: "2025-04-01T12:00:00+00:00",
    )


@pytest.fixture
def ledger_idea():
    from app_idea_generator.projects.types import IdeaDescriptor

    return IdeaDescriptor(
        app_name="Ledger",
        description="Track personal expenses from bank exports",
        app_architecture="backend",
        primary_language="python",
        app_type="api",
        app_complexity="moderate",
        experience_level="intermediate",
        frameworks=["FastAPI", "PostgreSQL"],
        features="1. Import CSV\n2. Monthly reports",
        target_audience="Freelancers",
    )
