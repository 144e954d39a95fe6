# tests/test_orchestrator.py
"""Tests for the Orchestrator."""

import json
import logging

import pytest

from conftest import FakeProvider


def test_orchestrator_starts_with_no_project(orchestrator):
    from app_idea_generator.orchestrator import ViewState

    assert orchestrator.state is ViewState.NO_PROJECT
    assert orchestrator.current_project is None
    assert orchestrator.current_document() is None


def test_submit_creates_and_stores_project(orchestrator, provider, store, ledger_idea):
    from app_idea_generator.orchestrator import ViewState
    from app_idea_generator.projects.types import DocumentKind

    project = orchestrator.submit(ledger_idea)

    assert len(provider.calls) == 1
    assert 'application called "Ledger"' in provider.calls[0]["prompt"]
    assert project.id == "project-1"
    assert project.title == "Ledger"
    assert project.associated_files == []
    assert project.timestamp == "2025-04-01T12:00:00+00:00"
    assert orchestrator.state is ViewState.VIEWING
    assert orchestrator.current_kind is DocumentKind.BUILD_GUIDE
    assert [p.id for p in store.load()] == ["project-1"]
    assert store.get("project-1").data.primary_language == "python"


def test_submit_requires_name_and_language(orchestrator, provider, ledger_idea):
    from dataclasses import replace
    from app_idea_generator.errors import ValidationError

    with pytest.raises(ValidationError) as exc_info:
        orchestrator.submit(replace(ledger_idea, app_name="  "))
    assert exc_info.value.field == "appName"

    with pytest.raises(ValidationError) as exc_info:
        orchestrator.submit(replace(ledger_idea, primary_language=""))
    assert exc_info.value.field == "primaryLanguage"

    assert provider.calls == []


def test_submit_rejects_language_not_allowed_for_architecture(orchestrator, provider, ledger_idea):
    from dataclasses import replace
    from app_idea_generator.errors import ValidationError

    with pytest.raises(ValidationError, match="not available for frontend"):
        orchestrator.submit(replace(ledger_idea, app_architecture="frontend"))

    assert provider.calls == []


def test_submit_failure_restores_previous_state(store, client, provider, orchestrator, ledger_idea):
    from app_idea_generator.errors import TransportError
    from app_idea_generator.orchestrator import ViewState

    provider.responses = [TransportError("API Error: boom", status_code=500)]

    with pytest.raises(TransportError):
        orchestrator.submit(ledger_idea)

    assert orchestrator.state is ViewState.NO_PROJECT
    assert store.load() == []


def test_submit_failure_returns_to_open_project(orchestrator, provider, ledger_idea):
    from app_idea_generator.errors import MalformedResponseError
    from app_idea_generator.orchestrator import ViewState
    from app_idea_generator.projects.types import DocumentKind

    first = orchestrator.submit(ledger_idea)
    orchestrator.request_document(DocumentKind.CODE)
    provider.responses = [MalformedResponseError("Invalid response format from API")]

    with pytest.raises(MalformedResponseError):
        orchestrator.submit(ledger_idea)

    assert orchestrator.state is ViewState.VIEWING
    assert orchestrator.current_project.id == first.id
    assert orchestrator.current_kind is DocumentKind.CODE


def test_submit_attaches_ai_model_info_only_for_ai_ideas(orchestrator, store, ledger_idea):
    from dataclasses import replace

    plain = orchestrator.submit(ledger_idea)
    ai = orchestrator.submit(replace(ledger_idea, frameworks=["FastAPI", "AI API calls"]))

    assert store.get(plain.id).data.ai_model_info is None
    assert store.get(ai.id).data.ai_model_info["lastUpdated"] == "April 1, 2025"


def test_submit_merges_feature_board(orchestrator, provider, store, ledger_idea):
    provider.responses = [
        '[{"id": "a", "name": "CSV Import", "description": "Load exports"},'
        ' {"id": "b", "name": "Budgets", "description": "Limits"}]',
    ]
    orchestrator.suggest_features(ledger_idea)
    orchestrator.board.select("a")
    orchestrator.board.select("b")
    orchestrator.board.defer("b")

    project = orchestrator.submit(ledger_idea)

    prompt = provider.calls[-1]["prompt"]
    assert "Core Features to implement:\n1. CSV Import: Load exports" in prompt
    assert "Future Features (to implement later):\n1. Budgets: Limits" in prompt
    stored = store.get(project.id).data
    assert [f.id for f in stored.selected_features] == ["a"]
    assert [f.id for f in stored.deferred_features] == ["b"]


def test_ledger_scenario(orchestrator, provider, store, ledger_idea):
    """Submit, add code and style guides, then reopen the code guide from storage."""
    from app_idea_generator.projects.types import DocumentKind

    project = orchestrator.submit(ledger_idea)
    code = orchestrator.request_document(DocumentKind.CODE)
    style = orchestrator.request_document(DocumentKind.STYLE)

    assert code.title == "Ledger - Python Guide"
    assert style.title == "Ledger - Style Guide"
    assert len(provider.calls) == 3
    assert "This PY.md file" in provider.calls[1]["prompt"]
    # the style request sees the code guide that was just generated
    assert "---CODE GUIDE CONTENT---" in provider.calls[2]["prompt"]

    stored = store.get(project.id)
    assert [d.file_type for d in stored.associated_files] == [DocumentKind.CODE, DocumentKind.STYLE]
    assert all(d.parent_id == project.id for d in stored.associated_files)
    assert stored.to_dict() == orchestrator.current_project.to_dict()


def test_existing_document_is_shown_without_request(orchestrator, provider, ledger_idea):
    from app_idea_generator.orchestrator import ViewState
    from app_idea_generator.projects.types import DocumentKind

    orchestrator.submit(ledger_idea)
    orchestrator.request_document(DocumentKind.CODE)
    orchestrator.switch_document(DocumentKind.BUILD_GUIDE)
    calls_before = len(provider.calls)

    document = orchestrator.request_document(DocumentKind.CODE)

    assert len(provider.calls) == calls_before
    assert document.file_type is DocumentKind.CODE
    assert orchestrator.state is ViewState.VIEWING
    assert orchestrator.current_kind is DocumentKind.CODE


def test_style_requested_twice_makes_one_call(orchestrator, provider, store, ledger_idea):
    from app_idea_generator.projects.types import DocumentKind

    project = orchestrator.submit(ledger_idea)
    orchestrator.request_document(DocumentKind.STYLE)
    orchestrator.request_document(DocumentKind.STYLE)

    assert len(provider.calls) == 2
    assert len(store.get(project.id).associated_files) == 1


def test_existing_code_document_loaded_from_storage_makes_no_call(
    store, credentials, config, ledger_idea
):
    from app_idea_generator.generation.client import GenerationClient
    from app_idea_generator.orchestrator import Orchestrator
    from app_idea_generator.projects.types import DocumentKind, DocumentRecord, Project

    project = Project("p1", "Ledger", "# BUILD", "t", ledger_idea).with_document(
        DocumentRecord("Ledger - Python Guide", "# CODE", DocumentKind.CODE, "t", "p1")
    )
    store.add(project)
    provider = FakeProvider()
    orchestrator = Orchestrator(store, GenerationClient(credentials, provider=provider, config=config))

    orchestrator.view_project("p1")
    document = orchestrator.request_document(DocumentKind.CODE)

    assert document.content == "# CODE"
    assert provider.calls == []


def test_additional_document_failure_keeps_project_unchanged(orchestrator, provider, store, ledger_idea):
    from app_idea_generator.errors import TransportError
    from app_idea_generator.orchestrator import ViewState
    from app_idea_generator.projects.types import DocumentKind

    project = orchestrator.submit(ledger_idea)
    provider.responses = [TransportError("Network error: timeout")]

    with pytest.raises(TransportError):
        orchestrator.request_document(DocumentKind.STYLE)

    assert orchestrator.state is ViewState.VIEWING
    assert orchestrator.current_kind is DocumentKind.BUILD_GUIDE
    assert store.get(project.id).associated_files == []


def test_request_document_without_project(orchestrator):
    from app_idea_generator.errors import ForbiddenActionError
    from app_idea_generator.projects.types import DocumentKind

    with pytest.raises(ForbiddenActionError):
        orchestrator.request_document(DocumentKind.CODE)


def test_switch_to_missing_document(orchestrator, ledger_idea):
    from app_idea_generator.errors import ValidationError
    from app_idea_generator.projects.types import DocumentKind

    orchestrator.submit(ledger_idea)

    with pytest.raises(ValidationError):
        orchestrator.switch_document(DocumentKind.STYLE)


def test_build_guide_cannot_be_deleted(orchestrator, store, ledger_idea):
    from app_idea_generator.errors import ForbiddenActionError
    from app_idea_generator.projects.types import DocumentKind

    project = orchestrator.submit(ledger_idea)
    orchestrator.request_document(DocumentKind.CODE)
    orchestrator.switch_document(DocumentKind.BUILD_GUIDE)

    with pytest.raises(ForbiddenActionError):
        orchestrator.delete_current_document()

    assert store.get(project.id).content
    assert len(store.get(project.id).associated_files) == 1


def test_delete_current_document(orchestrator, store, ledger_idea):
    from app_idea_generator.projects.types import DocumentKind

    project = orchestrator.submit(ledger_idea)
    orchestrator.request_document(DocumentKind.CODE)
    orchestrator.request_document(DocumentKind.STYLE)

    deleted = orchestrator.delete_current_document()

    assert deleted is DocumentKind.STYLE
    assert orchestrator.current_kind is DocumentKind.BUILD_GUIDE
    assert [d.file_type for d in store.get(project.id).associated_files] == [DocumentKind.CODE]
    assert orchestrator.current_project.get_document(DocumentKind.STYLE) is None



def test_document_changes_re_add_vanished_project(orchestrator, store, ledger_idea, caplog):
    from app_idea_generator.projects.types import DocumentKind

    project = orchestrator.submit(ledger_idea)
    store.delete(project.id)
    with caplog.at_level(logging.WARNING, logger="app_idea_generator.orchestrator"):
        orchestrator.request_document(DocumentKind.CODE)

    assert [d.file_type for d in store.get(project.id).associated_files] == [DocumentKind.CODE]

    store.delete(project.id)
    with caplog.at_level(logging.WARNING, logger="app_idea_generator.orchestrator"):
        orchestrator.delete_current_document()

    restored = store.get(project.id)
    assert restored is not None
    assert restored.associated_files == []
    assert orchestrator.current_project.to_dict() == restored.to_dict()
    assert caplog.text.count("was missing from the store") == 2

def test_delete_project_closes_current(orchestrator, store, ledger_idea):
    from app_idea_generator.orchestrator import ViewState

    project = orchestrator.submit(ledger_idea)

    assert orchestrator.delete_project(project.id)
    assert orchestrator.state is ViewState.NO_PROJECT
    assert orchestrator.current_project is None
    assert store.load() == []
    assert orchestrator.delete_project(project.id) is False


def test_delete_other_project_keeps_view(orchestrator, ledger_idea):
    from app_idea_generator.orchestrator import ViewState

    first = orchestrator.submit(ledger_idea)
    second = orchestrator.submit(ledger_idea)

    orchestrator.delete_project(first.id)

    assert orchestrator.state is ViewState.VIEWING
    assert orchestrator.current_project.id == second.id


def test_view_unknown_project(orchestrator, ledger_idea, caplog):
    from app_idea_generator.orchestrator import ViewState

    orchestrator.submit(ledger_idea)

    with caplog.at_level(logging.INFO, logger="app_idea_generator.events"):
        assert orchestrator.view_project("missing") is None

    assert orchestrator.state is ViewState.NO_PROJECT
    assert orchestrator.current_project is None
    assert "Project not found" in caplog.text


def test_view_link(orchestrator, ledger_idea):
    from app_idea_generator.projects.types import DocumentKind

    project = orchestrator.submit(ledger_idea)
    link = orchestrator.share_link("https://ideas.example.com/")
    orchestrator.view_project("missing")

    opened = orchestrator.view_link(link)

    assert link == f"https://ideas.example.com/?project={project.id}"
    assert opened.id == project.id
    assert orchestrator.current_kind is DocumentKind.BUILD_GUIDE


def test_view_link_without_project(orchestrator):
    from app_idea_generator.orchestrator import ViewState

    assert orchestrator.view_link("https://ideas.example.com/") is None
    assert orchestrator.state is ViewState.NO_PROJECT


def test_list_projects_newest_first(store, client, ledger_idea):
    from app_idea_generator.orchestrator import Orchestrator

    stamps = iter(["2025-01-01T00:00:00+00:00", "2025-02-01T00:00:00+00:00"])
    ids = iter(["older", "newer"])
    orchestrator = Orchestrator(store, client, id_factory=lambda: next(ids), clock=lambda: next(stamps))
    orchestrator.submit(ledger_idea)
    orchestrator.submit(ledger_idea)

    assert [p.id for p in orchestrator.list_projects()] == ["newer", "older"]


def test_surprise_idea(orchestrator, provider):
    provider.responses = [json.dumps({
        "appName": "PlantPal",
        "description": "Plant care reminders",
        "architecture": "mobile",
        "primaryLanguage": "kotlin",
        "frameworks": ["Jetpack Compose"],
        "tools": ["Git"],
    })]

    idea = orchestrator.generate_surprise_idea("PlantPal")

    assert idea.app_name == "PlantPal"
    assert idea.app_architecture == "mobile"
    assert idea.frameworks == ["Jetpack Compose", "Git"]


def test_surprise_idea_keeps_given_description(orchestrator, provider):
    provider.responses = ['{"appName": "PlantPal"}']

    idea = orchestrator.generate_surprise_idea("", "Plant care reminders")

    assert idea.description == "Plant care reminders"


def test_surprise_idea_needs_name_or_description(orchestrator, provider):
    from app_idea_generator.errors import ValidationError

    with pytest.raises(ValidationError):
        orchestrator.generate_surprise_idea("", "  ")

    assert provider.calls == []


def test_suggest_features_requires_fields(orchestrator, provider, ledger_idea):
    from dataclasses import replace
    from app_idea_generator.errors import ValidationError

    with pytest.raises(ValidationError) as exc_info:
        orchestrator.suggest_features(replace(ledger_idea, description=""))

    assert exc_info.value.field == "description"
    assert provider.calls == []


def test_suggest_features_loads_board(orchestrator, provider, ledger_idea):
    provider.responses = ['[{"id": "a", "name": "CSV Import"}, {"id": "b", "name": "Reports"}]']

    features = orchestrator.suggest_features(ledger_idea)

    assert [f.id for f in features] == ["a", "b"]
    assert [f.id for f in orchestrator.board.suggested] == ["a", "b"]


def test_export_current(orchestrator, ledger_idea, tmp_path):
    from app_idea_generator.projects.types import DocumentKind

    orchestrator.submit(ledger_idea)
    orchestrator.request_document(DocumentKind.CODE)

    path = orchestrator.export_current(tmp_path)

    assert path.name == "ledger_code_guide_py.md"


def test_share_link_requires_project(orchestrator):
    from app_idea_generator.errors import ForbiddenActionError

    with pytest.raises(ForbiddenActionError):
        orchestrator.share_link()


def test_state_transitions_are_logged(orchestrator, ledger_idea, caplog):
    with caplog.at_level(logging.INFO, logger="app_idea_generator.events"):
        orchestrator.submit(ledger_idea)

    events = [json.loads(record.getMessage()) for record in caplog.records
              if record.name == "app_idea_generator.events"]
    transitions = [(e["from_state"], e["to_state"]) for e in events if e["event"] == "state_transition"]

    assert transitions == [("no_project", "generating"), ("generating", "viewing")]
    assert any(e["event"] == "project_created" for e in events)


def test_from_config_uses_sqlite(tmp_path):
    from app_idea_generator.config import GeneratorConfig
    from app_idea_generator.db.kv_store import SQLiteKeyValueStorage
    from app_idea_generator.orchestrator import Orchestrator

    orchestrator = Orchestrator.from_config(GeneratorConfig(db_path=tmp_path / "ideas.db"))

    assert isinstance(orchestrator.store.storage, SQLiteKeyValueStorage)
    assert orchestrator.list_projects() == []
