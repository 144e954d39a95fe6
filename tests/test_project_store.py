"""Tests for the project store."""

import json


def _project(project_id="p1", timestamp="2025-04-01T12:00:00+00:00"):
    from app_idea_generator.projects.types import IdeaDescriptor, Project

    return Project(
        id=project_id,
        title=f"App {project_id}",
        content="# Build",
        timestamp=timestamp,
        data=IdeaDescriptor(app_name=f"App {project_id}", primary_language="python"),
    )


def test_load_empty_storage(store):
    assert store.load() == []


def test_add_and_get(store):
    store.add(_project("p1"))

    project = store.get("p1")

    assert project.title == "App p1"
    assert store.get("missing") is None


def test_update_replaces_project(store):
    from dataclasses import replace

    store.add(_project("p1"))

    assert store.update(replace(_project("p1"), content="# Rewritten"))
    assert store.get("p1").content == "# Rewritten"


def test_update_missing_returns_false(store):
    assert store.update(_project("ghost")) is False
    assert store.load() == []


def test_delete(store):
    store.add(_project("p1"))
    store.add(_project("p2"))

    assert store.delete("p1")
    assert [p.id for p in store.load()] == ["p2"]
    assert store.delete("p1") is False


def test_list_recent_newest_first(store):
    store.add(_project("old", "2025-01-01T00:00:00+00:00"))
    store.add(_project("new", "2025-03-01T00:00:00+00:00"))

    assert [p.id for p in store.list_recent()] == ["new", "old"]


def test_blob_layout(store, storage):
    store.add(_project("p1"))

    records = json.loads(storage.get("appIdeaProjects"))

    assert isinstance(records, list)
    assert records[0]["id"] == "p1"
    assert records[0]["associatedFiles"] == []
    assert records[0]["data"]["appName"] == "App p1"


def test_save_load_round_trip_is_byte_identical(store, storage):
    from app_idea_generator.projects.types import DocumentKind, DocumentRecord

    project = _project("p1").with_document(
        DocumentRecord("App p1 - Python Guide", "code", DocumentKind.CODE, "t", "p1")
    )
    store.save([project, _project("p2")])
    before = storage.get("appIdeaProjects")

    store.save(store.load())

    assert storage.get("appIdeaProjects") == before


def test_unknown_idea_fields_survive_round_trip(store, storage):
    record = _project("p1").to_dict()
    record["data"]["theme"] = "dark"
    storage.set("appIdeaProjects", json.dumps([record]))

    store.save(store.load())

    assert json.loads(storage.get("appIdeaProjects"))[0]["data"]["theme"] == "dark"


def test_corrupted_blob_yields_empty_and_is_discarded(store, storage, caplog):
    storage.set("appIdeaProjects", "{not json")

    assert store.load() == []
    assert storage.get("appIdeaProjects") is None
    assert "Discarding" in caplog.text


def test_non_list_blob_is_discarded(store, storage):
    storage.set("appIdeaProjects", json.dumps({"id": "p1"}))

    assert store.load() == []
    assert storage.get("appIdeaProjects") is None


def test_bad_records_skipped(store, storage):
    good = _project("p1").to_dict()
    storage.set("appIdeaProjects", json.dumps([good, "junk", {"title": "no id"}]))

    assert [p.id for p in store.load()] == ["p1"]


def test_unreadable_records_survive_mutations(store, storage):
    orphan = {"title": "Old project without id", "content": "# Old"}
    storage.set("appIdeaProjects", json.dumps([orphan, _project("p1").to_dict()]))

    store.add(_project("p2"))
    store.update(_project("p1", timestamp="2025-05-01T00:00:00+00:00"))
    store.delete("p2")

    stored = json.loads(storage.get("appIdeaProjects"))
    assert stored[0] == orphan
    assert [r.get("id") for r in stored] == [None, "p1"]
    assert stored[1]["timestamp"] == "2025-05-01T00:00:00+00:00"


def test_round_trip_keeps_unreadable_records_in_place(store, storage):
    raw = json.dumps(["junk", _project("p1").to_dict(), {"title": "no id"}, _project("p2").to_dict()])
    storage.set("appIdeaProjects", raw)

    store.save(store.load())

    assert storage.get("appIdeaProjects") == raw


def test_legacy_records_migrated_on_load_not_rewritten(store, storage):
    record = _project("p1").to_dict()
    record["associatedFiles"] = [
        {"title": "App p1 - JS", "content": "js", "timestamp": "t", "fileType": "js"},
    ]
    raw = json.dumps([record])
    storage.set("appIdeaProjects", raw)

    project = store.get("p1")

    assert project.associated_files[0].file_type.value == "code"
    assert project.associated_files[0].parent_id == "p1"
    assert storage.get("appIdeaProjects") == raw
