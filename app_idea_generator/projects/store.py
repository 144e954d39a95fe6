"""Project store - the persisted project collection."""

import json
import logging
from typing import Optional

from app_idea_generator.db.kv_store import KeyValueStorage
from app_idea_generator.projects.migration import migrate_project_record
from app_idea_generator.projects.types import Project

logger = logging.getLogger(__name__)

PROJECTS_STORAGE_KEY = "appIdeaProjects"


class ProjectStore:
    """
    Persists the ordered project list as one JSON array under a single key.

    There are no partial updates: every mutation loads the collection,
    changes it, and rewrites the whole blob.
    """

    def __init__(self, storage: KeyValueStorage, key: str = PROJECTS_STORAGE_KEY):
        self.storage = storage
        self.key = key

    def _read_records(self) -> list:
        """The raw stored array; a corrupted blob is discarded."""
        raw = self.storage.get(self.key)
        if raw is None:
            return []

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Discarding unreadable project data: {e}")
            self.storage.delete(self.key)
            return []

        if not isinstance(records, list):
            logger.warning("Discarding project data that is not a list")
            self.storage.delete(self.key)
            return []
        return records

    @staticmethod
    def _parse(record) -> Optional[Project]:
        if not isinstance(record, dict):
            logger.warning("Skipping malformed project record")
            return None
        try:
            return Project.from_dict(migrate_project_record(record))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping unreadable project {record.get('id')}: {e}")
            return None

    def _entries(self) -> list[tuple[Optional[Project], object]]:
        return [(self._parse(record), record) for record in self._read_records()]

    def _write(self, entries: list[tuple[Optional[Project], object]]) -> None:
        records = [record if project is None else project.to_dict() for project, record in entries]
        self.storage.set(self.key, json.dumps(records))

    def load(self) -> list[Project]:
        """Load all projects.

        A missing blob yields an empty list. A corrupted blob is discarded
        and also yields an empty list. Individual records that cannot be
        read are skipped here but stay in storage untouched.
        """
        return [project for project, _ in self._entries() if project is not None]

    def save(self, projects: list[Project]) -> None:
        """Overwrite the collection with `projects`.

        Unreadable stored records keep their positions; the readable slots
        are filled from `projects` in order and any extra projects are appended.
        """
        remaining = iter(projects)
        entries = []
        for project, record in self._entries():
            if project is None:
                entries.append((None, record))
                continue
            replacement = next(remaining, None)
            if replacement is not None:
                entries.append((replacement, None))
        entries.extend((project, None) for project in remaining)
        self._write(entries)

    def get(self, project_id: str) -> Optional[Project]:
        for project in self.load():
            if project.id == project_id:
                return project
        return None

    def add(self, project: Project) -> None:
        entries = self._entries()
        entries.append((project, None))
        self._write(entries)

    def update(self, project: Project) -> bool:
        """Replace the stored project with the same id. Returns False if absent."""
        entries = self._entries()
        for index, (existing, _) in enumerate(entries):
            if existing is not None and existing.id == project.id:
                entries[index] = (project, None)
                self._write(entries)
                return True
        return False

    def delete(self, project_id: str) -> bool:
        """Remove a project. Returns False if it was not stored."""
        entries = self._entries()
        remaining = [(p, r) for p, r in entries if p is None or p.id != project_id]
        if len(remaining) == len(entries):
            return False
        self._write(remaining)
        return True

    def list_recent(self) -> list[Project]:
        """Projects sorted newest first."""
        return sorted(self.load(), key=lambda p: p.timestamp, reverse=True)
