# app_idea_generator/orchestrator/orchestrator.py
"""Orchestrator - coordinates idea submission, documents and the project view."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable, Optional
from uuid import uuid4

from app_idea_generator.catalog.ai_models import build_ai_model_info
from app_idea_generator.catalog.languages import LANGUAGES, is_language_allowed, language_display_name
from app_idea_generator.config import GeneratorConfig
from app_idea_generator.db.credentials import CredentialStore
from app_idea_generator.db.kv_store import SQLiteKeyValueStorage
from app_idea_generator.errors import ForbiddenActionError, GeneratorError, ValidationError
from app_idea_generator.generation.client import GenerationClient
from app_idea_generator.orchestrator.export import export_document
from app_idea_generator.orchestrator.features import FeatureBoard
from app_idea_generator.orchestrator.links import build_project_link, parse_project_link
from app_idea_generator.orchestrator.states import ViewState, can_transition, is_busy_state
from app_idea_generator.projects.store import ProjectStore
from app_idea_generator.projects.types import (
    DocumentKind,
    DocumentRecord,
    FeatureSuggestion,
    IdeaDescriptor,
    Project,
    utc_now_iso,
)
from app_idea_generator.utils.logging import GeneratorLogger

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid4().hex


class Orchestrator:
    """
    Owns the current project, the current document and the feature board.

    Every add or delete of a document is written to the store before the
    view moves on, so `current_project` always matches what is persisted.
    """

    def __init__(
        self,
        store: ProjectStore,
        client: GenerationClient,
        events: Optional[GeneratorLogger] = None,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], str] = utc_now_iso,
        share_base_url: str = "",
    ):
        self.store = store
        self.client = client
        self.events = events or GeneratorLogger()
        self.id_factory = id_factory
        self.clock = clock
        self.share_base_url = share_base_url

        self.state = ViewState.NO_PROJECT
        self.current_project: Optional[Project] = None
        self.current_kind: Optional[DocumentKind] = None
        self.board = FeatureBoard()

    @classmethod
    def from_config(cls, config: Optional[GeneratorConfig] = None) -> "Orchestrator":
        """Wire an orchestrator over the SQLite-backed storage."""
        config = config or GeneratorConfig.from_env()
        storage = SQLiteKeyValueStorage(config.db_path)
        client = GenerationClient(CredentialStore(storage), config=config)
        return cls(ProjectStore(storage), client, share_base_url=config.share_base_url)

    @property
    def credentials(self) -> CredentialStore:
        return self.client.credentials

    # State handling

    def _transition(self, to_state: ViewState, kind: Optional[DocumentKind] = None):
        """Move the view with logging."""
        if not can_transition(self.state, to_state):
            raise ForbiddenActionError(f"Cannot go from {self.state.value} to {to_state.value}")
        from_state = self.state.value
        self.state = to_state
        self.current_kind = kind if to_state is ViewState.VIEWING else self.current_kind
        project_id = self.current_project.id if self.current_project else None
        self.events.state_transition(project_id, from_state, to_state.value)

    def _show(self, project: Optional[Project], kind: Optional[DocumentKind] = None):
        self.current_project = project
        if project is None:
            self.current_kind = None
            self._transition(ViewState.NO_PROJECT)
        else:
            self._transition(ViewState.VIEWING, kind or DocumentKind.BUILD_GUIDE)

    def _require_idle(self):
        if is_busy_state(self.state):
            raise ForbiddenActionError("A generation request is already in progress")

    def _require_project(self) -> Project:
        if self.current_project is None:
            raise ForbiddenActionError("No project is open")
        return self.current_project

    def _persist(self, project: Project):
        """Write the changed current project back, re-adding it if it vanished."""
        if not self.store.update(project):
            logger.warning(f"Project {project.id} was missing from the store; adding it back")
            self.store.add(project)
        self.current_project = project

    # Validation

    @staticmethod
    def _validate_idea(idea: IdeaDescriptor):
        if not idea.app_name.strip():
            raise ValidationError("Please fill in the application name", field="appName")
        if not idea.primary_language:
            raise ValidationError("Please choose a primary language", field="primaryLanguage")
        if idea.primary_language not in LANGUAGES:
            raise ValidationError(
                f"Unsupported language: {idea.primary_language}", field="primaryLanguage"
            )
        if not is_language_allowed(idea.app_architecture, idea.primary_language):
            raise ValidationError(
                f"{language_display_name(idea.primary_language)} is not available "
                f"for {idea.app_architecture} applications",
                field="primaryLanguage",
            )

    @staticmethod
    def _attach_ai_model_info(idea: IdeaDescriptor) -> IdeaDescriptor:
        if not idea.uses_ai():
            return replace(idea, ai_model_info=None)
        if idea.ai_model_info is None:
            return replace(idea, ai_model_info=build_ai_model_info())
        return idea

    # Operations

    def submit(self, idea: IdeaDescriptor) -> Project:
        """Generate the build guide for an idea and open the new project.

        On failure the previous view is restored and nothing is stored.
        """
        self._require_idle()
        self._validate_idea(idea)
        idea = self._attach_ai_model_info(self.board.apply_to(idea))

        previous_project, previous_kind = self.current_project, self.current_kind
        self._transition(ViewState.GENERATING)
        try:
            document = self.client.generate_build_guide(idea)
        except GeneratorError as e:
            self.events.error(None, type(e).__name__, str(e))
            self._show(previous_project, previous_kind)
            raise

        project = Project(
            id=self.id_factory(),
            title=document.title,
            content=document.content,
            timestamp=self.clock(),
            data=idea,
        )
        self.store.add(project)
        self.events.project_created(project.id, project.title)
        self._show(project, DocumentKind.BUILD_GUIDE)
        return project

    def request_document(self, kind: DocumentKind) -> DocumentRecord:
        """Open a document of the current project, generating it if missing.

        An existing document is shown without any network request.
        """
        self._require_idle()
        project = self._require_project()

        existing = project.get_document(kind)
        if existing is not None:
            self._transition(ViewState.VIEWING, kind)
            return existing

        previous_kind = self.current_kind
        self._transition(ViewState.GENERATING_ADDITIONAL)
        try:
            document = self.client.generate_additional_document(project, kind)
        except GeneratorError as e:
            self.events.error(project.id, type(e).__name__, str(e))
            self._transition(ViewState.VIEWING, previous_kind)
            raise

        self._persist(project.with_document(document))
        self.events.document_added(project.id, kind.value)
        self._transition(ViewState.VIEWING, kind)
        return document

    def switch_document(self, kind: DocumentKind) -> DocumentRecord:
        project = self._require_project()
        document = project.get_document(kind)
        if document is None:
            raise ValidationError(f"This project has no {kind.label}", field="kind")
        self._transition(ViewState.VIEWING, kind)
        return document

    def delete_current_document(self) -> DocumentKind:
        """Delete the code or style guide being viewed. The build guide is never deletable."""
        self._require_idle()
        project = self._require_project()
        kind = self.current_kind
        if kind is None or kind is DocumentKind.BUILD_GUIDE:
            raise ForbiddenActionError("The main build guide cannot be deleted")

        self._persist(project.without_document(kind))
        self.events.document_deleted(project.id, kind.value)
        self._transition(ViewState.VIEWING, DocumentKind.BUILD_GUIDE)
        return kind

    def delete_project(self, project_id: str) -> bool:
        """Delete a stored project. Closes it if it is the one being viewed."""
        self._require_idle()
        deleted = self.store.delete(project_id)
        if deleted:
            self.events.project_deleted(project_id)
        if self.current_project is not None and self.current_project.id == project_id:
            self._show(None)
        return deleted

    def view_project(self, project_id: str) -> Optional[Project]:
        """Open a stored project on its build guide, or return None if unknown."""
        self._require_idle()
        project = self.store.get(project_id)
        if project is None:
            self.events.warning("Project not found", project_id=project_id)
            self._show(None)
            return None
        self._show(project, DocumentKind.BUILD_GUIDE)
        return project

    def view_link(self, link: str) -> Optional[Project]:
        """Open the project referenced by a shareable link or bare id."""
        project_id = parse_project_link(link)
        if project_id is None:
            self._require_idle()
            self.events.warning("Link does not reference a project", link=link)
            self._show(None)
            return None
        return self.view_project(project_id)

    def current_document(self) -> Optional[DocumentRecord]:
        if self.current_project is None or self.current_kind is None:
            return None
        return self.current_project.get_document(self.current_kind)

    def list_projects(self) -> list[Project]:
        """Stored projects, newest first."""
        return self.store.list_recent()

    def generate_surprise_idea(self, app_name: str = "", description: str = "") -> IdeaDescriptor:
        """Have the model fill a whole idea around a name and/or description."""
        app_name = (app_name or "").strip()
        description = (description or "").strip()
        if not app_name and not description:
            raise ValidationError(
                "Please enter an application name or description first", field="appName"
            )
        idea = IdeaDescriptor.from_dict(self.client.generate_surprise_idea(app_name, description))
        if not idea.app_name and app_name:
            idea = replace(idea, app_name=app_name)
        if not idea.description and description:
            idea = replace(idea, description=description)
        return idea

    def suggest_features(self, idea: IdeaDescriptor) -> list[FeatureSuggestion]:
        """Fetch feature suggestions and load them onto the board."""
        missing = [
            field
            for field, value in (
                ("appName", idea.app_name),
                ("description", idea.description),
                ("primaryLanguage", idea.primary_language),
            )
            if not (value or "").strip()
        ]
        if missing:
            raise ValidationError(
                "Please fill in the application name, description and primary language "
                "before requesting feature suggestions",
                field=missing[0],
            )
        suggestions = self.client.generate_feature_suggestions(idea)
        self.board.load(suggestions)
        return suggestions

    def export_current(self, directory: Path) -> Path:
        """Write the document being viewed to a Markdown file."""
        project = self._require_project()
        return export_document(project, self.current_kind or DocumentKind.BUILD_GUIDE, directory)

    def share_link(self, base_url: Optional[str] = None) -> str:
        project = self._require_project()
        return build_project_link(project.id, self.share_base_url if base_url is None else base_url)
