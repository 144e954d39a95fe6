"""Project, document and idea records and their persistence."""

from app_idea_generator.projects.store import ProjectStore
from app_idea_generator.projects.types import (
    DocumentKind,
    DocumentRecord,
    FeatureSuggestion,
    IdeaDescriptor,
    Project,
)

__all__ = [
    "DocumentKind",
    "DocumentRecord",
    "FeatureSuggestion",
    "IdeaDescriptor",
    "Project",
    "ProjectStore",
]
