"""Export of project documents as Markdown files."""

import logging
import re
from pathlib import Path

from app_idea_generator.catalog.languages import code_extension, style_extension
from app_idea_generator.errors import ValidationError
from app_idea_generator.projects.types import DocumentKind, Project

logger = logging.getLogger(__name__)


def slugify_title(title: str) -> str:
    """Replace every non-alphanumeric character with `_` and lower-case."""
    return re.sub(r"[^a-z0-9]", "_", title or "", flags=re.IGNORECASE).lower()


def export_filename(project: Project, kind: DocumentKind) -> str:
    slug = slugify_title(project.title)
    if kind is DocumentKind.BUILD_GUIDE:
        return f"{slug}_build_guide.md"
    language = project.data.primary_language
    if kind is DocumentKind.CODE:
        return f"{slug}_code_guide_{code_extension(language)}.md"
    return f"{slug}_style_guide_{style_extension(language)}.md"


def export_document(project: Project, kind: DocumentKind, directory: Path) -> Path:
    """Write one document of the project into directory.

    Returns:
        Path of the written file

    Raises:
        ValidationError: if the project has no document of that kind
    """
    document = project.get_document(kind)
    if document is None:
        raise ValidationError(f"Project has no {kind.label}", field="kind")

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(project, kind)
    path.write_text(document.content, encoding="utf-8")
    logger.info(f"Exported {kind.value} of {project.id} to {path}")
    return path
