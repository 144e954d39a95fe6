"""MCP tool functions for projects and document generation.

Every tool returns a dict; failures come back as {"error": message}.
"""

from pathlib import Path
from typing import Optional

import pydantic

from app_idea_generator.config import GeneratorConfig
from app_idea_generator.errors import GeneratorError
from app_idea_generator.orchestrator import Orchestrator
from app_idea_generator.projects.types import Project
from app_idea_generator.tool_schemas import DocumentInput, IdeaInput


def _orchestrator(db_path: Optional[str] = None) -> Orchestrator:
    config = GeneratorConfig.from_env()
    if db_path:
        config.db_path = Path(db_path)
    return Orchestrator.from_config(config)


def _summary(project: Project) -> dict:
    return {
        "id": project.id,
        "title": project.title,
        "timestamp": project.timestamp,
        "primary_language": project.data.primary_language,
        "app_type": project.data.app_type,
        "documents": [kind.value for kind in project.documents()],
    }


def _invalid(e: pydantic.ValidationError) -> dict:
    return {"error": f"Invalid input: {e}"}


def list_projects_tool(db_path: Optional[str] = None) -> dict:
    """List saved projects, newest first."""
    projects = _orchestrator(db_path).list_projects()
    return {
        "count": len(projects),
        "projects": [_summary(p) for p in projects],
    }


def get_project_tool(project_id: str, kind: str = "buildGuide", db_path: Optional[str] = None) -> dict:
    """
    Get one document of a saved project.

    Args:
        project_id: Project id or shareable link
        kind: buildGuide, code or style
    """
    try:
        validated = DocumentInput(project_id=project_id, kind=kind)
    except pydantic.ValidationError as e:
        return _invalid(e)

    orchestrator = _orchestrator(db_path)
    project = orchestrator.view_link(validated.project_id)
    if project is None:
        return {"error": f"Project not found: {project_id}"}
    try:
        document = orchestrator.switch_document(validated.kind)
    except GeneratorError as e:
        return {"error": str(e)}
    return {"project": _summary(project), "document": document.to_dict()}


def generate_build_guide_tool(idea: dict, db_path: Optional[str] = None) -> dict:
    """
    Generate a build guide for an idea and save it as a new project.

    Args:
        idea: Idea fields in the stored camelCase shape (appName, primaryLanguage, ...)
    """
    try:
        validated = IdeaInput.model_validate(idea)
    except pydantic.ValidationError as e:
        return _invalid(e)

    orchestrator = _orchestrator(db_path)
    try:
        project = orchestrator.submit(validated.to_idea())
    except GeneratorError as e:
        return {"error": str(e)}
    return {
        "project_id": project.id,
        "title": project.title,
        "content": project.content,
    }


def generate_document_tool(project_id: str, kind: str, db_path: Optional[str] = None) -> dict:
    """
    Generate the code or style guide of a project (returns it as-is if present).

    Args:
        project_id: Project id or shareable link
        kind: code or style
    """
    try:
        validated = DocumentInput(project_id=project_id, kind=kind)
    except pydantic.ValidationError as e:
        return _invalid(e)

    orchestrator = _orchestrator(db_path)
    if orchestrator.view_link(validated.project_id) is None:
        return {"error": f"Project not found: {project_id}"}
    try:
        document = orchestrator.request_document(validated.kind)
    except GeneratorError as e:
        return {"error": str(e)}
    return {"project_id": orchestrator.current_project.id, "document": document.to_dict()}


def delete_document_tool(project_id: str, kind: str, db_path: Optional[str] = None) -> dict:
    """Delete the code or style guide of a project. The build guide cannot be deleted."""
    try:
        validated = DocumentInput(project_id=project_id, kind=kind)
    except pydantic.ValidationError as e:
        return _invalid(e)

    orchestrator = _orchestrator(db_path)
    if orchestrator.view_link(validated.project_id) is None:
        return {"error": f"Project not found: {project_id}"}
    try:
        orchestrator.switch_document(validated.kind)
        deleted = orchestrator.delete_current_document()
    except GeneratorError as e:
        return {"error": str(e)}
    return {"success": True, "deleted": deleted.value}


def delete_project_tool(project_id: str, db_path: Optional[str] = None) -> dict:
    """Delete a saved project."""
    if not _orchestrator(db_path).delete_project(project_id):
        return {"error": f"Project not found: {project_id}"}
    return {"success": True, "project_id": project_id}


def suggest_features_tool(idea: dict, db_path: Optional[str] = None) -> dict:
    """Suggest features for an idea (needs appName, description and primaryLanguage)."""
    try:
        validated = IdeaInput.model_validate(idea)
    except pydantic.ValidationError as e:
        return _invalid(e)

    orchestrator = _orchestrator(db_path)
    try:
        features = orchestrator.suggest_features(validated.to_idea())
    except GeneratorError as e:
        return {"error": str(e)}
    return {"count": len(features), "features": [f.to_dict() for f in features]}


def surprise_idea_tool(app_name: str = "", description: str = "", db_path: Optional[str] = None) -> dict:
    """Complete an idea from a name and/or description."""
    orchestrator = _orchestrator(db_path)
    try:
        idea = orchestrator.generate_surprise_idea(app_name, description)
    except GeneratorError as e:
        return {"error": str(e)}
    return {"idea": idea.to_dict()}


def catalog_tool(language: Optional[str] = None) -> dict:
    """
    Look up catalog data.

    With a language: its frameworks and allowed file extensions.
    Without: languages per architecture plus the database, cloud and tool catalogs.
    """
    from app_idea_generator.catalog import (
        ARCHITECTURES,
        LANGUAGES,
        code_extension,
        get_frameworks,
        get_tool_catalog,
        language_display_name,
        languages_for_architecture,
        style_extension,
    )

    if language:
        if language not in LANGUAGES:
            return {"error": f"Unknown language: {language}"}
        return {
            "language": language,
            "display_name": language_display_name(language),
            "code_extension": code_extension(language),
            "style_extension": style_extension(language),
            "frameworks": get_frameworks(language),
        }

    return {
        "languages": list(LANGUAGES),
        "architectures": {a: list(languages_for_architecture(a)) for a in ARCHITECTURES},
        **get_tool_catalog(),
    }
