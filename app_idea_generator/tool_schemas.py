"""Tool input schemas - validation for MCP tool arguments in one place.

Field names accept both the stored camelCase keys (appName, primaryLanguage)
and their snake_case attribute names.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app_idea_generator.catalog.languages import ARCHITECTURES
from app_idea_generator.projects.types import DocumentKind, IdeaDescriptor


class IdeaInput(BaseModel):
    """Schema for an application idea

    Used by: generate_build_guide, suggest_features tools
    """
    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        json_schema_extra={
            "example": {
                "appName": "Ledger",
                "description": "Track freelance expenses",
                "appArchitecture": "backend",
                "primaryLanguage": "python",
                "frameworks": ["FastAPI", "PostgreSQL"],
            }
        },
    )

    app_name: str = Field(default="", max_length=200, alias="appName", description="Application name")
    description: str = Field(default="", max_length=5000, description="What the application does")
    app_architecture: Optional[str] = Field(
        default=None, alias="appArchitecture", description="frontend, fullstack, backend, mobile or desktop"
    )
    primary_language: Optional[str] = Field(default=None, alias="primaryLanguage", description="Language id")
    frameworks: list[str] = Field(default_factory=list, description="Frameworks and tools")
    ai_model: Optional[str] = Field(default=None, alias="aiModel", description="Model override for the guides")

    @field_validator('app_name', 'description')
    @classmethod
    def strip_text(cls, v):
        return v.strip()

    @field_validator('app_architecture')
    @classmethod
    def validate_architecture(cls, v):
        """Ensure the architecture is a known one"""
        if v and v not in ARCHITECTURES:
            raise ValueError(f"architecture must be one of {', '.join(ARCHITECTURES)}")
        return v or None

    def to_idea(self) -> IdeaDescriptor:
        return IdeaDescriptor.from_dict(self.model_dump(by_alias=True, exclude_none=True))


class DocumentInput(BaseModel):
    """Schema for project document operations

    Used by: get_project, generate_document, delete_document tools
    """
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "project_id": "3f2b9c0e8d1a4e6f9b7c5a3d1e0f2a4b",
            "kind": "code"
        }
    })

    project_id: str = Field(..., min_length=1, description="Project id or shareable link")
    kind: DocumentKind = Field(default=DocumentKind.BUILD_GUIDE, description="buildGuide, code or style")

    @field_validator('project_id')
    @classmethod
    def validate_project_id(cls, v):
        """Ensure project id is not just whitespace"""
        if not v.strip():
            raise ValueError("project_id cannot be empty or whitespace only")
        return v.strip()

    @field_validator('kind', mode='before')
    @classmethod
    def parse_kind(cls, v):
        if isinstance(v, DocumentKind):
            return v
        return DocumentKind.from_string(str(v))
