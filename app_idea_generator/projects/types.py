"""Data types for ideas, documents and projects.

Every record converts to and from the camelCase JSON shape kept in storage.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from app_idea_generator.catalog.frameworks import AI_API_TOOL


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class DocumentKind(Enum):
    """Kinds of generated documents attached to a project."""

    BUILD_GUIDE = "buildGuide"
    CODE = "code"
    STYLE = "style"

    @classmethod
    def from_string(cls, value: str) -> "DocumentKind":
        """Convert a stored or typed label to a DocumentKind.

        Accepts the legacy `js`/`css` labels and a few spellings used on the
        command line. Raises ValueError for anything else.
        """
        normalized = (value or "").strip()
        for member in cls:
            if member.value == normalized:
                return member
        alias = _KIND_ALIASES.get(normalized.lower())
        if alias is None:
            raise ValueError(f"Unknown document kind: {value!r}")
        return alias

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_ALIASES = {
    "buildguide": DocumentKind.BUILD_GUIDE,
    "build": DocumentKind.BUILD_GUIDE,
    "build-guide": DocumentKind.BUILD_GUIDE,
    "js": DocumentKind.CODE,
    "code": DocumentKind.CODE,
    "css": DocumentKind.STYLE,
    "style": DocumentKind.STYLE,
}

_KIND_LABELS = {
    DocumentKind.BUILD_GUIDE: "Build Guide",
    DocumentKind.CODE: "Code Guide",
    DocumentKind.STYLE: "Style Guide",
}


@dataclass(frozen=True)
class FeatureSuggestion:
    """A single suggested feature; relocated between sets, never edited."""

    id: str
    name: str
    description: str = ""

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "description": self.description}

    @classmethod
    def from_dict(cls, data: dict) -> "FeatureSuggestion":
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
        )


# IdeaDescriptor attribute -> stored key
_IDEA_KEYS = {
    "app_name": "appName",
    "description": "description",
    "app_architecture": "appArchitecture",
    "primary_language": "primaryLanguage",
    "app_type": "appType",
    "app_complexity": "appComplexity",
    "experience_level": "experienceLevel",
    "frameworks": "frameworks",
    "features": "features",
    "target_audience": "targetAudience",
    "selected_features": "selectedFeatures",
    "deferred_features": "deferredFeatures",
    "ai_model": "aiModel",
    "ai_model_info": "aiModelInfo",
}

# Keys a surprise idea may use instead of the stored names
_IDEA_KEY_ALIASES = {
    "architecture": "appArchitecture",
    "complexity": "appComplexity",
}


@dataclass
class IdeaDescriptor:
    """Snapshot of the application idea a user filled in."""

    app_name: str = ""
    description: str = ""
    app_architecture: str = ""
    primary_language: str = ""
    app_type: str = ""
    app_complexity: str = ""
    experience_level: str = ""
    frameworks: list[str] = field(default_factory=list)
    features: str = ""
    target_audience: str = ""
    selected_features: list[FeatureSuggestion] = field(default_factory=list)
    deferred_features: list[FeatureSuggestion] = field(default_factory=list)
    ai_model: str = ""
    ai_model_info: Optional[dict] = None
    extras: dict = field(default_factory=dict)

    def uses_ai(self) -> bool:
        """Whether the idea is an AI app or calls AI APIs."""
        return self.app_type == "ai" or AI_API_TOOL in self.frameworks

    def to_dict(self) -> dict:
        data = dict(self.extras)
        for attr, key in _IDEA_KEYS.items():
            value = getattr(self, attr)
            if attr in ("selected_features", "deferred_features"):
                value = [feature.to_dict() for feature in value]
            elif attr == "frameworks":
                value = list(value)
            elif attr == "ai_model_info" and value is None:
                continue
            data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "IdeaDescriptor":
        """Create from a stored record or a surprise-idea payload.

        Unknown keys are kept in `extras` so they survive a save.
        """
        data = dict(data or {})
        for alias, key in _IDEA_KEY_ALIASES.items():
            if alias in data and key not in data:
                data[key] = data.pop(alias)

        kwargs = {}
        for attr, key in _IDEA_KEYS.items():
            if key not in data:
                continue
            value = data.pop(key)
            if attr in ("selected_features", "deferred_features"):
                value = [FeatureSuggestion.from_dict(f) for f in (value or []) if isinstance(f, dict)]
            elif attr == "frameworks":
                value = [str(v) for v in _as_list(value)]
            elif attr == "features":
                value = _features_to_text(value)
            elif attr == "ai_model_info":
                value = value if isinstance(value, dict) else None
            else:
                value = "" if value is None else str(value)
            kwargs[attr] = value

        # Surprise ideas list tools separately from frameworks
        tools = data.pop("tools", None)
        if tools:
            kwargs["frameworks"] = kwargs.get("frameworks", []) + [
                str(t) for t in _as_list(tools) if str(t) not in kwargs.get("frameworks", [])
            ]

        return cls(**kwargs, extras=data)


def _features_to_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return "\n".join(f"{i}. {item}" for i, item in enumerate(value, start=1))
    return str(value)


def _as_list(value) -> list:
    """A lone string counts as one item."""
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


@dataclass
class DocumentRecord:
    """A generated Markdown document."""

    title: str
    content: str
    file_type: DocumentKind
    timestamp: str = field(default_factory=utc_now_iso)
    parent_id: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "title": self.title,
            "content": self.content,
            "timestamp": self.timestamp,
            "fileType": self.file_type.value,
        }
        if self.parent_id is not None:
            data["parentId"] = self.parent_id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "DocumentRecord":
        return cls(
            title=data.get("title", ""),
            content=data.get("content", ""),
            file_type=DocumentKind.from_string(data.get("fileType", DocumentKind.BUILD_GUIDE.value)),
            timestamp=data.get("timestamp", ""),
            parent_id=data.get("parentId"),
        )


@dataclass
class Project:
    """A generated project: the build guide plus its associated documents."""

    id: str
    title: str
    content: str
    timestamp: str
    data: IdeaDescriptor
    associated_files: list[DocumentRecord] = field(default_factory=list)

    @property
    def build_guide(self) -> DocumentRecord:
        return DocumentRecord(
            title=self.title,
            content=self.content,
            file_type=DocumentKind.BUILD_GUIDE,
            timestamp=self.timestamp,
        )

    def get_document(self, kind: DocumentKind) -> Optional[DocumentRecord]:
        if kind is DocumentKind.BUILD_GUIDE:
            return self.build_guide
        for document in self.associated_files:
            if document.file_type is kind:
                return document
        return None

    def documents(self) -> dict[DocumentKind, DocumentRecord]:
        """All documents keyed by kind, build guide first."""
        result = {DocumentKind.BUILD_GUIDE: self.build_guide}
        for document in self.associated_files:
            result[document.file_type] = document
        return result

    def with_document(self, document: DocumentRecord) -> "Project":
        """Copy of the project with document added, replacing one of the same kind."""
        kept = [d for d in self.associated_files if d.file_type is not document.file_type]
        return Project(
            id=self.id,
            title=self.title,
            content=self.content,
            timestamp=self.timestamp,
            data=self.data,
            associated_files=kept + [document],
        )

    def without_document(self, kind: DocumentKind) -> "Project":
        return Project(
            id=self.id,
            title=self.title,
            content=self.content,
            timestamp=self.timestamp,
            data=self.data,
            associated_files=[d for d in self.associated_files if d.file_type is not kind],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "timestamp": self.timestamp,
            "data": self.data.to_dict(),
            "associatedFiles": [d.to_dict() for d in self.associated_files],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            content=data.get("content", ""),
            timestamp=data.get("timestamp", ""),
            data=IdeaDescriptor.from_dict(data.get("data") or {}),
            associated_files=[DocumentRecord.from_dict(d) for d in data.get("associatedFiles") or []],
        )
