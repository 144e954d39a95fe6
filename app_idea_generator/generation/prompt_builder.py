"""Prompt construction for every request kind.

All functions are pure: they read an IdeaDescriptor (plus optional sibling
document content) and return a prompt string. Absent fields render as empty
segments.
"""

import json
from dataclasses import dataclass
from typing import Optional

from app_idea_generator.catalog import languages
from app_idea_generator.generation.params import RequestKind
from app_idea_generator.generation.prompts import load_prompt
from app_idea_generator.projects.types import DocumentKind, FeatureSuggestion, IdeaDescriptor, Project

FEATURE_SUGGESTION_COUNT = 20


@dataclass(frozen=True)
class DocumentContext:
    """Already-generated documents passed along to keep guides consistent."""

    build_guide: str = ""
    code_guide: str = ""
    style_guide: str = ""

    @classmethod
    def for_project(cls, project: Project, kind: DocumentKind) -> "DocumentContext":
        """Context for generating `kind`: the build guide plus the other sibling guide."""
        code = project.get_document(DocumentKind.CODE)
        style = project.get_document(DocumentKind.STYLE)
        return cls(
            build_guide=project.content or "",
            code_guide=code.content if code and kind is DocumentKind.STYLE else "",
            style_guide=style.content if style and kind is DocumentKind.CODE else "",
        )


def _text(value: Optional[str]) -> str:
    return value if value else ""


def _numbered(features: list[FeatureSuggestion]) -> str:
    return "".join(
        f"{index}. {feature.name}: {feature.description}\n"
        for index, feature in enumerate(features, start=1)
    )


def format_feature_lists(selected: list[FeatureSuggestion], deferred: list[FeatureSuggestion]) -> str:
    """Render selected and deferred features as two labeled numbered lists."""
    sections = []
    if selected:
        sections.append("Core Features to implement:\n" + _numbered(selected))
    if deferred:
        sections.append("Future Features (to implement later):\n" + _numbered(deferred))
    return "\n".join(sections)


def format_features(idea: IdeaDescriptor) -> str:
    """Feature lists when feature records exist, else the free-text features."""
    text = format_feature_lists(idea.selected_features, idea.deferred_features)
    return text or _text(idea.features)


def experience_sentence(idea: IdeaDescriptor) -> str:
    if not idea.experience_level:
        return ""
    return f"The guide should be tailored for someone with {idea.experience_level} coding experience."


def _app_type_sentence(idea: IdeaDescriptor) -> str:
    if not idea.app_type:
        return ""
    return f"This will be a {languages.describe_app_type(idea.app_type)}."


def format_details(idea: IdeaDescriptor) -> str:
    """The 'Application Details' bullet list shared by the guide prompts."""
    lines = [
        f"- Description: {_text(idea.description)}",
        f"- Primary Language: {_text(idea.primary_language)}",
    ]
    if idea.app_architecture:
        lines.append(f"- Architecture: {idea.app_architecture}")
    lines.append(f"- Application Type: {_app_type_sentence(idea)}")
    if idea.app_complexity:
        lines.append(f"- Complexity: {idea.app_complexity}")
    lines.extend([
        f"- Frameworks/Tools: {', '.join(idea.frameworks)}",
        f"- Features: {format_features(idea)}",
        f"- Target Audience: {_text(idea.target_audience)}",
    ])
    return "\n".join(lines)


def format_ai_model_info(idea: IdeaDescriptor) -> str:
    """Verbatim dump of the attached AI model information, if any."""
    info = idea.ai_model_info
    if not info:
        return ""
    last_updated = _text(info.get("lastUpdated"))
    return f"\nLatest AI Model Information (as of {last_updated}):\n{json.dumps(info, indent=2)}\n"


def _context_block(label: str, marker: str, content: str) -> str:
    if not content:
        return ""
    return (
        f"\nI'm including the {label} content for context and consistency:\n\n"
        f"---{marker} CONTENT---\n{content}\n---END {marker} CONTENT---\n"
    )


def build_guide_prompt(idea: IdeaDescriptor) -> str:
    beginner = idea.experience_level in ("beginner", "none")
    return load_prompt("build_guide").format(
        app_name=_text(idea.app_name),
        details=format_details(idea),
        ai_model_info=format_ai_model_info(idea),
        experience=experience_sentence(idea),
        setup_note=" (beginner-friendly with detailed steps)" if beginner else "",
        ai_section="\n12. AI Model Integration Guide with current model capabilities" if idea.ai_model_info else "",
    )


def code_guide_prompt(idea: IdeaDescriptor, context: Optional[DocumentContext] = None) -> str:
    context = context or DocumentContext()
    extension = languages.code_extension(idea.primary_language)
    return load_prompt("code_guide").format(
        app_name=_text(idea.app_name),
        language_name=languages.language_display_name(idea.primary_language) or "source code",
        code_extension=extension,
        code_extension_upper=extension.upper(),
        details=format_details(idea),
        ai_model_info=format_ai_model_info(idea),
        experience=experience_sentence(idea),
        build_guide_context=_context_block("main Build Guide", "BUILD GUIDE", context.build_guide),
        sibling_context=_context_block("Style Guide", "STYLE GUIDE", context.style_guide),
    )


def style_guide_prompt(idea: IdeaDescriptor, context: Optional[DocumentContext] = None) -> str:
    context = context or DocumentContext()
    extension = languages.style_extension(idea.primary_language)
    language_name = languages.language_display_name(idea.primary_language)
    return load_prompt("style_guide").format(
        app_name=_text(idea.app_name),
        language_name=language_name,
        style_extension=extension,
        style_extension_upper=extension.upper(),
        details=format_details(idea),
        ai_model_info=format_ai_model_info(idea),
        experience=experience_sentence(idea),
        build_guide_context=_context_block("main Build Guide", "BUILD GUIDE", context.build_guide),
        sibling_context=_context_block(f"Code ({language_name}) Guide", "CODE GUIDE", context.code_guide),
    )


def surprise_idea_prompt(app_name: str = "", description: str = "") -> str:
    subject = " and ".join(
        part for part, present in (("application name", app_name), ("description", description)) if present
    )
    known = []
    if app_name:
        known.append(f"Application Name: {app_name}")
    if description:
        known.append(f"Description: {description}")
    return load_prompt("surprise_idea").format(
        subject=subject or "idea",
        known_fields="\n".join(known),
        architectures=", ".join(languages.ARCHITECTURES),
        languages=", ".join(languages.LANGUAGES),
        app_types=", ".join(languages.APP_TYPES),
        complexity_levels=", ".join(languages.COMPLEXITY_LEVELS),
        experience_levels=", ".join(languages.EXPERIENCE_LEVELS),
    )


def feature_suggestions_prompt(idea: IdeaDescriptor, count: int = FEATURE_SUGGESTION_COUNT) -> str:
    return load_prompt("feature_suggestions").format(
        count=count,
        app_name=_text(idea.app_name),
        description=_text(idea.description),
        primary_language=_text(idea.primary_language),
        app_type=languages.describe_app_type(idea.app_type) or "Not specified",
        frameworks=", ".join(idea.frameworks) or "Not specified",
    )


def build_prompt(
    kind: RequestKind,
    idea: IdeaDescriptor,
    context: Optional[DocumentContext] = None,
) -> str:
    """Dispatch to the prompt function for a request kind."""
    if kind is RequestKind.BUILD_GUIDE:
        return build_guide_prompt(idea)
    if kind is RequestKind.CODE_GUIDE:
        return code_guide_prompt(idea, context)
    if kind is RequestKind.STYLE_GUIDE:
        return style_guide_prompt(idea, context)
    if kind is RequestKind.SURPRISE_IDEA:
        return surprise_idea_prompt(idea.app_name, idea.description)
    if kind is RequestKind.FEATURE_SUGGESTIONS:
        return feature_suggestions_prompt(idea)
    raise ValueError(f"Unsupported request kind: {kind}")
