"""Static reference data: frameworks, tools, languages and AI models."""

from app_idea_generator.catalog.ai_models import (
    AI_MODELS,
    build_ai_model_info,
    get_all_models,
    get_most_recent_models,
    get_provider_models,
)
from app_idea_generator.catalog.frameworks import (
    AI_API_TOOL,
    CLOUD_PLATFORMS,
    COMMON_TOOLS,
    DATABASES,
    FRAMEWORKS,
    get_frameworks,
    get_tool_catalog,
)
from app_idea_generator.catalog.languages import (
    ARCHITECTURES,
    LANGUAGES,
    code_extension,
    is_language_allowed,
    language_display_name,
    languages_for_architecture,
    style_extension,
)

__all__ = [
    "AI_MODELS",
    "AI_API_TOOL",
    "ARCHITECTURES",
    "CLOUD_PLATFORMS",
    "COMMON_TOOLS",
    "DATABASES",
    "FRAMEWORKS",
    "LANGUAGES",
    "build_ai_model_info",
    "code_extension",
    "get_all_models",
    "get_frameworks",
    "get_most_recent_models",
    "get_provider_models",
    "get_tool_catalog",
    "is_language_allowed",
    "language_display_name",
    "languages_for_architecture",
    "style_extension",
]
