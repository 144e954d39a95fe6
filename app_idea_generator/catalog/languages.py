"""Language, architecture and application-type lookup tables."""

from typing import Optional

LANGUAGES = (
    "javascript",
    "typescript",
    "python",
    "java",
    "csharp",
    "go",
    "rust",
    "swift",
    "kotlin",
    "php",
)

ARCHITECTURES = ("frontend", "fullstack", "backend", "mobile", "desktop")

APP_TYPES = ("web", "mobile", "desktop", "api", "game", "ai", "iot")

COMPLEXITY_LEVELS = ("basic", "moderate", "advanced", "enterprise")

EXPERIENCE_LEVELS = ("beginner", "intermediate", "advanced", "none")

LANGUAGE_DISPLAY_NAMES = {
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "python": "Python",
    "java": "Java",
    "csharp": "C#",
    "go": "Go",
    "rust": "Rust",
    "swift": "Swift",
    "kotlin": "Kotlin",
    "php": "PHP",
}

# Nominal source and style file extensions per language.
# Swift and Kotlin style through their platform toolkits rather than CSS.
LANGUAGE_FILE_TYPES = {
    "javascript": {"code": "js", "style": "css"},
    "typescript": {"code": "ts", "style": "css"},
    "python": {"code": "py", "style": "css"},
    "java": {"code": "java", "style": "css"},
    "csharp": {"code": "cs", "style": "css"},
    "go": {"code": "go", "style": "css"},
    "rust": {"code": "rs", "style": "css"},
    "swift": {"code": "swift", "style": "swift"},
    "kotlin": {"code": "kt", "style": "xml"},
    "php": {"code": "php", "style": "css"},
}

DEFAULT_CODE_EXTENSION = "code"
DEFAULT_STYLE_EXTENSION = "css"

ARCHITECTURE_LANGUAGES = {
    "frontend": ("javascript", "typescript"),
    "fullstack": ("javascript", "typescript", "python", "java", "csharp", "go", "rust", "php"),
    "backend": ("javascript", "typescript", "python", "java", "csharp", "go", "rust", "php"),
    "mobile": ("javascript", "typescript", "java", "swift", "kotlin"),
    "desktop": ("javascript", "typescript", "csharp", "java", "python", "rust"),
}

# Phrasing used inside prompts
APP_TYPE_DESCRIPTIONS = {
    "web": "web application",
    "mobile": "mobile application",
    "desktop": "desktop application",
    "api": "API/backend service",
    "game": "game",
    "ai": "AI/ML application",
    "iot": "IoT application",
}

# Short labels used in project listings
APP_TYPE_LABELS = {
    "web": "Web App",
    "mobile": "Mobile App",
    "desktop": "Desktop App",
    "api": "API Service",
    "game": "Game",
    "ai": "AI/ML App",
    "iot": "IoT App",
}


def language_display_name(language: Optional[str]) -> str:
    """Human-readable language name, falling back to the code itself."""
    if not language:
        return ""
    return LANGUAGE_DISPLAY_NAMES.get(language, language)


def code_extension(language: Optional[str]) -> str:
    return LANGUAGE_FILE_TYPES.get(language or "", {}).get("code", DEFAULT_CODE_EXTENSION)


def style_extension(language: Optional[str]) -> str:
    return LANGUAGE_FILE_TYPES.get(language or "", {}).get("style", DEFAULT_STYLE_EXTENSION)


def languages_for_architecture(architecture: Optional[str]) -> tuple:
    """Languages allowed for an architecture; all languages when unfiltered."""
    if not architecture or architecture not in ARCHITECTURE_LANGUAGES:
        return LANGUAGES
    return ARCHITECTURE_LANGUAGES[architecture]


def is_language_allowed(architecture: Optional[str], language: str) -> bool:
    return language in languages_for_architecture(architecture)


def describe_app_type(app_type: Optional[str]) -> str:
    if not app_type:
        return ""
    return APP_TYPE_DESCRIPTIONS.get(app_type, app_type)


def app_type_label(app_type: Optional[str]) -> str:
    if not app_type:
        return ""
    return APP_TYPE_LABELS.get(app_type, app_type)
