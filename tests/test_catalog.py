"""Tests for catalog lookup tables."""


def test_every_language_has_frameworks_and_file_types():
    from app_idea_generator.catalog.frameworks import FRAMEWORKS
    from app_idea_generator.catalog.languages import LANGUAGES, LANGUAGE_FILE_TYPES

    for language in LANGUAGES:
        assert FRAMEWORKS[language], language
        assert set(LANGUAGE_FILE_TYPES[language]) == {"code", "style"}


def test_get_frameworks_unknown_language_is_empty():
    from app_idea_generator.catalog import get_frameworks

    assert get_frameworks("cobol") == []


def test_tool_catalog_sections():
    from app_idea_generator.catalog import AI_API_TOOL, get_tool_catalog

    catalog = get_tool_catalog()

    assert set(catalog) == {"databases", "cloud", "tools"}
    assert AI_API_TOOL in [tool["name"] for tool in catalog["tools"]]


def test_extensions():
    from app_idea_generator.catalog.languages import code_extension, style_extension

    assert code_extension("python") == "py"
    assert code_extension("kotlin") == "kt"
    assert style_extension("swift") == "swift"
    assert style_extension("kotlin") == "xml"
    assert style_extension("go") == "css"


def test_extensions_fall_back_for_missing_language():
    from app_idea_generator.catalog.languages import code_extension, style_extension

    assert code_extension("") == "code"
    assert code_extension(None) == "code"
    assert style_extension(None) == "css"


def test_display_names():
    from app_idea_generator.catalog.languages import language_display_name

    assert language_display_name("csharp") == "C#"
    assert language_display_name("elixir") == "elixir"
    assert language_display_name(None) == ""


def test_architecture_filters_languages():
    from app_idea_generator.catalog.languages import LANGUAGES, is_language_allowed, languages_for_architecture

    assert languages_for_architecture("frontend") == ("javascript", "typescript")
    assert languages_for_architecture("") == LANGUAGES
    assert is_language_allowed("backend", "python")
    assert not is_language_allowed("frontend", "python")
    assert is_language_allowed("", "swift")


def test_app_type_phrasing():
    from app_idea_generator.catalog.languages import app_type_label, describe_app_type

    assert describe_app_type("api") == "API/backend service"
    assert app_type_label("ai") == "AI/ML App"
    assert describe_app_type("") == ""
    assert app_type_label(None) == ""


def test_ai_model_info_shape():
    from app_idea_generator.catalog import build_ai_model_info
    from app_idea_generator.catalog.ai_models import LAST_UPDATED

    info = build_ai_model_info()

    assert info["lastUpdated"] == LAST_UPDATED
    assert len(info["recentModels"]) == 4
    assert set(info["providers"]) == {"google", "openai", "anthropic"}


def test_most_recent_models_sorted_newest_first():
    from app_idea_generator.catalog import get_most_recent_models

    dates = [model["releaseDate"] for model in get_most_recent_models(3)]

    assert dates == sorted(dates, reverse=True)
