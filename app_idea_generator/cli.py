"""App Idea Generator CLI."""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from .catalog.languages import (
    APP_TYPES,
    ARCHITECTURES,
    COMPLEXITY_LEVELS,
    EXPERIENCE_LEVELS,
    LANGUAGES,
)
from .errors import GeneratorError

console = Console()

KIND_CHOICES = ["build", "code", "style"]


def _orchestrator():
    from .config import GeneratorConfig
    from .orchestrator import Orchestrator

    return Orchestrator.from_config(GeneratorConfig.from_env())


def _fail(message: str):
    console.print(f"[red]Error: {message}[/red]")
    sys.exit(1)


def _require_api_key(orchestrator):
    if not orchestrator.credentials.is_configured():
        console.print("[yellow]No Gemini API key configured.[/yellow]")
        console.print("Run [bold]app-idea set-key[/bold] or set GEMINI_API_KEY.")
        sys.exit(1)


def _kind(value: str):
    from .projects.types import DocumentKind

    return DocumentKind.from_string(value)


def _open_project(orchestrator, project_ref: str):
    project = orchestrator.view_link(project_ref)
    if project is None:
        _fail(f"Project not found: {project_ref}")
    return project


def _print_document(document, raw: bool):
    if raw:
        click.echo(document.content)
        return
    console.print(f"\n[bold]{document.title}[/bold]  [dim]{document.timestamp}[/dim]\n")
    console.print(Markdown(document.content))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def main(verbose: bool):
    """App Idea Generator - turn an app idea into build, code and style guides."""
    from .utils.logging import setup_logging

    setup_logging(verbose=verbose)


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"app-idea-generator v{__version__}")


@main.command()
def init():
    """Initialize the local project database."""
    from .db.config import get_db_path
    from .db.migrations import run_migrations

    db_path = get_db_path()
    console.print(f"[blue]Initializing database at {db_path}[/blue]")

    run_migrations(db_path)

    console.print("[green]Database initialized successfully![/green]")


@main.command("set-key")
@click.argument("api_key", required=False)
@click.option("--clear", is_flag=True, help="Remove the stored key")
def set_key(api_key: str, clear: bool):
    """Store the Gemini API key."""
    orchestrator = _orchestrator()

    if clear:
        orchestrator.credentials.clear()
        console.print("[yellow]API key removed[/yellow]")
        return

    if not api_key:
        api_key = click.prompt("Gemini API key", hide_input=True)

    try:
        orchestrator.credentials.set(api_key)
    except GeneratorError as e:
        _fail(str(e))

    console.print("[green]API key saved successfully![/green]")


@main.command()
@click.option("--language", "-l", type=click.Choice(LANGUAGES), help="Show frameworks for a language")
@click.option("--tools", is_flag=True, help="Show databases, cloud platforms and tools")
@click.option("--models", is_flag=True, help="Show AI model information")
def catalog(language: str, tools: bool, models: bool):
    """Browse languages, frameworks, tools and AI models."""
    from .catalog import build_ai_model_info, get_frameworks, get_tool_catalog
    from .catalog.languages import language_display_name, languages_for_architecture

    if language:
        table = Table(title=f"{language_display_name(language)} frameworks")
        table.add_column("Name")
        table.add_column("Description")
        for item in get_frameworks(language):
            table.add_row(item["name"], item["description"])
        console.print(table)
        return

    if tools:
        for section, items in get_tool_catalog().items():
            table = Table(title=section.capitalize())
            table.add_column("Name")
            table.add_column("Description")
            for item in items:
                table.add_row(item["name"], item["description"])
            console.print(table)
        return

    if models:
        info = build_ai_model_info()
        console.print(f"\n[bold]AI models (as of {info['lastUpdated']})[/bold]")
        for provider, provider_models in info["providers"].items():
            console.print(f"\n[cyan]{provider}[/cyan]")
            for model in provider_models:
                console.print(f"  {model['name']} ({model['codeName']}) - {model['description']}")
        return

    table = Table(title="Architectures")
    table.add_column("Architecture")
    table.add_column("Languages")
    for architecture in ARCHITECTURES:
        names = ", ".join(language_display_name(lang) for lang in languages_for_architecture(architecture))
        table.add_row(architecture, names)
    console.print(table)


def _idea_options(func):
    """Options shared by commands that take an idea on the command line."""
    options = [
        click.option("--idea-file", type=click.Path(exists=True, dir_okay=False),
                     help="JSON file with idea fields (e.g. from `surprise --output`)"),
        click.option("--name", "-n", help="Application name"),
        click.option("--description", "-d", help="What the application does"),
        click.option("--architecture", "-a", type=click.Choice(ARCHITECTURES)),
        click.option("--language", "-l", type=click.Choice(LANGUAGES), help="Primary language"),
        click.option("--app-type", "-t", type=click.Choice(APP_TYPES)),
        click.option("--complexity", type=click.Choice(COMPLEXITY_LEVELS)),
        click.option("--experience", type=click.Choice(EXPERIENCE_LEVELS)),
        click.option("--framework", "-f", "frameworks", multiple=True, help="Framework or tool (repeatable)"),
        click.option("--features", help="Free-text feature list"),
        click.option("--audience", help="Target audience"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_idea(idea_file, name, description, architecture, language, app_type,
                complexity, experience, frameworks, features, audience):
    """Merge an optional idea file with command-line values; options win."""
    from dataclasses import replace
    from .projects.types import IdeaDescriptor

    if idea_file:
        try:
            data = json.loads(Path(idea_file).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            _fail(f"Could not read idea file: {e}")
        if not isinstance(data, dict):
            _fail("Idea file must contain a JSON object")
        idea = IdeaDescriptor.from_dict(data)
    else:
        idea = IdeaDescriptor()

    overrides = {
        "app_name": name,
        "description": description,
        "app_architecture": architecture,
        "primary_language": language,
        "app_type": app_type,
        "app_complexity": complexity,
        "experience_level": experience,
        "features": features,
        "target_audience": audience,
    }
    overrides = {key: value for key, value in overrides.items() if value}
    if frameworks:
        overrides["frameworks"] = list(frameworks)
    return replace(idea, **overrides)


def _print_suggestions(board):
    table = Table(title="Suggested features")
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Description")
    for feature in board.suggested:
        table.add_row(feature.id, feature.name, feature.description)
    console.print(table)


def _split_ids(text: str) -> list[str]:
    return [part.strip() for part in (text or "").split(",") if part.strip()]


def _choose_features(board):
    """Interactively select and defer suggested features."""
    _print_suggestions(board)
    for feature_id in _split_ids(click.prompt("Feature ids to select (comma separated)", default="")):
        board.select(feature_id)
    for feature_id in _split_ids(click.prompt("Feature ids to defer for later", default="")):
        board.defer(feature_id)
    console.print(f"[green]{len(board.selected)} selected, {len(board.deferred)} deferred[/green]")


@main.command()
@click.option("--name", "-n", default="", help="Application name")
@click.option("--description", "-d", default="", help="What the application does")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write the idea as JSON")
def surprise(name: str, description: str, output: str):
    """Have the model complete an idea from a name and/or description."""
    orchestrator = _orchestrator()
    _require_api_key(orchestrator)

    try:
        with console.status("Dreaming up an idea..."):
            idea = orchestrator.generate_surprise_idea(name, description)
    except GeneratorError as e:
        _fail(str(e))

    text = json.dumps(idea.to_dict(), indent=2)
    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Idea saved to {output}[/green]")
        console.print(f"Generate it with: app-idea generate --idea-file {output}")
    else:
        click.echo(text)


@main.command("suggest-features")
@_idea_options
def suggest_features(**options):
    """Suggest features for an idea."""
    orchestrator = _orchestrator()
    _require_api_key(orchestrator)
    idea = _build_idea(**options)

    try:
        with console.status("Suggesting features..."):
            orchestrator.suggest_features(idea)
    except GeneratorError as e:
        _fail(str(e))

    _print_suggestions(orchestrator.board)


@main.command()
@_idea_options
@click.option("--model", help="Model for the guides (overrides the configured primary model)")
@click.option("--suggest", is_flag=True, help="Pick features from model suggestions first")
@click.option("--raw", is_flag=True, help="Print Markdown source instead of rendering it")
def generate(model: str, suggest: bool, raw: bool, **options):
    """Generate a build guide and save it as a new project."""
    from dataclasses import replace

    orchestrator = _orchestrator()
    _require_api_key(orchestrator)
    idea = _build_idea(**options)
    if model:
        idea = replace(idea, ai_model=model)

    try:
        if suggest:
            with console.status("Suggesting features..."):
                orchestrator.suggest_features(idea)
            _choose_features(orchestrator.board)

        with console.status(f"Generating build guide for {idea.app_name or 'your app'}..."):
            project = orchestrator.submit(idea)
    except GeneratorError as e:
        _fail(str(e))

    _print_document(project.build_guide, raw)
    console.print(f"\n[green]Saved project {project.id}[/green]")


@main.command()
def projects():
    """List saved projects, newest first."""
    from .catalog.languages import app_type_label, language_display_name

    orchestrator = _orchestrator()
    items = orchestrator.list_projects()

    if not items:
        console.print("[yellow]No saved projects yet[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Title")
    table.add_column("Language")
    table.add_column("Type")
    table.add_column("Documents")
    table.add_column("Created")

    for project in items:
        documents = ", ".join(kind.label for kind in project.documents())
        table.add_row(
            project.id,
            project.title,
            language_display_name(project.data.primary_language),
            app_type_label(project.data.app_type),
            documents,
            project.timestamp[:19].replace("T", " "),
        )

    console.print(table)


@main.command()
@click.argument("project_ref")
@click.option("--kind", "-k", type=click.Choice(KIND_CHOICES), default="build", help="Document to show")
@click.option("--raw", is_flag=True, help="Print Markdown source instead of rendering it")
def view(project_ref: str, kind: str, raw: bool):
    """Show a project document. PROJECT_REF is an id or a shareable link."""
    orchestrator = _orchestrator()
    _open_project(orchestrator, project_ref)

    try:
        document = orchestrator.switch_document(_kind(kind))
    except GeneratorError as e:
        _fail(str(e))

    _print_document(document, raw)


@main.command("add-doc")
@click.argument("project_ref")
@click.argument("kind", type=click.Choice(["code", "style"]))
@click.option("--raw", is_flag=True, help="Print Markdown source instead of rendering it")
def add_doc(project_ref: str, kind: str, raw: bool):
    """Generate (or show, if present) the code or style guide of a project."""
    orchestrator = _orchestrator()
    project = _open_project(orchestrator, project_ref)
    document_kind = _kind(kind)

    if project.get_document(document_kind) is None:
        _require_api_key(orchestrator)

    try:
        with console.status(f"Generating {document_kind.label}..."):
            document = orchestrator.request_document(document_kind)
    except GeneratorError as e:
        _fail(str(e))

    _print_document(document, raw)


@main.command("delete-doc")
@click.argument("project_ref")
@click.argument("kind", type=click.Choice(KIND_CHOICES))
def delete_doc(project_ref: str, kind: str):
    """Delete the code or style guide of a project."""
    orchestrator = _orchestrator()
    _open_project(orchestrator, project_ref)

    try:
        orchestrator.switch_document(_kind(kind))
        deleted = orchestrator.delete_current_document()
    except GeneratorError as e:
        _fail(str(e))

    console.print(f"[yellow]Deleted {deleted.label}[/yellow]")


@main.command()
@click.argument("project_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
def delete(project_id: str, yes: bool):
    """Delete a saved project."""
    orchestrator = _orchestrator()

    if not yes and not click.confirm(f"Delete project {project_id}?"):
        console.print("Cancelled")
        return

    if orchestrator.delete_project(project_id):
        console.print(f"[yellow]Deleted project {project_id}[/yellow]")
    else:
        _fail(f"Project not found: {project_id}")


@main.command()
@click.argument("project_ref")
@click.option("--kind", "-k", type=click.Choice(KIND_CHOICES), default="build", help="Document to export")
@click.option("--output-dir", "-o", type=click.Path(file_okay=False), default=".", help="Target directory")
def export(project_ref: str, kind: str, output_dir: str):
    """Save a project document as a Markdown file."""
    orchestrator = _orchestrator()
    _open_project(orchestrator, project_ref)

    try:
        orchestrator.switch_document(_kind(kind))
        path = orchestrator.export_current(Path(output_dir))
    except GeneratorError as e:
        _fail(str(e))

    console.print(f"[green]Markdown file saved: {path}[/green]")


@main.command()
@click.argument("project_id")
@click.option("--base-url", help="Base URL to prefix (default: APP_IDEA_SHARE_BASE_URL)")
def link(project_id: str, base_url: str):
    """Print a shareable link for a project."""
    orchestrator = _orchestrator()
    _open_project(orchestrator, project_id)
    click.echo(orchestrator.share_link(base_url))


if __name__ == "__main__":
    main()
