#!/usr/bin/env python3
"""
MCP Server wrapper for App Idea Generator tools.

Exposes project browsing, build/code/style guide generation, feature
suggestions and surprise ideas to MCP clients.
"""

from fastmcp import FastMCP

from app_idea_generator.mcp_server import (
    catalog_tool,
    delete_document_tool,
    delete_project_tool,
    generate_build_guide_tool,
    generate_document_tool,
    get_project_tool,
    list_projects_tool,
    suggest_features_tool,
    surprise_idea_tool,
)

# Create MCP server
mcp = FastMCP("app-idea-generator")


@mcp.tool()
def list_projects() -> dict:
    """List saved projects, newest first."""
    return list_projects_tool()


@mcp.tool()
def get_project(project_id: str, kind: str = "buildGuide") -> dict:
    """Get a project document. kind is buildGuide, code or style."""
    return get_project_tool(project_id, kind)


@mcp.tool()
def generate_build_guide(idea: dict) -> dict:
    """Generate a build guide from idea fields (appName, description, primaryLanguage, ...)."""
    return generate_build_guide_tool(idea)


@mcp.tool()
def generate_document(project_id: str, kind: str) -> dict:
    """Generate the code or style guide of a saved project."""
    return generate_document_tool(project_id, kind)


@mcp.tool()
def delete_document(project_id: str, kind: str) -> dict:
    """Delete the code or style guide of a project."""
    return delete_document_tool(project_id, kind)


@mcp.tool()
def delete_project(project_id: str) -> dict:
    """Delete a saved project."""
    return delete_project_tool(project_id)


@mcp.tool()
def suggest_features(idea: dict) -> dict:
    """Suggest features for an idea."""
    return suggest_features_tool(idea)


@mcp.tool()
def surprise_idea(app_name: str = "", description: str = "") -> dict:
    """Complete an app idea from a name and/or description."""
    return surprise_idea_tool(app_name, description)


@mcp.tool()
def catalog(language: str = "") -> dict:
    """Frameworks for a language, or the full language and tool catalog."""
    return catalog_tool(language or None)


if __name__ == "__main__":
    mcp.run()
