# app_idea_generator/generation/providers/__init__.py
"""LLM providers for document generation."""

from app_idea_generator.generation.providers.base import LLMProvider
from app_idea_generator.generation.providers.gemini_provider import GeminiProvider

__all__ = ["LLMProvider", "GeminiProvider"]
