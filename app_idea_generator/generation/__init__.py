"""Prompt construction and the remote generation client."""

from app_idea_generator.generation.client import GenerationClient
from app_idea_generator.generation.params import GenerationParams, RequestKind, params_for
from app_idea_generator.generation.prompt_builder import DocumentContext, build_prompt

__all__ = [
    "GenerationClient",
    "GenerationParams",
    "RequestKind",
    "params_for",
    "DocumentContext",
    "build_prompt",
]
