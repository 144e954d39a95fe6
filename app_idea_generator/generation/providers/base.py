# app_idea_generator/generation/providers/base.py
"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod

from app_idea_generator.generation.params import GenerationParams


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def generate(self, prompt: str, params: GenerationParams, api_key: str) -> str:
        """
        Send one prompt and return the model's text.

        Args:
            prompt: Fully built prompt text
            params: Model and sampling settings
            api_key: Credential for the remote API

        Returns:
            The raw text of the first candidate

        Raises:
            TransportError: network failure or non-success status
            MalformedResponseError: success status without usable text
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging (e.g., 'gemini')."""
        pass
