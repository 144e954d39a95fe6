# app_idea_generator/generation/client.py
"""Generation Client - one request/response cycle per call."""

import logging
import time
from typing import Optional

from app_idea_generator.config import GeneratorConfig
from app_idea_generator.db.credentials import CredentialStore
from app_idea_generator.errors import ConfigurationError, GeneratorError
from app_idea_generator.generation.params import RequestKind, params_for
from app_idea_generator.generation.parsing import parse_feature_suggestions, parse_surprise_idea
from app_idea_generator.generation.prompt_builder import (
    DocumentContext,
    build_guide_prompt,
    code_guide_prompt,
    feature_suggestions_prompt,
    style_guide_prompt,
    surprise_idea_prompt,
)
from app_idea_generator.generation.providers.base import LLMProvider
from app_idea_generator.generation.providers.gemini_provider import GeminiProvider
from app_idea_generator.catalog.languages import language_display_name
from app_idea_generator.projects.types import (
    DocumentKind,
    DocumentRecord,
    FeatureSuggestion,
    IdeaDescriptor,
    Project,
    utc_now_iso,
)
from app_idea_generator.utils.logging import GeneratorLogger

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "API key not set. Please add your Gemini API key."

_DOCUMENT_REQUESTS = {
    DocumentKind.CODE: RequestKind.CODE_GUIDE,
    DocumentKind.STYLE: RequestKind.STYLE_GUIDE,
}


class GenerationClient:
    """
    Sends prompts to the model and turns the answers into records.

    Flow per call:
    1. Require an API key (before any network activity)
    2. Build the prompt and pick parameters for the request kind
    3. Make exactly one provider call
    4. Parse the text into a DocumentRecord, idea dict or feature list
    """

    def __init__(
        self,
        credentials: CredentialStore,
        provider: Optional[LLMProvider] = None,
        config: Optional[GeneratorConfig] = None,
        events: Optional[GeneratorLogger] = None,
    ):
        self.credentials = credentials
        self.config = config or GeneratorConfig()
        self.provider = provider or GeminiProvider(
            base_url=self.config.api_base_url,
            timeout=self.config.request_timeout,
        )
        self.events = events or GeneratorLogger()

    def _require_api_key(self) -> str:
        api_key = self.credentials.get()
        if not api_key:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)
        return api_key

    def _request(self, kind: RequestKind, prompt: str, model_override: str = "") -> str:
        api_key = self._require_api_key()
        params = params_for(kind, self.config, model_override)

        self.events.generation_started(kind.value, params.model)
        start = time.monotonic()
        try:
            text = self.provider.generate(prompt, params, api_key)
        except GeneratorError as e:
            self.events.error(None, type(e).__name__, str(e))
            raise
        self.events.generation_complete(kind.value, params.model, time.monotonic() - start)
        logger.debug(f"{self.provider.name} returned {len(text)} chars for {kind.value}")
        return text

    def generate_build_guide(self, idea: IdeaDescriptor) -> DocumentRecord:
        """Generate the build guide for an idea. parent_id stays unset."""
        content = self._request(RequestKind.BUILD_GUIDE, build_guide_prompt(idea), idea.ai_model)
        return DocumentRecord(
            title=idea.app_name,
            content=content,
            file_type=DocumentKind.BUILD_GUIDE,
            timestamp=utc_now_iso(),
        )

    def generate_additional_document(self, project: Project, kind: DocumentKind) -> DocumentRecord:
        """Generate a code or style guide for an existing project.

        The build guide and any sibling guide are passed as context.
        """
        if kind not in _DOCUMENT_REQUESTS:
            raise ValueError(f"Not an additional document kind: {kind.value}")

        idea = project.data
        context = DocumentContext.for_project(project, kind)
        if kind is DocumentKind.CODE:
            prompt = code_guide_prompt(idea, context)
            language = language_display_name(idea.primary_language) or "Code"
            title = f"{project.title} - {language} Guide"
        else:
            prompt = style_guide_prompt(idea, context)
            title = f"{project.title} - Style Guide"

        content = self._request(_DOCUMENT_REQUESTS[kind], prompt, idea.ai_model)
        return DocumentRecord(
            title=title,
            content=content,
            file_type=kind,
            timestamp=utc_now_iso(),
            parent_id=project.id,
        )

    def generate_surprise_idea(self, app_name: str = "", description: str = "") -> dict:
        """Ask for a complete idea built around a name and/or description."""
        text = self._request(RequestKind.SURPRISE_IDEA, surprise_idea_prompt(app_name, description))
        return parse_surprise_idea(text)

    def generate_feature_suggestions(self, idea: IdeaDescriptor) -> list[FeatureSuggestion]:
        text = self._request(RequestKind.FEATURE_SUGGESTIONS, feature_suggestions_prompt(idea))
        return parse_feature_suggestions(text)
