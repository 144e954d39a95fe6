# app_idea_generator/generation/providers/gemini_provider.py
"""Google Gemini provider over the generateContent REST endpoint."""

import logging
from typing import Optional

import httpx

from app_idea_generator.config import GEMINI_API_BASE_URL
from app_idea_generator.errors import MalformedResponseError, TransportError
from app_idea_generator.generation.params import GenerationParams
from app_idea_generator.generation.providers.base import LLMProvider

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Gemini text generation. One request per call, no retries."""

    def __init__(
        self,
        base_url: str = GEMINI_API_BASE_URL,
        timeout: float = 300.0,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self._client = client

    @property
    def name(self) -> str:
        return "gemini"

    def endpoint(self, model: str) -> str:
        return f"{self.base_url}{model}:generateContent"

    def generate(self, prompt: str, params: GenerationParams, api_key: str) -> str:
        """Generate text with Gemini."""
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": params.to_generation_config(),
        }
        logger.debug(f"POST {self.endpoint(params.model)} ({len(prompt)} prompt chars)")

        try:
            if self._client is not None:
                response = self._post(self._client, params.model, payload, api_key)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = self._post(client, params.model, payload, api_key)
        except httpx.HTTPError as e:
            raise TransportError(f"Network error: {e}") from e

        if not response.is_success:
            raise TransportError(
                f"API Error: {self._error_message(response)}",
                status_code=response.status_code,
            )

        return self._extract_text(response)

    def _post(self, client: httpx.Client, model: str, payload: dict, api_key: str) -> httpx.Response:
        return client.post(
            self.endpoint(model),
            params={"key": api_key},
            json=payload,
            headers={"Content-Type": "application/json"},
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return "Unknown error"
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return "Unknown error"

    @staticmethod
    def _extract_text(response: httpx.Response) -> str:
        try:
            body = response.json()
            text = body["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError(
                "Invalid response format from API", raw_text=response.text
            ) from e
        if not isinstance(text, str) or not text:
            raise MalformedResponseError("Invalid response format from API", raw_text=response.text)
        return text
