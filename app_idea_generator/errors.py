"""Error types raised by the generator.

Every failure is caught at the action boundary (CLI command, MCP tool) and
turned into a user-visible message; nothing is retried automatically.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base error for generator operations."""
    pass


class ConfigurationError(GeneratorError):
    """Required configuration (the API key) is missing."""
    pass


class TransportError(GeneratorError):
    """Non-success HTTP status or network failure talking to the model API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(GeneratorError):
    """The API answered successfully but the payload is missing or unparsable."""

    def __init__(self, message: str, raw_text: Optional[str] = None):
        super().__init__(message)
        self.raw_text = raw_text


class ValidationError(GeneratorError):
    """Input rejected before any request was attempted."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ForbiddenActionError(GeneratorError):
    """The requested action is never allowed in the current view."""
    pass
