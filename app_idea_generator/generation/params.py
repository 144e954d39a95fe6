"""Request kinds and their generation parameters."""

from dataclasses import dataclass
from enum import Enum

from app_idea_generator.config import GeneratorConfig


class RequestKind(Enum):
    """Kinds of requests sent to the model."""

    BUILD_GUIDE = "buildGuide"
    CODE_GUIDE = "code"
    STYLE_GUIDE = "style"
    SURPRISE_IDEA = "surpriseIdea"
    FEATURE_SUGGESTIONS = "featureSuggestions"

    @property
    def is_auxiliary(self) -> bool:
        """Lower-stakes requests served by the cheaper model."""
        return self in (RequestKind.SURPRISE_IDEA, RequestKind.FEATURE_SUGGESTIONS)


@dataclass(frozen=True)
class GenerationParams:
    """Model and sampling settings for one request."""

    model: str
    temperature: float
    max_output_tokens: int
    top_k: int = 40
    top_p: float = 0.95

    def to_generation_config(self) -> dict:
        """The `generationConfig` object of a generateContent request."""
        return {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
            "maxOutputTokens": self.max_output_tokens,
        }


# (temperature, maxOutputTokens) per request kind
_SAMPLING = {
    RequestKind.BUILD_GUIDE: (0.7, 30192),
    RequestKind.CODE_GUIDE: (0.7, 25192),
    RequestKind.STYLE_GUIDE: (0.7, 25192),
    RequestKind.FEATURE_SUGGESTIONS: (0.7, 8192),
    RequestKind.SURPRISE_IDEA: (0.9, 8192),  # more creative
}


def params_for(kind: RequestKind, config: GeneratorConfig, model_override: str = "") -> GenerationParams:
    """Generation parameters for a request kind.

    model_override replaces the primary model for guide requests only.
    """
    temperature, max_tokens = _SAMPLING[kind]
    if kind.is_auxiliary:
        model = config.auxiliary_model
    else:
        model = model_override or config.primary_model
    return GenerationParams(model=model, temperature=temperature, max_output_tokens=max_tokens)
