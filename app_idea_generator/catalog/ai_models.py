"""Reference data about current AI models.

Attached to prompts for AI-flavored ideas so the remote model knows about
models released after its own training cutoff.
"""

LAST_UPDATED = "April 1, 2025"

AI_MODELS = {
    "google": [
        {
            "name": "Gemini 2.5 Pro Experimental",
            "codeName": "gemini-2.5-pro-exp-03-25",
            "releaseDate": "2025-03",
            "description": "Google's most advanced \"thinking\" model with a 1M token context window",
            "strengths": ["Advanced reasoning", "Large context window", "In-depth analysis"],
            "availability": "Google AI Studio and Gemini Advanced",
        },
        {
            "name": "Gemini 2.0 Flash",
            "codeName": "gemini-2.0-flash-001",
            "releaseDate": "2025-01",
            "description": "Fast multimodal model optimized for speed",
            "strengths": ["Speed", "Multimodal capabilities", "Efficient processing"],
            "availability": "Gemini API",
        },
    ],
    "openai": [
        {
            "name": "GPT-4o",
            "codeName": "gpt-4o-2025-03",
            "releaseDate": "2025-03",
            "description": "Advanced multimodal model with native image generation",
            "strengths": ["Image generation", "Multimodal reasoning", "High accuracy"],
            "availability": "ChatGPT and API",
        },
        {
            "name": "o3-mini",
            "codeName": "o3-mini-2025-02",
            "releaseDate": "2025-02",
            "description": "Advanced reasoning model optimized for STEM tasks and coding",
            "strengths": ["STEM tasks", "Coding", "Compact size"],
            "availability": "OpenAI API",
        },
    ],
    "anthropic": [
        {
            "name": "Claude 3.7 Sonnet",
            "codeName": "claude-3.7-sonnet-2025-03",
            "releaseDate": "2025-03",
            "description": "High-performance model for workplace AI applications",
            "strengths": ["Workplace AI", "Benchmark performance", "Balanced capabilities"],
            "availability": "Anthropic API",
        },
        {
            "name": "Claude 3.5 Sonnet",
            "codeName": "claude-3.5-sonnet-2024-12",
            "releaseDate": "2024-12",
            "description": "Balanced model with competitive performance at lower cost",
            "strengths": ["Cost efficiency", "Speed", "Comparable to GPT-4o"],
            "availability": "Anthropic API",
        },
    ],
}


def get_all_models() -> list[dict]:
    """All models as a flat list, provider order preserved."""
    return [model for models in AI_MODELS.values() for model in models]


def get_most_recent_models(count: int = 4) -> list[dict]:
    """The most recently released models across all providers."""
    ordered = sorted(get_all_models(), key=lambda m: m["releaseDate"], reverse=True)
    return ordered[:count]


def get_provider_models(provider: str) -> list[dict]:
    return AI_MODELS.get(provider, [])


def build_ai_model_info() -> dict:
    """The model-information block attached to AI-flavored ideas."""
    return {
        "lastUpdated": LAST_UPDATED,
        "recentModels": get_most_recent_models(4),
        "providers": {provider: list(models) for provider, models in AI_MODELS.items()},
    }
