"""
Model configuration for chatshelf.

This module maps providers and models to their web-search capability.
It should be importable without triggering any side effects or initializations.
"""

DEFAULT_PROVIDER = "openai"
DEFAULT_MODELS = {
    "openai": "gpt-4o",
    "anthropic": "claude-sonnet-4",
    "google": "gemini-2.5-pro",
    "poe": "GPT-4o",
    "openrouter": "openrouter/auto",
}

# Values accepted for "web_search" in a model entry
WEB_SEARCH_REQUIRED = "required"
WEB_SEARCH_OPTIONAL = "optional"
WEB_SEARCH_UNSUPPORTED = "unsupported"

# Explicit per-model capability; wins over the provider default
MODEL_CONFIGS = {
    "openai": {
        "gpt-5": {"web_search": WEB_SEARCH_OPTIONAL},
        "gpt-4.1": {"web_search": WEB_SEARCH_OPTIONAL},
        "gpt-4o": {"web_search": WEB_SEARCH_OPTIONAL},
        "o3": {"web_search": WEB_SEARCH_OPTIONAL},
        "o4-mini": {"web_search": WEB_SEARCH_OPTIONAL},
        "o4-mini-deep-research": {"web_search": WEB_SEARCH_REQUIRED},
        "o1": {"web_search": WEB_SEARCH_UNSUPPORTED},
        "o1-pro": {"web_search": WEB_SEARCH_UNSUPPORTED},
    },
    "google": {
        "gemini-2.5-pro": {"web_search": WEB_SEARCH_OPTIONAL},
        "gemini-2.5-flash": {"web_search": WEB_SEARCH_OPTIONAL},
    },
}

# Fallback when the model has no explicit entry
PROVIDER_WEB_SEARCH_DEFAULTS = {
    "openai": WEB_SEARCH_OPTIONAL,
    "poe": WEB_SEARCH_OPTIONAL,
    "google": WEB_SEARCH_OPTIONAL,
    "anthropic": WEB_SEARCH_OPTIONAL,
    # Depends on the routed model, which is not known here
    "openrouter": WEB_SEARCH_UNSUPPORTED,
}


def get_web_search_support(provider: str, model: str):
    """Determine web search support for a given provider and model."""
    from chatshelf.models.session_state import WebSearchSupport

    provider_key = (provider or "").lower()
    model_config = MODEL_CONFIGS.get(provider_key, {}).get(model, {})
    level = model_config.get("web_search")
    if level is None:
        level = PROVIDER_WEB_SEARCH_DEFAULTS.get(provider_key, WEB_SEARCH_UNSUPPORTED)

    try:
        return WebSearchSupport(level.lower())
    except ValueError:
        return WebSearchSupport.UNSUPPORTED
