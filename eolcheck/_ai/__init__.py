"""Lifecycle data for generative AI models."""

from .models_data import (
    ANTHROPIC_MODELS,
    COHERE_MODELS,
    GOOGLE_MODELS,
    META_MODELS,
    MISTRAL_MODELS,
    MODEL_PATTERNS,
    OPENAI_MODELS,
    PROVIDER_NAMES,
    SDK_TO_PROVIDER,
    AIModelCycle,
)
from .resolver import (
    AIModelResolver,
    extract_deprecations,
    get_ai_model_eol_data,
    get_all_providers,
    get_default_resolver,
    get_provider_models,
    refresh_ai_model_data,
)

__all__ = [
    "AIModelCycle",
    "AIModelResolver",
    "ANTHROPIC_MODELS",
    "COHERE_MODELS",
    "GOOGLE_MODELS",
    "META_MODELS",
    "MISTRAL_MODELS",
    "MODEL_PATTERNS",
    "OPENAI_MODELS",
    "PROVIDER_NAMES",
    "SDK_TO_PROVIDER",
    "extract_deprecations",
    "get_ai_model_eol_data",
    "get_all_providers",
    "get_default_resolver",
    "get_provider_models",
    "refresh_ai_model_data",
]
