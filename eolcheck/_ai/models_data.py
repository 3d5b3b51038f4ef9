"""Curated lifecycle data for generative AI models.

AI providers do not publish deprecation data through a public API, so this
module keeps hand-maintained tables based on the providers' announcements:

- OpenAI: https://platform.openai.com/docs/deprecations
- Anthropic: https://docs.anthropic.com/en/docs/resources/model-deprecations
- Google: https://ai.google.dev/gemini-api/docs/deprecations
- Meta: community tracking (open-weight models have no vendor EOL)
- Mistral: https://docs.mistral.ai
- Cohere: https://docs.cohere.com

Each table maps a model family to its cycles. ``eol`` follows the
endoflife.date convention: an ISO date, ``True`` when retired without a
known date, ``False`` when no retirement is announced.

Data last updated: 2025-12-01
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, TypedDict, Union


@dataclass(frozen=True)
class AIModelCycle:
    """One variant/snapshot of an AI model family.

    Records are immutable; updates replace the record rather than edit it.
    """

    cycle: str  # Variant identifier (e.g. "0613", "latest", "8b")
    release_date: str  # YYYY-MM-DD, or "unknown"
    eol: Union[str, bool]
    lts: bool  # Recommended/stable variant
    deprecated: bool = False
    replacement: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        result: Dict[str, object] = {
            "cycle": self.cycle,
            "releaseDate": self.release_date,
            "eol": self.eol,
            "lts": self.lts,
        }
        if self.deprecated:
            result["deprecated"] = True
        if self.replacement:
            result["replacement"] = self.replacement
        return result


class ModelRef(TypedDict):
    """A (provider, model) pair."""

    provider: str
    model: str


ModelTable = Dict[str, List[AIModelCycle]]

C = AIModelCycle

# =============================================================================
# OpenAI
# =============================================================================

OPENAI_MODELS: ModelTable = {
    "gpt-3.5-turbo": [
        C("0301", "2023-03-01", "2024-06-13", False, replacement="gpt-4o-mini"),
        C("0613", "2023-06-13", "2024-09-13", False, replacement="gpt-4o-mini"),
        C("16k-0613", "2023-06-13", "2024-09-13", False, replacement="gpt-4o-mini"),
        C("1106", "2023-11-06", "2025-11-14", False, replacement="gpt-4o-mini"),
        C("0125", "2024-01-25", "2025-11-14", False, replacement="gpt-4o-mini"),
        C("latest", "2024-01-25", False, True),
    ],
    "gpt-4": [
        C("0314", "2023-03-14", "2024-06-13", False, replacement="gpt-4o"),
        C("0613", "2023-06-13", "2024-06-13", False, replacement="gpt-4o"),
        C("32k-0314", "2023-03-14", "2025-06-06", False, replacement="gpt-4o"),
        C("32k-0613", "2023-06-13", "2025-06-06", False, replacement="gpt-4o"),
        C("turbo-2024-04-09", "2024-04-09", "2025-11-14", False, replacement="gpt-4o"),
        C("turbo", "2024-04-09", False, True),
    ],
    "gpt-4o": [
        C("2024-05-13", "2024-05-13", False, True),
        C("2024-08-06", "2024-08-06", False, True),
        C("2024-11-20", "2024-11-20", False, True),
        C("latest", "2024-11-20", False, True),
    ],
    "gpt-4o-mini": [
        C("2024-07-18", "2024-07-18", False, True),
        C("latest", "2024-07-18", False, True),
    ],
    "gpt-4.1": [
        C("2025-04-14", "2025-04-14", False, True),
        C("latest", "2025-04-14", False, True),
    ],
    "gpt-4.5-preview": [
        C("preview", "2025-02-27", "2025-07-14", False, deprecated=True, replacement="gpt-4.1"),
    ],
    "gpt-5": [
        C("2025-08-07", "2025-08-07", False, True),
        C("mini", "2025-08-07", False, True),
        C("nano", "2025-08-07", False, True),
        C("latest", "2025-08-07", False, True),
    ],
    "gpt-5.1": [
        C("2025-11-13", "2025-11-13", False, True),
        C("latest", "2025-11-13", False, True),
    ],
    "o1": [
        C("preview", "2024-09-12", "2025-07-28", False, deprecated=True, replacement="o3"),
        C("2024-12-17", "2024-12-17", False, True),
        C("latest", "2024-12-17", False, True),
    ],
    "o1-mini": [
        C("2024-09-12", "2024-09-12", "2025-10-27", False, deprecated=True, replacement="o4-mini"),
    ],
    "o3": [
        C("2025-04-16", "2025-04-16", False, True),
        C("latest", "2025-04-16", False, True),
    ],
    "o3-mini": [
        C("2025-01-31", "2025-01-31", False, True),
        C("latest", "2025-01-31", False, True),
    ],
    "o4-mini": [
        C("2025-04-16", "2025-04-16", False, True),
        C("latest", "2025-04-16", False, True),
    ],
    # Legacy GPT-3 completions models
    "davinci": [C("002", "2020-06-01", "2024-01-04", False, replacement="gpt-3.5-turbo-instruct")],
    "curie": [C("001", "2020-06-01", "2024-01-04", False, replacement="gpt-3.5-turbo-instruct")],
    "babbage": [C("001", "2020-06-01", "2024-01-04", False, replacement="babbage-002")],
    "ada": [C("001", "2020-06-01", "2024-01-04", False, replacement="babbage-002")],
}

# =============================================================================
# Anthropic
# =============================================================================

ANTHROPIC_MODELS: ModelTable = {
    "claude-1": [
        C("1.0", "2023-03-14", "2024-11-06", False, deprecated=True),
        C("1.3", "2023-05-01", "2024-11-06", False, deprecated=True),
        C("instant-1.2", "2023-08-09", "2024-11-06", False, deprecated=True),
    ],
    "claude-2": [
        C("2.0", "2023-07-11", "2025-07-21", False, deprecated=True, replacement="claude-sonnet-4"),
        C("2.1", "2023-11-21", "2025-07-21", False, deprecated=True, replacement="claude-sonnet-4"),
    ],
    "claude-3-opus": [
        C("20240229", "2024-02-29", "2026-01-05", True, deprecated=True, replacement="claude-opus-4.1"),
        C("latest", "2024-02-29", "2026-01-05", True, deprecated=True, replacement="claude-opus-4.1"),
    ],
    "claude-3-sonnet": [
        C("20240229", "2024-02-29", "2025-07-21", False, deprecated=True, replacement="claude-sonnet-4"),
    ],
    "claude-3-haiku": [
        C("20240307", "2024-03-07", False, True),
        C("latest", "2024-03-07", False, True),
    ],
    "claude-3.5-sonnet": [
        C("20240620", "2024-06-20", "2025-10-22", False, deprecated=True, replacement="claude-sonnet-4.5"),
        C("20241022", "2024-10-22", "2025-10-22", False, deprecated=True, replacement="claude-sonnet-4.5"),
    ],
    "claude-3.5-haiku": [
        C("20241022", "2024-10-22", False, True),
        C("latest", "2024-10-22", False, True),
    ],
    "claude-3.7-sonnet": [
        C("20250219", "2025-02-24", False, True),
        C("latest", "2025-02-24", False, True),
    ],
    "claude-sonnet-4": [
        C("20250514", "2025-05-22", False, True),
        C("latest", "2025-05-22", False, True),
    ],
    "claude-opus-4": [
        C("20250514", "2025-05-22", False, True),
        C("latest", "2025-05-22", False, True),
    ],
    "claude-opus-4.1": [
        C("20250805", "2025-08-05", False, True),
        C("latest", "2025-08-05", False, True),
    ],
    "claude-sonnet-4.5": [
        C("20250929", "2025-09-29", False, True),
        C("latest", "2025-09-29", False, True),
    ],
    "claude-haiku-4.5": [
        C("20251001", "2025-10-15", False, True),
        C("latest", "2025-10-15", False, True),
    ],
}

# =============================================================================
# Google
# =============================================================================

GOOGLE_MODELS: ModelTable = {
    # PaLM 2 was retired in favour of Gemini
    "palm-2": [
        C("text-bison-001", "2023-05-10", "2024-10-09", False, replacement="gemini-1.5-flash"),
        C("text-bison-002", "2023-08-01", "2024-10-09", False, replacement="gemini-1.5-flash"),
        C("chat-bison-001", "2023-05-10", "2024-10-09", False, replacement="gemini-1.5-flash"),
    ],
    "gemini-pro": [
        C("1.0", "2023-12-06", "2025-02-15", False, replacement="gemini-1.5-pro"),
    ],
    "gemini-1.0-pro": [
        C("001", "2024-02-15", "2025-02-15", False, replacement="gemini-1.5-pro"),
        C("002", "2024-04-01", "2025-02-15", False, replacement="gemini-1.5-pro"),
    ],
    "gemini-1.5-pro": [
        C("preview-0514", "2024-05-14", "2025-05-24", False),
        C("001", "2024-05-24", "2025-09-24", True, replacement="gemini-2.5-pro"),
        C("002", "2024-09-24", "2025-09-24", True, replacement="gemini-2.5-pro"),
        C("latest", "2024-09-24", "2025-09-24", True, replacement="gemini-2.5-pro"),
    ],
    "gemini-1.5-flash": [
        C("preview-0514", "2024-05-14", "2025-05-24", False),
        C("001", "2024-05-24", "2025-09-24", True, replacement="gemini-2.5-flash"),
        C("002", "2024-09-24", "2025-09-24", True, replacement="gemini-2.5-flash"),
        C("8b", "2024-10-03", "2025-09-24", True, replacement="gemini-2.5-flash-lite"),
        C("latest", "2024-09-24", "2025-09-24", True, replacement="gemini-2.5-flash"),
    ],
    "gemini-2.0-flash": [
        C("exp", "2024-12-11", "2025-09-01", False),
        C("thinking-exp", "2025-01-21", "2025-10-01", False),
        C("001", "2025-02-05", "2026-02-05", True, replacement="gemini-2.5-flash"),
        C("latest", "2025-02-05", "2026-02-05", True, replacement="gemini-2.5-flash"),
    ],
    "gemini-2.5-pro": [
        C("preview-0325", "2025-03-25", "2025-10-01", False),
        C("latest", "2025-06-17", False, True),
    ],
    "gemini-2.5-flash": [
        C("preview-0520", "2025-05-20", "2025-12-01", False),
        C("latest", "2025-06-17", False, True),
    ],
    "gemini-3-pro": [
        C("preview", "2025-11-18", False, False),
        C("latest", "2025-11-18", False, True),
    ],
}

# =============================================================================
# Meta (open weights: no vendor EOL, superseded versions are not LTS)
# =============================================================================

META_MODELS: ModelTable = {
    "llama-2": [
        C("7b", "2023-07-18", False, False),
        C("13b", "2023-07-18", False, False),
        C("70b", "2023-07-18", False, True),
    ],
    "llama-3": [
        C("8b", "2024-04-18", False, True),
        C("70b", "2024-04-18", False, True),
    ],
    "llama-3.1": [
        C("8b", "2024-07-23", False, True),
        C("70b", "2024-07-23", False, True),
        C("405b", "2024-07-23", False, True),
    ],
    "llama-3.2": [
        C("1b", "2024-09-25", False, True),
        C("3b", "2024-09-25", False, True),
        C("11b", "2024-09-25", False, True),
        C("90b", "2024-09-25", False, True),
    ],
    "llama-3.3": [
        C("70b", "2024-12-06", False, True),
    ],
    "llama-4": [
        C("scout", "2025-04-05", False, True),
        C("maverick", "2025-04-05", False, True),
    ],
}

# =============================================================================
# Mistral AI
# =============================================================================

MISTRAL_MODELS: ModelTable = {
    "mistral-7b": [
        C("v0.1", "2023-09-27", False, False),
        C("v0.2", "2024-01-01", False, True),
        C("v0.3", "2024-05-22", False, True),
    ],
    "mixtral-8x7b": [
        C("v0.1", "2023-12-11", "2025-03-30", False, replacement="mistral-small"),
    ],
    "mixtral-8x22b": [
        C("v0.1", "2024-04-17", "2025-03-30", False, replacement="mistral-large"),
    ],
    "mistral-large": [
        C("2402", "2024-02-26", "2025-06-16", False, replacement="mistral-large-2411"),
        C("2407", "2024-07-24", "2025-06-16", False, replacement="mistral-large-2411"),
        C("2411", "2024-11-18", False, True),
    ],
    "mistral-small": [
        C("2402", "2024-02-26", "2025-06-16", False),
        C("2409", "2024-09-18", "2025-06-16", False),
        C("2501", "2025-01-30", False, True),
    ],
    "codestral": [
        C("2405", "2024-05-29", "2025-06-16", False, replacement="codestral-2501"),
        C("2501", "2025-01-13", False, True),
    ],
    "pixtral": [
        C("12b-2409", "2024-09-17", False, True),
        C("large-2411", "2024-11-18", False, True),
    ],
}

# =============================================================================
# Cohere
# =============================================================================

COHERE_MODELS: ModelTable = {
    "command": [
        C("command", "2023-03-01", "2025-09-15", False, replacement="command-a"),
        C("command-light", "2023-03-01", "2025-09-15", False, replacement="command-r7b"),
        C("command-nightly", "2023-03-01", "2025-09-15", False),
    ],
    "command-r": [
        C("command-r", "2024-03-11", "2025-09-15", False, replacement="command-r-08-2024"),
        C("command-r-plus", "2024-04-04", "2025-09-15", False, replacement="command-r-plus-08-2024"),
        C("command-r-08-2024", "2024-08-30", False, True),
        C("command-r-plus-08-2024", "2024-08-30", False, True),
    ],
    "command-a": [
        C("command-a-03-2025", "2025-03-13", False, True),
    ],
}

del C

PROVIDER_TABLES: Dict[str, ModelTable] = {
    "openai": OPENAI_MODELS,
    "anthropic": ANTHROPIC_MODELS,
    "google": GOOGLE_MODELS,
    "meta": META_MODELS,
    "mistral": MISTRAL_MODELS,
    "cohere": COHERE_MODELS,
}

PROVIDER_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "openai": "OpenAI",
        "anthropic": "Anthropic",
        "google": "Google",
        "meta": "Meta",
        "mistral": "Mistral AI",
        "cohere": "Cohere",
    }
)

# SDK package names (npm and PyPI) -> provider. "multiple" marks SDKs that
# front several providers and need model-level detection.
SDK_TO_PROVIDER: Mapping[str, str] = MappingProxyType(
    {
        # OpenAI
        "openai": "openai",
        "@azure/openai": "openai",
        # Anthropic
        "@anthropic-ai/sdk": "anthropic",
        "anthropic": "anthropic",
        # Google
        "@google/generative-ai": "google",
        "@google/genai": "google",
        "@google-cloud/vertexai": "google",
        "google-generativeai": "google",
        "google-genai": "google",
        # LangChain
        "langchain": "multiple",
        "@langchain/openai": "openai",
        "@langchain/anthropic": "anthropic",
        "@langchain/google-genai": "google",
        "@langchain/cohere": "cohere",
        "@langchain/mistralai": "mistral",
        "langchain-openai": "openai",
        "langchain-anthropic": "anthropic",
        # Cohere
        "cohere-ai": "cohere",
        "cohere": "cohere",
        # Mistral
        "@mistralai/mistralai": "mistral",
        "mistralai": "mistral",
        # LlamaIndex
        "llamaindex": "multiple",
        "llama-index": "multiple",
        # Vercel AI SDK
        "ai": "multiple",
        "@ai-sdk/openai": "openai",
        "@ai-sdk/anthropic": "anthropic",
        "@ai-sdk/google": "google",
        "@ai-sdk/mistral": "mistral",
        "@ai-sdk/cohere": "cohere",
        # Hugging Face
        "@huggingface/inference": "huggingface",
        "huggingface_hub": "huggingface",
        # Hosted inference
        "replicate": "replicate",
        "together-ai": "together",
        "ollama": "ollama",
        "ollama-ai-provider": "ollama",
    }
)

# Model strings as they appear in code/config -> canonical (provider, model)
MODEL_PATTERNS: Mapping[str, ModelRef] = MappingProxyType(
    {
        # OpenAI
        "gpt-4o": {"provider": "openai", "model": "gpt-4o"},
        "gpt-4o-mini": {"provider": "openai", "model": "gpt-4o-mini"},
        "gpt-4-turbo": {"provider": "openai", "model": "gpt-4"},
        "gpt-4": {"provider": "openai", "model": "gpt-4"},
        "gpt-4.1": {"provider": "openai", "model": "gpt-4.1"},
        "gpt-3.5-turbo": {"provider": "openai", "model": "gpt-3.5-turbo"},
        "gpt-5": {"provider": "openai", "model": "gpt-5"},
        "gpt-5.1": {"provider": "openai", "model": "gpt-5.1"},
        "o1": {"provider": "openai", "model": "o1"},
        "o1-mini": {"provider": "openai", "model": "o1-mini"},
        "o1-preview": {"provider": "openai", "model": "o1"},
        "o3": {"provider": "openai", "model": "o3"},
        "o3-mini": {"provider": "openai", "model": "o3-mini"},
        "o4-mini": {"provider": "openai", "model": "o4-mini"},
        # Anthropic
        "claude-3-opus": {"provider": "anthropic", "model": "claude-3-opus"},
        "claude-3-sonnet": {"provider": "anthropic", "model": "claude-3-sonnet"},
        "claude-3-haiku": {"provider": "anthropic", "model": "claude-3-haiku"},
        "claude-3-5-sonnet": {"provider": "anthropic", "model": "claude-3.5-sonnet"},
        "claude-3.5-sonnet": {"provider": "anthropic", "model": "claude-3.5-sonnet"},
        "claude-3-5-haiku": {"provider": "anthropic", "model": "claude-3.5-haiku"},
        "claude-3.5-haiku": {"provider": "anthropic", "model": "claude-3.5-haiku"},
        "claude-3-7-sonnet": {"provider": "anthropic", "model": "claude-3.7-sonnet"},
        "claude-sonnet-4": {"provider": "anthropic", "model": "claude-sonnet-4"},
        "claude-opus-4": {"provider": "anthropic", "model": "claude-opus-4"},
        "claude-opus-4-1": {"provider": "anthropic", "model": "claude-opus-4.1"},
        "claude-opus-4.1": {"provider": "anthropic", "model": "claude-opus-4.1"},
        "claude-sonnet-4-5": {"provider": "anthropic", "model": "claude-sonnet-4.5"},
        "claude-sonnet-4.5": {"provider": "anthropic", "model": "claude-sonnet-4.5"},
        "claude-haiku-4-5": {"provider": "anthropic", "model": "claude-haiku-4.5"},
        # Google
        "gemini-pro": {"provider": "google", "model": "gemini-pro"},
        "gemini-1.5-pro": {"provider": "google", "model": "gemini-1.5-pro"},
        "gemini-1.5-flash": {"provider": "google", "model": "gemini-1.5-flash"},
        "gemini-2.0-flash": {"provider": "google", "model": "gemini-2.0-flash"},
        "gemini-2.5-pro": {"provider": "google", "model": "gemini-2.5-pro"},
        "gemini-2.5-flash": {"provider": "google", "model": "gemini-2.5-flash"},
        "gemini-3-pro": {"provider": "google", "model": "gemini-3-pro"},
        "gemini-3-pro-preview": {"provider": "google", "model": "gemini-3-pro"},
        # Mistral
        "mistral-large": {"provider": "mistral", "model": "mistral-large"},
        "mistral-small": {"provider": "mistral", "model": "mistral-small"},
        "codestral": {"provider": "mistral", "model": "codestral"},
        # Meta (as served by ollama / Hugging Face)
        "llama-3": {"provider": "meta", "model": "llama-3"},
        "llama-3.1": {"provider": "meta", "model": "llama-3.1"},
        "llama-3.2": {"provider": "meta", "model": "llama-3.2"},
        "llama-3.3": {"provider": "meta", "model": "llama-3.3"},
        "llama3": {"provider": "meta", "model": "llama-3"},
        "llama3.1": {"provider": "meta", "model": "llama-3.1"},
        "llama3.2": {"provider": "meta", "model": "llama-3.2"},
        "llama3.3": {"provider": "meta", "model": "llama-3.3"},
    }
)
