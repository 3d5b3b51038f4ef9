"""Resolve (provider, model) pairs against the curated AI model tables.

Lookups never touch the network. The optional ``refresh`` crawls the
Anthropic deprecations page and folds any announced retirement dates into
the in-memory tables. That refresh is advisory: every failure is swallowed
and the static data stays authoritative.

Records are never edited in place. A refresh builds a new record and a new
cycle list, then swaps the list into the table under a lock, so a reader
sees either the old list or the new one.
"""

import dataclasses
import re
import threading
from typing import Dict, List, Mapping, Optional, Tuple

import requests

from eolcheck.http_client import get_default_headers
from eolcheck.logging_config import logger

from .models_data import MODEL_PATTERNS, PROVIDER_TABLES, AIModelCycle, ModelTable

ANTHROPIC_DEPRECATIONS_URL = "https://docs.anthropic.com/en/docs/resources/model-deprecations"
REFRESH_TIMEOUT = 5  # seconds

DATE_SUFFIX = re.compile(r"-(\d{8})$")

# "### 2025-01-21: Claude 2 models" ... ```\nclaude-2.1\n```
DEPRECATION_SECTION = re.compile(
    r"###\s*(\d{4}-\d{2}-\d{2}):\s*([^\n<]*)[\s\S]*?```[^\n]*\n\s*([A-Za-z0-9._:-]+)\s*\n\s*```"
)


def extract_deprecations(text: str) -> List[Tuple[str, str, str]]:
    """
    Extract ``(date, title, model_id)`` triples from a deprecations page.

    Args:
        text: Raw page body (Markdown or HTML rendering of it)

    Returns:
        Triples in page order; empty when nothing matches
    """
    return [
        (match.group(1), match.group(2).strip(), match.group(3).strip())
        for match in DEPRECATION_SECTION.finditer(text)
    ]


class AIModelResolver:
    """
    Read access to AI model lifecycle tables with an optional doc refresh.

    Example:
        resolver = AIModelResolver()
        resolver.resolve("OpenAI", "gpt-4o")  # -> list of AIModelCycle
        resolver.resolve("anthropic", "claude-3-opus-20240229")  # date suffix stripped
    """

    def __init__(self, tables: Optional[Mapping[str, ModelTable]] = None):
        source = PROVIDER_TABLES if tables is None else tables
        # Private copies so a refresh never touches the module-level constants
        self._tables: Dict[str, ModelTable] = {
            provider.lower(): {model: list(cycles) for model, cycles in models.items()}
            for provider, models in source.items()
        }
        self._lock = threading.Lock()

    def _provider_table(self, provider: str) -> Optional[ModelTable]:
        return self._tables.get(provider.lower())

    def _find_key(self, table: ModelTable, model: str) -> Optional[str]:
        if model in table:
            return model
        normalized = DATE_SUFFIX.sub("", model.lower())
        for key in table:
            if key.lower() == normalized:
                return key
        return None

    def resolve(self, provider: str, model: str) -> Optional[List[AIModelCycle]]:
        """
        Get lifecycle cycles for a model.

        Tries an exact key match first, then the model name lowercased with
        any trailing ``-YYYYMMDD`` snapshot suffix removed.

        Args:
            provider: Provider key, case-insensitive (e.g. "OpenAI")
            model: Model family or snapshot id (e.g. "gpt-4o")

        Returns:
            A copy of the model's cycles, or None for unknown provider/model
        """
        table = self._provider_table(provider)
        if table is None:
            return None

        key = self._find_key(table, model)
        if key is None:
            return None
        return list(table[key])

    def resolve_pattern(self, identifier: str) -> Optional[Tuple[str, str]]:
        """Map a model usage string (e.g. "claude-3-5-sonnet") to (provider, model)."""
        ref = MODEL_PATTERNS.get(identifier)
        if ref is None:
            return None
        return ref["provider"], ref["model"]

    def list_models(self, provider: str) -> List[str]:
        """List model keys for a provider (empty for unknown providers)."""
        table = self._provider_table(provider)
        return list(table) if table is not None else []

    def list_providers(self) -> List[str]:
        """List all known provider keys."""
        return list(self._tables)

    def refresh(self, session: Optional[requests.Session] = None, timeout: float = REFRESH_TIMEOUT) -> int:
        """
        Fold announced Anthropic retirements into the in-memory tables.

        Best-effort: network errors, layout changes and empty results are
        logged at debug level and otherwise ignored.

        Returns:
            Number of records updated or added
        """
        try:
            http = session or requests
            response = http.get(
                ANTHROPIC_DEPRECATIONS_URL,
                headers=get_default_headers(accept="text/html"),
                timeout=timeout,
            )
            response.raise_for_status()
            triples = extract_deprecations(response.text)
        except Exception as e:
            logger.debug(f"AI model refresh skipped: {e}")
            return 0

        if not triples:
            logger.debug("AI model refresh found no deprecation entries")
            return 0

        updated = 0
        for eol_date, _title, model_id in triples:
            try:
                if self.apply_deprecation("anthropic", model_id, eol_date):
                    updated += 1
            except Exception as e:
                logger.debug(f"Could not apply deprecation for {model_id}: {e}")

        logger.debug(f"AI model refresh updated {updated} records")
        return updated

    def apply_deprecation(self, provider: str, model_id: str, eol_date: str) -> bool:
        """
        Record a retirement date for a model snapshot.

        The snapshot's family is found the same way as in resolve(), with
        MODEL_PATTERNS as a fallback for dashed aliases such as
        ``claude-3-5-sonnet``. The first cycle equal to the model id, its
        date suffix, or ``latest`` is replaced with a deprecated copy; if
        none exists a new record is appended.

        Returns:
            True if a record was replaced or added, False for unknown families
        """
        provider_key = provider.lower()
        table = self._tables.get(provider_key)
        if table is None:
            return False

        family = self._find_key(table, model_id)
        if family is None:
            ref = MODEL_PATTERNS.get(DATE_SUFFIX.sub("", model_id.lower()))
            if ref is not None and ref["provider"] == provider_key and ref["model"] in table:
                family = ref["model"]
        if family is None:
            return False

        suffix = DATE_SUFFIX.search(model_id)
        candidates = [model_id]
        if suffix:
            candidates.append(suffix.group(1))
        candidates.append("latest")

        with self._lock:
            cycles = table[family]
            new_cycles = list(cycles)
            index = next(
                (i for candidate in candidates for i, c in enumerate(cycles) if c.cycle == candidate),
                None,
            )
            if index is not None:
                new_cycles[index] = dataclasses.replace(cycles[index], eol=eol_date, deprecated=True)
            else:
                new_cycles.append(
                    AIModelCycle(cycle=model_id, release_date="unknown", eol=eol_date, lts=False, deprecated=True)
                )
            table[family] = new_cycles
        return True


_default_resolver = AIModelResolver()


def get_default_resolver() -> AIModelResolver:
    return _default_resolver


def get_ai_model_eol_data(provider: str, model: str) -> Optional[List[AIModelCycle]]:
    """Get EOL cycles for a model from the default resolver."""
    return _default_resolver.resolve(provider, model)


def get_provider_models(provider: str) -> List[str]:
    """Get all model keys for a provider."""
    return _default_resolver.list_models(provider)


def get_all_providers() -> List[str]:
    """Get all known AI provider keys."""
    return _default_resolver.list_providers()


def refresh_ai_model_data(session: Optional[requests.Session] = None) -> int:
    """Run the best-effort documentation refresh on the default resolver."""
    return _default_resolver.refresh(session=session)
