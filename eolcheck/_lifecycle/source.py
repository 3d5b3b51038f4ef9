"""endoflife.date data source with cache-aside lookups.

Strategy:
1. Check the local cache first (skipped when a refresh is forced)
2. Fetch ``<base>/<product>.json`` from the API, exactly once
3. Cache the result locally for future use (best-effort)

There is no retry loop: a failed fetch surfaces as a
DataSourceError and the caller decides how to degrade.
"""

import json
import os
from typing import List, Optional

import requests

from eolcheck.exceptions import DataSourceError
from eolcheck.http_client import create_session
from eolcheck.logging_config import logger

from .cache import CacheStore
from .models import LifecycleCycle

ENDOFLIFE_API_BASE = "https://endoflife.date/api"
DEFAULT_TIMEOUT = 10  # seconds


def get_api_base_url() -> str:
    """Return the API base URL, honouring ``EOLCHECK_API_BASE_URL``."""
    return (os.environ.get("EOLCHECK_API_BASE_URL") or ENDOFLIFE_API_BASE).rstrip("/")


class EndOfLifeSource:
    """
    Lifecycle data source backed by the endoflife.date API.

    The source performs no identifier normalisation; it expects an already
    canonical product key such as ``nodejs`` or ``postgresql``.
    """

    def __init__(
        self,
        cache: Optional[CacheStore] = None,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.cache = cache if cache is not None else CacheStore()
        self.base_url = (base_url or get_api_base_url()).rstrip("/")
        self.session = session or create_session()
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "endoflife.date"

    def fetch(self, product: str, force_refresh: bool = False) -> List[LifecycleCycle]:
        """
        Fetch lifecycle cycles for a product.

        Args:
            product: Canonical endoflife.date product key
            force_refresh: Bypass the cache and always hit the API

        Returns:
            List of LifecycleCycle in the order the API returned them

        Raises:
            DataSourceError: On network failure, timeout, non-2xx response
                or a payload that is not a JSON array of cycles
        """
        if not force_refresh:
            cached = self.cache.get(product)
            if cached is not None:
                return cached

        cycles = self._fetch_remote(product)
        self.cache.set(product, cycles)
        return cycles

    def _fetch_remote(self, product: str) -> List[LifecycleCycle]:
        url = f"{self.base_url}/{product}.json"
        logger.debug(f"Fetching lifecycle data for: {product}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise DataSourceError(product, f"request timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise DataSourceError(product, e) from e

        if not response.ok:
            reason = getattr(response, "reason", "") or ""
            raise DataSourceError(product, f"HTTP {response.status_code} {reason}".strip())

        try:
            payload = response.json()
        except (ValueError, json.JSONDecodeError) as e:
            raise DataSourceError(product, f"invalid JSON response: {e}") from e

        if not isinstance(payload, list):
            raise DataSourceError(product, f"unexpected response type: {type(payload).__name__}")

        try:
            cycles = [LifecycleCycle.from_dict(item) for item in payload]
        except (ValueError, TypeError, AttributeError) as e:
            raise DataSourceError(product, f"malformed lifecycle record: {e}") from e

        logger.debug(f"Fetched {len(cycles)} cycles for {product}")
        return cycles


_default_source: Optional[EndOfLifeSource] = None


def get_default_source() -> EndOfLifeSource:
    """Return the process-wide source, creating it on first use."""
    global _default_source
    if _default_source is None:
        _default_source = EndOfLifeSource()
    return _default_source


def reset_default_source() -> None:
    """Forget the process-wide source (used when configuration changes)."""
    global _default_source
    _default_source = None


def fetch_eol_data(product: str, refresh_cache: bool = False) -> List[LifecycleCycle]:
    """Fetch lifecycle cycles for a product using the default source."""
    return get_default_source().fetch(product, force_refresh=refresh_cache)
