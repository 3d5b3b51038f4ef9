"""Lifecycle lookups: product mapping, cached endoflife.date data and evaluation."""

from .cache import DEFAULT_TTL_MS, CacheStore, get_cache_dir
from .evaluator import EvaluationResult, Status, evaluate_version
from .mapper import PRODUCT_MAP, map_package_to_product, map_purl_to_product
from .models import CacheEntry, LifecycleCycle
from .source import EndOfLifeSource, fetch_eol_data

__all__ = [
    "DEFAULT_TTL_MS",
    "CacheEntry",
    "CacheStore",
    "EndOfLifeSource",
    "EvaluationResult",
    "LifecycleCycle",
    "PRODUCT_MAP",
    "Status",
    "evaluate_version",
    "fetch_eol_data",
    "get_cache_dir",
    "map_package_to_product",
    "map_purl_to_product",
]
