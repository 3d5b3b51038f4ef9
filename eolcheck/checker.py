"""End-to-end checks: map an identifier, fetch its cycles, evaluate a version.

Lookup failures never abort a run. A product that cannot be fetched is
reported as WARN with the fetch error as the message.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from packageurl import PackageURL

from ._ai.models_data import PROVIDER_NAMES, SDK_TO_PROVIDER
from ._ai.resolver import AIModelResolver, get_default_resolver
from ._lifecycle.evaluator import EvaluationResult, Status, evaluate_version
from ._lifecycle.mapper import map_package_to_product, map_purl_to_product
from ._lifecycle.source import EndOfLifeSource, get_default_source
from .exceptions import DataSourceError
from .logging_config import logger
from .scanner import ScanResult

DEFAULT_MAX_WORKERS = 8
DEFAULT_AI_VERSION = "latest"


@dataclass(frozen=True)
class ComponentRequest:
    """A component to check: display name, identifier and observed version."""

    name: str
    identifier: str
    version: str


def resolve_product(identifier: str) -> str:
    """
    Map an identifier to a product key, falling back to the identifier itself.

    Identifiers starting with ``pkg:`` are treated as package URLs; an
    unmapped package URL falls back to its package name.
    """
    if identifier.startswith("pkg:"):
        product = map_purl_to_product(identifier)
        if product is None:
            try:
                return PackageURL.from_string(identifier).name
            except ValueError:
                return identifier
        return product

    product = map_package_to_product(identifier)
    if product is None:
        logger.debug(f"No product mapping for {identifier}, using it as the product key")
        return identifier
    return product


def resolve_provider(provider: str) -> str:
    """
    Map an SDK package name such as ``@anthropic-ai/sdk`` to its provider key.

    Known provider keys and SDKs that front several providers are returned
    unchanged.
    """
    key = provider.lower()
    if key in PROVIDER_NAMES:
        return key
    mapped = SDK_TO_PROVIDER.get(key)
    if mapped is None or mapped == "multiple":
        return provider
    logger.debug(f"Resolved SDK {provider} to provider {mapped}")
    return mapped


def check_component(
    name: str,
    identifier: str,
    version: str,
    source: Optional[EndOfLifeSource] = None,
    refresh_cache: bool = False,
    today: Optional[date] = None,
) -> EvaluationResult:
    """
    Check one component against endoflife.date.

    Args:
        name: Display name for the result
        identifier: Package, binary or product name
        version: Observed version string
        source: Lifecycle source (defaults to the shared one)
        refresh_cache: Bypass the cache for this lookup
        today: Evaluation date override

    Returns:
        EvaluationResult; WARN when lifecycle data could not be fetched
    """
    source = source or get_default_source()
    product = resolve_product(identifier)

    try:
        cycles = source.fetch(product, force_refresh=refresh_cache)
    except DataSourceError as e:
        logger.warning(str(e))
        return EvaluationResult(component=name, version=version, status=Status.WARN, message=str(e))

    return evaluate_version(name, version, cycles, today=today)


def check_components(
    requests_: Sequence[ComponentRequest],
    source: Optional[EndOfLifeSource] = None,
    refresh_cache: bool = False,
    today: Optional[date] = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> List[EvaluationResult]:
    """
    Check several components concurrently.

    Results are returned in the same order as the requests.
    """
    if not requests_:
        return []

    source = source or get_default_source()
    with ThreadPoolExecutor(max_workers=min(max_workers, len(requests_))) as executor:
        futures = [
            executor.submit(
                check_component,
                req.name,
                req.identifier,
                req.version,
                source=source,
                refresh_cache=refresh_cache,
                today=today,
            )
            for req in requests_
        ]
        return [future.result() for future in futures]


def check_ai_model(
    provider: str,
    model: str,
    version: str = DEFAULT_AI_VERSION,
    resolver: Optional[AIModelResolver] = None,
    today: Optional[date] = None,
) -> EvaluationResult:
    """
    Check an AI model variant against the curated model tables.

    ``model`` may also be a usage string from MODEL_PATTERNS such as
    ``claude-3-5-sonnet``; the pattern's provider then takes precedence.
    ``provider`` may be an SDK package name as well as a provider key.
    """
    resolver = resolver or get_default_resolver()
    provider = resolve_provider(provider)
    display = f"{PROVIDER_NAMES.get(provider.lower(), provider)} {model}"

    cycles = resolver.resolve(provider, model)
    if cycles is None:
        pattern = resolver.resolve_pattern(model)
        if pattern is not None:
            cycles = resolver.resolve(*pattern)

    if cycles is None:
        return EvaluationResult(
            component=display,
            version=version,
            status=Status.WARN,
            message=f"No lifecycle data for model {model} from provider {provider}",
        )

    return evaluate_version(display, version, cycles, today=today)


def requests_from_scan(scan: ScanResult) -> List[ComponentRequest]:
    """Build component requests for the runtime and every detected service."""
    components = [ComponentRequest(name="Python", identifier="python", version=scan.runtime_version)]
    for service in scan.detected_services:
        components.append(ComponentRequest(name=service.name, identifier=service.product, version=service.version))
    return components
