"""Command line interface for eol-check."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

import click

from eolcheck import __version__
from eolcheck._ai.resolver import get_default_resolver
from eolcheck._lifecycle.cache import CACHE_SUBDIR, DEFAULT_TTL_MS, CacheStore
from eolcheck._lifecycle.evaluator import EvaluationResult, Status
from eolcheck._lifecycle.source import EndOfLifeSource
from eolcheck.checker import (
    DEFAULT_AI_VERSION,
    check_ai_model,
    check_component,
    check_components,
    requests_from_scan,
    resolve_product,
)
from eolcheck.console import console, print_environment, print_results_table, print_summary, results_to_json
from eolcheck.exceptions import ConfigurationError
from eolcheck.logging_config import logger, set_log_level
from eolcheck.scanner import ScanResult, scan_environment

MS_PER_HOUR = 60 * 60 * 1000
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Config:
    """Runtime settings shared by all commands."""

    cache_ttl_hours: float = DEFAULT_TTL_MS / MS_PER_HOUR
    cache_dir: Optional[str] = None
    api_base_url: Optional[str] = None
    log_level: str = "WARNING"
    json_output: bool = False
    fail_on_eol: bool = False
    refresh_cache: bool = False

    def validate(self) -> None:
        """
        Validate configuration settings.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.cache_ttl_hours <= 0:
            raise ConfigurationError(f"Cache TTL must be a positive number of hours, got {self.cache_ttl_hours}")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{self.log_level}'. Expected one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        self.log_level = self.log_level.upper()

        if self.api_base_url:
            if not self.api_base_url.startswith(("http://", "https://")):
                raise ConfigurationError("API base URL must start with http:// or https://")
            self.api_base_url = self.api_base_url.rstrip("/")

    @property
    def cache_ttl_ms(self) -> int:
        return int(self.cache_ttl_hours * MS_PER_HOUR)


def parse_ttl_hours(value: Optional[str]) -> float:
    """
    Parse a cache TTL given in hours.

    Raises:
        ConfigurationError: If the value is not a positive number
    """
    if value is None or value == "":
        return DEFAULT_TTL_MS / MS_PER_HOUR
    try:
        hours = float(value)
    except ValueError:
        raise ConfigurationError(f"Invalid cache TTL '{value}': expected a number of hours")
    if hours <= 0:
        raise ConfigurationError(f"Invalid cache TTL '{value}': must be positive")
    return hours


def build_config(
    cache_ttl: Optional[str] = None,
    cache_dir: Optional[str] = None,
    api_base_url: Optional[str] = None,
    log_level: Optional[str] = None,
    verbose: bool = False,
    json_output: bool = False,
    fail_on_eol: bool = False,
    refresh_cache: bool = False,
) -> Config:
    """Build and validate a Config from option values."""
    config = Config(
        cache_ttl_hours=parse_ttl_hours(cache_ttl),
        cache_dir=cache_dir or None,
        api_base_url=api_base_url or None,
        log_level="DEBUG" if verbose else (log_level or "WARNING"),
        json_output=json_output,
        fail_on_eol=fail_on_eol,
        refresh_cache=refresh_cache,
    )
    config.validate()
    return config


def build_cache(config: Config) -> CacheStore:
    """Create the cache store, laid out like the default cache directory."""
    cache_dir = Path(config.cache_dir) / CACHE_SUBDIR if config.cache_dir else None
    return CacheStore(ttl_ms=config.cache_ttl_ms, cache_dir=cache_dir)


def build_source(config: Config) -> EndOfLifeSource:
    return EndOfLifeSource(cache=build_cache(config), base_url=config.api_base_url)


def _get_config(ctx: click.Context) -> Config:
    return ctx.obj["config"]


def _emit(
    ctx: click.Context,
    results: Sequence[EvaluationResult],
    scan: Optional[ScanResult] = None,
) -> None:
    """Render results and exit non-zero on ERR when requested."""
    config = _get_config(ctx)

    if config.json_output:
        click.echo(results_to_json(results, scan))
    else:
        if scan is not None:
            print_environment(scan)
        print_results_table(results)
        print_summary(results)

    if config.fail_on_eol and any(result.status == Status.ERR for result in results):
        ctx.exit(1)


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="eol-check")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("--refresh-cache", is_flag=True, help="Ignore cached lifecycle data and refetch.")
@click.option(
    "--fail-on-eol",
    is_flag=True,
    envvar="EOLCHECK_FAIL_ON_EOL",
    help="Exit with status 1 if any result is EOL.",
)
@click.option(
    "--cache-ttl",
    envvar="EOLCHECK_CACHE_TTL_HOURS",
    default=None,
    help="Cache time-to-live in hours (default: 24).",
)
@click.option("--cache-dir", envvar="EOLCHECK_CACHE_DIR", default=None, help="Directory for cached lifecycle data.")
@click.option("--api-url", envvar="EOLCHECK_API_BASE_URL", default=None, help="endoflife.date API base URL.")
@click.option("--log-level", envvar="EOLCHECK_LOG_LEVEL", default=None, help="Log level (default: WARNING).")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    json_output: bool,
    refresh_cache: bool,
    fail_on_eol: bool,
    cache_ttl: Optional[str],
    cache_dir: Optional[str],
    api_url: Optional[str],
    log_level: Optional[str],
) -> None:
    """Check runtimes, services and AI models for end-of-life status.

    Without a command, scans the local environment.
    """
    try:
        config = build_config(
            cache_ttl=cache_ttl,
            cache_dir=cache_dir,
            api_base_url=api_url,
            log_level=log_level,
            verbose=verbose,
            json_output=json_output,
            fail_on_eol=fail_on_eol,
            refresh_cache=refresh_cache,
        )
    except ConfigurationError as e:
        raise click.UsageError(str(e))

    set_log_level(config.log_level)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(scan)


@cli.command()
@click.option("--refresh-cache", is_flag=True, help="Ignore cached lifecycle data.")
@click.pass_context
def scan(ctx: click.Context, refresh_cache: bool = False) -> None:
    """Scan the local environment and check everything found."""
    config = _get_config(ctx)
    environment = scan_environment()
    logger.info(f"Detected {len(environment.detected_services)} services")

    results = check_components(
        requests_from_scan(environment),
        source=build_source(config),
        refresh_cache=refresh_cache or config.refresh_cache,
    )
    _emit(ctx, results, scan=environment)


@cli.command()
@click.argument("product")
@click.argument("version")
@click.option("--refresh-cache", is_flag=True, help="Ignore cached lifecycle data.")
@click.pass_context
def check(ctx: click.Context, product: str, version: str, refresh_cache: bool) -> None:
    """Check one PRODUCT (package name, product key or PURL) at VERSION."""
    config = _get_config(ctx)
    result = check_component(
        product,
        product,
        version,
        source=build_source(config),
        refresh_cache=refresh_cache or config.refresh_cache,
    )
    _emit(ctx, [result])


@cli.command()
@click.argument("provider")
@click.argument("model")
@click.argument("version", default=DEFAULT_AI_VERSION)
@click.option("--refresh-docs", is_flag=True, help="Fetch provider deprecation notices first.")
@click.pass_context
def ai(ctx: click.Context, provider: str, model: str, version: str, refresh_docs: bool) -> None:
    """Check an AI MODEL from PROVIDER or SDK package (VERSION defaults to "latest")."""
    resolver = get_default_resolver()
    if refresh_docs:
        updated = resolver.refresh()
        logger.info(f"Applied {updated} deprecation notices")

    result = check_ai_model(provider, model, version, resolver=resolver)
    _emit(ctx, [result])


@cli.command(name="models")
@click.argument("provider", required=False)
def list_models(provider: Optional[str]) -> None:
    """List AI providers, or the models known for PROVIDER."""
    resolver = get_default_resolver()
    if provider is None:
        names: List[str] = resolver.list_providers()
    else:
        names = resolver.list_models(provider)
        if not names:
            raise click.BadParameter(f"Unknown provider '{provider}'", param_hint="PROVIDER")
    for name in names:
        click.echo(name)


@cli.group()
def cache() -> None:
    """Manage cached lifecycle data."""


@cache.command(name="clear")
@click.pass_context
def cache_clear(ctx: click.Context) -> None:
    """Delete all cached lifecycle data."""
    store = build_cache(_get_config(ctx))
    store.clear()
    console.print(f"[success]Cleared cache in {store.cache_dir}[/success]")


@cache.command(name="invalidate")
@click.argument("product")
@click.pass_context
def cache_invalidate(ctx: click.Context, product: str) -> None:
    """Delete cached lifecycle data for PRODUCT."""
    store = build_cache(_get_config(ctx))
    key = resolve_product(product)
    store.invalidate(key)
    console.print(f"[success]Invalidated cache for {key}[/success]")


def main() -> None:
    """Console script entry point."""
    cli(prog_name="eol-check")
