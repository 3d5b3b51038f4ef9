"""Rich console utilities for eol-check.

This module provides a shared Rich Console instance and helper functions
for rendering evaluation results in terminals and CI environments.
"""

import json
import os
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from ._lifecycle.evaluator import EvaluationResult, Status
from .scanner import ScanResult

# Detect CI environments
IS_GITHUB_ACTIONS = os.getenv("GITHUB_ACTIONS") == "true"
IS_GITLAB_CI = os.getenv("GITLAB_CI") == "true"
IS_CI = os.getenv("CI") == "true" or IS_GITHUB_ACTIONS or IS_GITLAB_CI

custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "status.ok": "green",
        "status.warn": "yellow",
        "status.err": "bold red",
    }
)

STATUS_STYLES = {
    Status.OK: "status.ok",
    Status.WARN: "status.warn",
    Status.ERR: "status.err",
}

STATUS_SYMBOLS = {
    Status.OK: "✓",
    Status.WARN: "!",
    Status.ERR: "✗",
}

# Shared console instance
# Force colors ON in GitHub Actions (it supports ANSI colors but Rich may incorrectly disable them)
console = Console(
    theme=custom_theme,
    force_terminal=IS_GITHUB_ACTIONS or None,
    color_system="auto",
)


def gha_warning(message: str, title: Optional[str] = None) -> None:
    """
    Emit a warning that appears in GitHub Actions job summary.

    Args:
        message: Warning message
        title: Optional title for the warning
    """
    if IS_GITHUB_ACTIONS:
        if title:
            print(f"::warning title={title}::{message}")
        else:
            print(f"::warning::{message}")
    else:
        if title:
            console.print(f"[warning]Warning ({title}):[/warning] {message}")
        else:
            console.print(f"[warning]Warning:[/warning] {message}")


def gha_error(message: str, title: Optional[str] = None) -> None:
    """
    Emit an error that appears in GitHub Actions job summary.

    Args:
        message: Error message
        title: Optional title for the error
    """
    if IS_GITHUB_ACTIONS:
        if title:
            print(f"::error title={title}::{message}")
        else:
            print(f"::error::{message}")
    else:
        if title:
            console.print(f"[error]Error ({title}):[/error] {message}")
        else:
            console.print(f"[error]Error:[/error] {message}")


def print_environment(scan: ScanResult) -> None:
    """Print the detected environment as a two-column table."""
    table = Table(title="Environment", show_header=True, header_style="bold")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Python", scan.runtime_version)
    table.add_row("Package manager", scan.package_manager)
    table.add_row("OS", scan.os)
    for service in scan.detected_services:
        table.add_row(service.name, service.version)

    console.print(table)


def print_results_table(results: Sequence[EvaluationResult], title: str = "EOL Check Results") -> None:
    """
    Print evaluation results as a Rich table with status colouring.

    Args:
        results: Results to display, in display order
        title: Table title
    """
    if not results:
        console.print("[info]No components to check.[/info]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Component", style="cyan")
    table.add_column("Version")
    table.add_column("Status", justify="center")
    table.add_column("Details")

    for result in results:
        style = STATUS_STYLES[result.status]
        table.add_row(
            result.component,
            result.version,
            f"[{style}]{STATUS_SYMBOLS[result.status]} {result.status.value}[/{style}]",
            result.message,
        )

    console.print(table)

    # Surface problems as CI annotations
    if IS_GITHUB_ACTIONS:
        for result in results:
            if result.status == Status.ERR:
                gha_error(result.message, title=f"{result.component} {result.version}")
            elif result.status == Status.WARN:
                gha_warning(result.message, title=f"{result.component} {result.version}")


def print_summary(results: Sequence[EvaluationResult]) -> None:
    """Print a one-line count of results per status."""
    counts = summarize(results)
    console.print(
        f"[status.ok]{counts['OK']} OK[/status.ok], "
        f"[status.warn]{counts['WARN']} WARN[/status.warn], "
        f"[status.err]{counts['ERR']} ERR[/status.err]"
    )


def summarize(results: Sequence[EvaluationResult]) -> Dict[str, int]:
    """Count results per status value."""
    counts = {status.value: 0 for status in Status}
    for result in results:
        counts[result.status.value] += 1
    return counts


def results_to_json(results: Sequence[EvaluationResult], scan: Optional[ScanResult] = None) -> str:
    """
    Serialize results (and optionally the environment scan) to JSON.

    Args:
        results: Evaluation results
        scan: Environment scan to include under "environment"

    Returns:
        Indented JSON document
    """
    payload: Dict[str, Any] = {}
    if scan is not None:
        payload["environment"] = {
            "runtimeVersion": scan.runtime_version,
            "packageManager": scan.package_manager,
            "os": scan.os,
            "detectedServices": [
                {"name": s.name, "product": s.product, "version": s.version} for s in scan.detected_services
            ],
        }
    result_dicts: List[Dict[str, Any]] = [result.to_dict() for result in results]
    payload["results"] = result_dicts
    payload["summary"] = summarize(results)
    return json.dumps(payload, indent=2)
