"""HTTP client utilities with consistent user agent."""

from typing import Optional

import requests


def _get_package_version() -> str:
    """Get the package version for User-Agent header."""
    try:
        from importlib.metadata import version

        return version("eol-check")
    except Exception:
        try:
            from pathlib import Path

            import tomllib

            pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
            if pyproject_path.exists():
                with open(pyproject_path, "rb") as f:
                    pyproject_data = tomllib.load(f)
                return pyproject_data.get("project", {}).get("version", "unknown")
        except Exception:
            pass
        return "unknown"


USER_AGENT = f"eol-check/{_get_package_version()} (+https://github.com/abhishekpanda0620/eol-check)"


def get_default_headers(accept: Optional[str] = None) -> dict:
    """
    Get default HTTP headers with user agent.

    Args:
        accept: Optional Accept header value (e.g., "application/json")

    Returns:
        Dictionary of HTTP headers
    """
    headers = {"User-Agent": USER_AGENT}
    if accept:
        headers["Accept"] = accept
    return headers


def create_session() -> requests.Session:
    """Create a requests session preloaded with the default headers."""
    session = requests.Session()
    session.headers.update(get_default_headers())
    return session
