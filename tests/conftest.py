"""Pytest configuration and shared fixtures for all tests."""

import pytest

from eolcheck._lifecycle.models import LifecycleCycle
from eolcheck._lifecycle.source import reset_default_source


@pytest.fixture(autouse=True)
def isolated_cache_dir(tmp_path, monkeypatch):
    """Point the lifecycle cache at a per-test directory.

    Runs for every test so nothing reads or writes the user's real cache.
    """
    cache_dir = tmp_path / "eol-cache"
    monkeypatch.setenv("EOLCHECK_CACHE_DIR", str(cache_dir))
    monkeypatch.delenv("EOLCHECK_API_BASE_URL", raising=False)
    monkeypatch.delenv("EOLCHECK_CACHE_TTL_HOURS", raising=False)
    reset_default_source()
    yield cache_dir
    reset_default_source()


@pytest.fixture
def nodejs_cycles():
    """A trimmed copy of the endoflife.date nodejs payload."""
    return [
        LifecycleCycle(cycle="22", release_date="2024-04-24", eol="2027-04-30", lts="2024-10-29"),
        LifecycleCycle(cycle="20", release_date="2023-04-18", eol="2026-04-30", lts="2023-10-24"),
        LifecycleCycle(cycle="18", release_date="2022-04-19", eol="2025-04-30", lts="2022-10-25"),
        LifecycleCycle(cycle="16", release_date="2021-04-20", eol="2023-09-11", lts="2021-10-26"),
        LifecycleCycle(cycle="0.10", release_date="2013-03-11", eol=True),
    ]
