"""Disk-backed, TTL-governed cache of endoflife.date responses.

One JSON file per product key is stored under the user cache directory::

    ~/.cache/eol-check/lifecycle/nodejs.json
    {"product": "nodejs", "timestamp": 1718000000000, "data": [...]}

A corrupt or malformed file is treated as a cache miss. Writes go to a
temporary file that is atomically renamed over the entry, so concurrent
readers never observe a half-written file and concurrent writers on the
same key resolve last-write-wins.
"""

import json
import os
import re
import tempfile
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from eolcheck.logging_config import logger

from .models import CacheEntry, LifecycleCycle

DEFAULT_TTL_MS = 24 * 60 * 60 * 1000

CACHE_SUBDIR = "lifecycle"
CACHE_SUFFIX = ".json"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def _now_ms() -> int:
    return int(time.time() * 1000)


def get_cache_dir() -> Path:
    """
    Get the lifecycle cache directory, creating it if needed.

    Resolution order: ``EOLCHECK_CACHE_DIR`` (if set and non-empty), then
    ``XDG_CACHE_HOME/eol-check``, then ``~/.cache/eol-check``.
    """
    override = os.environ.get("EOLCHECK_CACHE_DIR")
    if override:
        base = Path(override)
    else:
        xdg = os.environ.get("XDG_CACHE_HOME")
        base = (Path(xdg) if xdg else Path.home() / ".cache") / "eol-check"

    cache_dir = base / CACHE_SUBDIR
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir


class CacheStore:
    """
    Product-keyed cache of lifecycle cycles with a time-to-live.

    Example:
        cache = CacheStore(ttl_ms=60 * 60 * 1000)
        cache.set("nodejs", cycles)
        cache.get("nodejs")  # -> cycles, until an hour has passed
    """

    def __init__(
        self,
        ttl_ms: int = DEFAULT_TTL_MS,
        cache_dir: Optional[Path] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Initialize the cache store.

        Args:
            ttl_ms: Maximum entry age in milliseconds
            cache_dir: Optional custom cache directory
            clock: Optional callable returning the current epoch millis
        """
        if ttl_ms < 0:
            raise ValueError("ttl_ms must not be negative")
        self.ttl_ms = ttl_ms
        self._clock = clock or _now_ms
        if cache_dir is None:
            self._cache_dir = get_cache_dir()
        else:
            self._cache_dir = Path(cache_dir)
            self._cache_dir.mkdir(parents=True, exist_ok=True)

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    def _path_for(self, product: str) -> Path:
        safe_name = _UNSAFE_CHARS.sub("_", product) or "_"
        return self._cache_dir / f"{safe_name}{CACHE_SUFFIX}"

    def get(self, product: str) -> Optional[List[LifecycleCycle]]:
        """
        Return cached cycles for a product, or None on miss or expiry.

        Unreadable or malformed entries are logged and treated as a miss.
        """
        path = self._path_for(product)
        if not path.exists():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                entry = CacheEntry.from_dict(json.load(f))
        except (OSError, ValueError, TypeError, OverflowError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError; deep nesting raises RecursionError
            logger.warning(f"Failed to read cache for {product}: {e}")
            return None

        if entry.product != product:
            # Another key sanitised to the same file name
            logger.debug(f"Cache entry for {entry.product} does not match {product}")
            return None

        if self._clock() - entry.timestamp > self.ttl_ms:
            logger.debug(f"Cache expired (lifecycle): {product}")
            return None

        logger.debug(f"Cache hit (lifecycle): {product}")
        return entry.data

    def set(self, product: str, data: Sequence[LifecycleCycle]) -> None:
        """
        Persist cycles for a product, replacing any previous entry.

        Write failures are logged and swallowed; the caller still holds the
        fresh data for the current call.
        """
        entry = CacheEntry(product=product, timestamp=self._clock(), data=list(data))
        path = self._path_for(product)

        tmp_name = None
        try:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._cache_dir, prefix=f".{path.stem}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(entry.to_dict(), f, indent=2)
            os.replace(tmp_name, path)
            tmp_name = None
            logger.debug(f"Cached lifecycle data for {product}: {path}")
        except OSError as e:
            logger.warning(f"Failed to write cache for {product}: {e}")
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

    def invalidate(self, product: str) -> None:
        """Remove one product's entry if present."""
        self._path_for(product).unlink(missing_ok=True)

    def clear(self) -> None:
        """Remove all cached entries."""
        if not self._cache_dir.exists():
            return
        for path in self._cache_dir.glob(f"*{CACHE_SUFFIX}"):
            path.unlink(missing_ok=True)
