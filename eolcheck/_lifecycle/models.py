"""Data model for lifecycle records fetched from endoflife.date.

The wire format follows the endoflife.date v1 API, where each product is a
JSON array of cycle objects::

    [
      {"cycle": "18", "releaseDate": "2022-04-19", "eol": "2025-04-30",
       "lts": "2022-10-25", "support": "2023-10-18", "latest": "18.20.8"},
      ...
    ]

``eol`` is either an ISO date, ``true`` (ended, no date on record) or
``false`` (no planned end).
"""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Union

DateOrFlag = Union[str, bool]


def parse_iso_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, raising ValueError when malformed."""
    return date.fromisoformat(value.strip()[:10])


@dataclass
class LifecycleCycle:
    """One support window for a product version line."""

    cycle: str
    release_date: str = "unknown"
    eol: DateOrFlag = False
    lts: DateOrFlag = False
    support: Optional[DateOrFlag] = None
    discontinued: Optional[DateOrFlag] = None
    latest: Optional[str] = None
    link: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LifecycleCycle":
        """
        Build a cycle from an endoflife.date JSON object.

        ``cycle`` is coerced to a string because the API emits bare numbers
        for some products (e.g. ``"cycle": 18``).

        Raises:
            ValueError: If the object has no ``cycle`` key
        """
        if "cycle" not in data:
            raise ValueError(f"Lifecycle record has no cycle: {data!r}")

        return cls(
            cycle=str(data["cycle"]),
            release_date=str(data.get("releaseDate") or "unknown"),
            eol=_flag_or_str(data.get("eol", False)),
            lts=_flag_or_str(data.get("lts", False)),
            support=_optional_flag_or_str(data.get("support")),
            discontinued=_optional_flag_or_str(data.get("discontinued")),
            latest=None if data.get("latest") is None else str(data["latest"]),
            link=data.get("link"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the endoflife.date wire keys."""
        result: Dict[str, Any] = {
            "cycle": self.cycle,
            "releaseDate": self.release_date,
            "eol": self.eol,
            "lts": self.lts,
        }
        for key, value in (
            ("support", self.support),
            ("discontinued", self.discontinued),
            ("latest", self.latest),
            ("link", self.link),
        ):
            if value is not None:
                result[key] = value
        return result

    def eol_date(self) -> Optional[date]:
        """
        Return the EOL as a date, or None when ``eol`` is a boolean flag.

        Raises:
            ValueError: If ``eol`` is a string that is not a calendar date
        """
        if isinstance(self.eol, bool):
            return None
        return parse_iso_date(self.eol)


@dataclass
class CacheEntry:
    """Persisted snapshot of one product's lifecycle records."""

    product: str
    timestamp: int  # epoch millis
    data: List[LifecycleCycle] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "CacheEntry":
        """
        Parse a persisted cache file payload.

        Raises:
            ValueError: If the payload does not have the expected shape
        """
        if not isinstance(raw, dict):
            raise ValueError("cache entry is not a JSON object")
        timestamp = raw.get("timestamp")
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise ValueError("cache entry has no numeric timestamp")
        if not math.isfinite(timestamp):
            raise ValueError("cache entry timestamp is not finite")
        data = raw.get("data")
        if not isinstance(data, list):
            raise ValueError("cache entry data is not a list")
        return cls(
            product=str(raw.get("product", "")),
            timestamp=int(timestamp),
            data=[LifecycleCycle.from_dict(item) for item in data],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product": self.product,
            "timestamp": self.timestamp,
            "data": [cycle.to_dict() for cycle in self.data],
        }


def _flag_or_str(value: Any) -> DateOrFlag:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value)


def _optional_flag_or_str(value: Any) -> Optional[DateOrFlag]:
    if value is None:
        return None
    return _flag_or_str(value)
