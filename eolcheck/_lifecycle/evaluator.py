"""Evaluate an installed version against lifecycle cycles.

The evaluator is pure: it performs no I/O and never mutates its inputs.

Cycle selection follows the order of the records as supplied by the data
source. The first record whose ``cycle`` equals the full normalised version
wins; failing that, the first record equal to the major version. This lets
products with point-release cycles (Ubuntu ``22.04``) and products with
major-only cycles (Node.js ``18``) share one rule.

The "approaching EOL" window counts calendar months and ignores the day of
the month, so two dates a few days apart near a month boundary can land on
different sides of the six-month threshold.
"""

from dataclasses import asdict, dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from .models import parse_iso_date

WARN_WINDOW_MONTHS = 6


class Status(str, Enum):
    """Tri-state support status."""

    OK = "OK"
    WARN = "WARN"
    ERR = "ERR"


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one component version."""

    component: str
    version: str
    status: Status
    message: str

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["status"] = self.status.value
        return result


def _get_field(cycle: Union[Mapping[str, Any], Any], name: str, default: Any = None) -> Any:
    """Read a field from a cycle object or a plain dict."""
    if isinstance(cycle, Mapping):
        return cycle.get(name, default)
    return getattr(cycle, name, default)


def normalize_version(version: str) -> str:
    """Strip surrounding whitespace and one leading ``v`` prefix."""
    version = version.strip()
    return version[1:] if version.startswith("v") else version


def find_cycle(version: str, cycles: Sequence[Any]) -> Optional[Any]:
    """
    Select the cycle record matching a normalised version.

    Exact full-version matches take precedence over major-version matches.
    Within each rule the first record in array order wins.
    """
    major = version.split(".")[0]
    for cycle in cycles:
        if str(_get_field(cycle, "cycle")) == version:
            return cycle
    for cycle in cycles:
        if str(_get_field(cycle, "cycle")) == major:
            return cycle
    return None


def months_until(eol: date, today: date) -> int:
    """Whole calendar months between two dates, ignoring day-of-month."""
    return (eol.year - today.year) * 12 + (eol.month - today.month)


def evaluate_version(
    component: str,
    current_version: str,
    cycles: Sequence[Any],
    today: Optional[date] = None,
) -> EvaluationResult:
    """
    Compute the support status of an installed version.

    Args:
        component: Display name of the component (e.g. "Node.js")
        current_version: Observed version string (e.g. "v18.19.0")
        cycles: LifecycleCycle / AIModelCycle objects or endoflife.date dicts
        today: Evaluation date, defaults to the current local date

    Returns:
        EvaluationResult with status OK, WARN or ERR
    """
    today = today or date.today()
    version = normalize_version(current_version)
    major = version.split(".")[0]

    def result(status: Status, message: str) -> EvaluationResult:
        return EvaluationResult(component=component, version=current_version, status=status, message=message)

    cycle = find_cycle(version, cycles)
    if cycle is None:
        return result(Status.WARN, f"Could not find EOL data for version {major}")

    eol = _get_field(cycle, "eol", False)

    if eol is True:
        return result(Status.ERR, f"Version {major} is EOL")

    if not eol:
        return result(Status.OK, f"Version {major} is supported (ends unknown)")

    try:
        eol_date = parse_iso_date(str(eol))
    except ValueError:
        return result(Status.WARN, f"Version {major} has an unreadable EOL date ({eol})")

    if eol_date <= today:
        return result(Status.ERR, f"Version {major} is EOL (ended {eol})")

    if months_until(eol_date, today) <= WARN_WINDOW_MONTHS:
        return result(Status.WARN, f"Version {major} is approaching EOL (ends {eol})")

    return result(Status.OK, f"Version {major} is supported (ends {eol})")
