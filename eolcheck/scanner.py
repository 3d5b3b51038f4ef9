"""Local environment scanning.

Detects the running Python version, the project's package manager (from
lock files in the working directory), the operating system, and locally
installed services by probing known binaries for their version.

A binary that cannot be run or reports no recognisable version is skipped;
scanning never fails.
"""

import platform
import re
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Pattern, Sequence

from .logging_config import logger

PROBE_TIMEOUT = 1  # seconds

# Checked in order; the first lock file found wins
PACKAGE_MANAGER_LOCK_FILES = [
    ("uv.lock", "uv"),
    ("poetry.lock", "poetry"),
    ("Pipfile.lock", "pipenv"),
    ("pdm.lock", "pdm"),
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
    ("bun.lock", "bun"),
    ("package-lock.json", "npm"),
]
DEFAULT_PACKAGE_MANAGER = "pip"

OS_RELEASE_PATH = Path("/etc/os-release")


@dataclass(frozen=True)
class ServiceProbe:
    """How to detect one installed service."""

    binary: str
    product: str
    version_args: Sequence[str]
    version_pattern: Pattern[str]


@dataclass(frozen=True)
class DetectedService:
    """A service found on this machine."""

    name: str
    product: str
    version: str


@dataclass
class ScanResult:
    """Everything the scanner found about the local environment."""

    runtime_version: str
    package_manager: str
    os: str
    detected_services: List[DetectedService] = field(default_factory=list)


SERVICE_PROBES: List[ServiceProbe] = [
    ServiceProbe("redis-server", "redis", ["--version"], re.compile(r"v=(\d+\.\d+\.\d+)")),
    ServiceProbe("psql", "postgresql", ["--version"], re.compile(r"psql \(PostgreSQL\) (\d+\.\d+(?:\.\d+)?)")),
    ServiceProbe("mysql", "mysql", ["--version"], re.compile(r"Ver (\d+\.\d+\.\d+)")),
    ServiceProbe("mongod", "mongodb", ["--version"], re.compile(r"db version v(\d+\.\d+\.\d+)")),
    ServiceProbe("docker", "docker-engine", ["--version"], re.compile(r"version (\d+\.\d+\.\d+)")),
    ServiceProbe("git", "git", ["--version"], re.compile(r"version (\d+\.\d+\.\d+)")),
    ServiceProbe("python3", "python", ["--version"], re.compile(r"Python (\d+\.\d+\.\d+)")),
    ServiceProbe("node", "nodejs", ["--version"], re.compile(r"v(\d+\.\d+\.\d+)")),
    # "1.8.0_292" style versions are reported as-is
    ServiceProbe("java", "java", ["-version"], re.compile(r"version \"(\d+(?:\.\d+)*(?:_\d+)?)\"")),
    ServiceProbe("go", "go", ["version"], re.compile(r"go version go(\d+\.\d+(?:\.\d+)?)")),
]


def detect_package_manager(directory: Optional[Path] = None) -> str:
    """Guess the package manager from lock files present in a directory."""
    directory = directory or Path.cwd()
    for lock_file, manager in PACKAGE_MANAGER_LOCK_FILES:
        if (directory / lock_file).exists():
            logger.debug(f"Detected {manager} from {lock_file}")
            return manager
    return DEFAULT_PACKAGE_MANAGER


def detect_os(os_release: Path = OS_RELEASE_PATH) -> str:
    """Return the OS PRETTY_NAME from os-release, or the platform name."""
    try:
        if os_release.exists():
            for line in os_release.read_text(encoding="utf-8").splitlines():
                if line.startswith("PRETTY_NAME="):
                    return line.split("=", 1)[1].strip().strip('"')
    except OSError as e:
        logger.warning(f"Failed to detect OS details: {e}")
    return platform.system() or "Unknown"


def probe_service(probe: ServiceProbe) -> Optional[DetectedService]:
    """
    Run a binary's version command and extract its version.

    Returns:
        DetectedService, or None if the binary is missing or unrecognised
    """
    if shutil.which(probe.binary) is None:
        return None

    try:
        completed = subprocess.run(
            [probe.binary, *probe.version_args],
            capture_output=True,
            text=True,
            timeout=PROBE_TIMEOUT,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"Probe for {probe.binary} failed: {e}")
        return None

    # Some tools (java) print their version on stderr
    output = f"{completed.stdout}\n{completed.stderr}"
    match = probe.version_pattern.search(output)
    if not match:
        logger.debug(f"No version found in {probe.binary} output")
        return None

    return DetectedService(name=probe.binary, product=probe.product, version=match.group(1))


def scan_local_services(probes: Optional[Sequence[ServiceProbe]] = None) -> List[DetectedService]:
    """Probe every known service binary and collect those found."""
    detected = []
    for probe in SERVICE_PROBES if probes is None else probes:
        service = probe_service(probe)
        if service:
            detected.append(service)
    return detected


def scan_environment(directory: Optional[Path] = None) -> ScanResult:
    """Scan the local environment."""
    return ScanResult(
        runtime_version=platform.python_version(),
        package_manager=detect_package_manager(directory),
        os=detect_os(),
        detected_services=scan_local_services(),
    )
