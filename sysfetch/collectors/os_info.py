"""
OS label resolution.

Linux distributions are named from the PRETTY_NAME key of /etc/os-release.
"""

import logging
import platform
from pathlib import Path
from typing import Callable, Optional


logger = logging.getLogger(__name__)

OS_RELEASE_PATH = Path("/etc/os-release")
UNKNOWN_DISTRO = "Linux (Unknown Distro)"


def get_linux_distribution(path: Path = OS_RELEASE_PATH) -> Optional[str]:
    """Return PRETTY_NAME from an os-release file, or None if unavailable."""
    try:
        content = Path(path).read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        logger.warning(f"Could not read {path}: {e}")
        return None

    for line in content.splitlines():
        key, sep, value = line.partition("=")
        if sep and key == "PRETTY_NAME":
            return value.strip('"')

    logger.warning(f"No PRETTY_NAME in {path}")
    return None


def get_os_label(system: Optional[str] = None,
                 distro_resolver: Callable[[], Optional[str]] = get_linux_distribution) -> str:
    """
    Human-readable OS label for a platform identifier.

    Args:
        system: Value as returned by platform.system(); defaults to the host.
        distro_resolver: Called on Linux to look up the distribution name.
    """
    if system is None:
        system = platform.system()

    if system == "Linux":
        distro = distro_resolver()
        return distro if distro is not None else UNKNOWN_DISTRO
    elif system == "Windows":
        return "Windows"
    elif system == "Darwin":
        return "macOS"
    return "Unknown OS"
