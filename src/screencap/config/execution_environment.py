"""Execution environment detection.

Determines which operating system the capture tool chains are selected for.
"""

import logging
import os
import platform
from enum import Enum

logger = logging.getLogger(__name__)


class Platform(Enum):
    """Operating system platform."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    UNKNOWN = "unknown"


def detect_platform() -> Platform:
    """Detect the current platform.

    ``SCREENCAP_PLATFORM_OVERRIDE`` forces a value (useful on headless CI).

    Returns:
        Detected platform
    """
    override = os.environ.get("SCREENCAP_PLATFORM_OVERRIDE", "").lower()
    if override:
        try:
            return Platform(override)
        except ValueError:
            logger.warning(f"Ignoring unknown platform override: {override}")

    system = platform.system().lower()

    if system == "windows":
        return Platform.WINDOWS
    elif system == "darwin":
        return Platform.MACOS
    elif system == "linux":
        return Platform.LINUX
    return Platform.UNKNOWN


def is_wayland_session() -> bool:
    """Check whether the current Linux session runs under Wayland."""
    if os.environ.get("WAYLAND_DISPLAY"):
        return True
    return os.environ.get("XDG_SESSION_TYPE", "").lower() == "wayland"
