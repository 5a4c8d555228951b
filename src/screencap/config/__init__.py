"""Configuration package.

Usage:
    from screencap.config import load_settings

    settings = load_settings()
    settings.validate_capture_settings()
"""

from .execution_environment import Platform, detect_platform, is_wayland_session
from .settings import (
    SUPPORTED_FORMATS,
    ScreenshotSettings,
    default_config_path,
    default_screenshot_dir,
    get_settings,
    load_settings,
    reset_settings,
    save_settings,
)

__all__ = [
    "Platform",
    "detect_platform",
    "is_wayland_session",
    "SUPPORTED_FORMATS",
    "ScreenshotSettings",
    "default_config_path",
    "default_screenshot_dir",
    "get_settings",
    "load_settings",
    "reset_settings",
    "save_settings",
]
