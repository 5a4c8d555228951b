"""Configuration management for screencap using pydantic-settings.

Settings come from three places, lowest priority first: field defaults,
the YAML config file, and ``SCREENCAP_*`` environment variables.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from ..exceptions import ConfigurationError, InvalidFormatError, InvalidQualityError
from .execution_environment import Platform, detect_platform

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("png", "jpg", "jpeg", "webp")


def default_screenshot_dir() -> Path:
    """Return the OS-specific default screenshot directory."""
    home = Path.home()
    if detect_platform() == Platform.MACOS:
        return home / "Desktop"
    return home / "Pictures" / "Screenshots"


def default_config_path() -> Path:
    """Return the location of the persisted config file."""
    if detect_platform() == Platform.WINDOWS:
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "screencap" / "config.yaml"


class ScreenshotSettings(BaseSettings):
    """Main configuration settings for screencap."""

    model_config = SettingsConfigDict(
        env_prefix="SCREENCAP_",
        case_sensitive=False,
        extra="ignore",
    )

    # Output settings
    output_directory: Path = Field(
        default_factory=default_screenshot_dir, description="Directory captures are written to"
    )
    default_format: str = Field("png", description="Image format: png, jpg, jpeg or webp")
    default_quality: int = Field(90, description="JPEG quality (1-100)")
    filename_template: str = Field(
        "screenshot_%Y%m%d_%H%M%S", description="strftime pattern for generated filenames"
    )
    custom_filename: str | None = Field(
        None, description="Fixed filename (without extension) overriding the template"
    )

    # Post-capture behaviour
    auto_open: bool = Field(False, description="Open the capture with the system viewer")
    copy_to_clipboard: bool = Field(False, description="Copy the capture to the clipboard")
    cleanup_after_days: int | None = Field(
        None, description="Age in days after which the cleanup command deletes captures"
    )

    # Runtime settings
    delay: float = Field(0.0, ge=0.0, description="Seconds to wait before capturing")
    debug_mode: bool = Field(False, description="Enable debug logging")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Let environment variables win over values read from the config file."""
        return (env_settings, init_settings, dotenv_settings, file_secret_settings)

    def validate_capture_settings(self) -> None:
        """Validate the values a capture depends on.

        Raises:
            InvalidFormatError: If the format is not supported
            InvalidQualityError: If quality is outside 1-100
            ConfigurationError: If cleanup_after_days is not positive
        """
        if self.default_format.lower() not in SUPPORTED_FORMATS:
            raise InvalidFormatError(self.default_format)

        if not 1 <= self.default_quality <= 100:
            raise InvalidQualityError(self.default_quality)

        if self.cleanup_after_days is not None and self.cleanup_after_days < 1:
            raise ConfigurationError(
                f"cleanup_after_days must be positive, got {self.cleanup_after_days}",
                config_key="cleanup_after_days",
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a YAML-friendly dictionary."""
        return self.model_dump(mode="json")


def load_settings(path: Path | None = None) -> ScreenshotSettings:
    """Load settings from the YAML config file.

    A missing file is created with default values first.

    Args:
        path: Config file location, defaults to default_config_path()

    Returns:
        Loaded settings

    Raises:
        ConfigurationError: If the file cannot be read or holds invalid values
    """
    path = path or default_config_path()

    if not path.exists():
        settings = ScreenshotSettings()
        save_settings(settings, path)
        logger.info(f"Created default configuration at {path}")
        return settings

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to read config file {path}", e) from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    try:
        return ScreenshotSettings(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config file {path}", e) from e


def save_settings(settings: ScreenshotSettings, path: Path | None = None) -> Path:
    """Save settings to the YAML config file.

    Args:
        settings: Settings to persist
        path: Config file location, defaults to default_config_path()

    Returns:
        Path the settings were written to
    """
    path = path or default_config_path()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(settings.to_dict(), default_flow_style=False, sort_keys=False),
            encoding="utf-8",
        )
    except OSError as e:
        raise ConfigurationError(f"Failed to write config file {path}", e) from e

    logger.debug(f"Configuration saved to {path}")
    return path


# Singleton instance
_settings: ScreenshotSettings | None = None


def get_settings() -> ScreenshotSettings:
    """Get the singleton settings instance (environment and defaults only)."""
    global _settings

    if _settings is None:
        _settings = ScreenshotSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
