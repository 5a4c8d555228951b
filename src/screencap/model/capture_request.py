"""Capture request and result values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import InvalidFormatError, InvalidQualityError

if TYPE_CHECKING:
    from ..config import ScreenshotSettings


class CaptureMode(Enum):
    """What part of the screen a request captures."""

    FULLSCREEN = "fullscreen"
    SELECTION = "selection"
    WINDOW = "window"


class ImageFormat(Enum):
    """On-disk image formats a request may ask for."""

    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"

    @classmethod
    def parse(cls, value: str) -> ImageFormat:
        """Parse a format string (case-insensitive, ``jpg`` means JPEG).

        Raises:
            InvalidFormatError: If the string names no known format
        """
        name = value.strip().lower()
        if name == "jpg":
            return cls.JPEG
        try:
            return cls(name)
        except ValueError:
            raise InvalidFormatError(value) from None

    @property
    def pil_format(self) -> str:
        """Format name understood by Pillow's ``Image.save``."""
        return self.name


@dataclass(frozen=True)
class CaptureRequest:
    """One capture invocation. Built once, never reused.

    Attributes:
        mode: Fullscreen, selection or window
        output_directory: Directory the capture is written to
        format: Requested encoding
        quality: Lossy compression quality, 1-100
        filename_template: strftime pattern for generated names
        custom_filename: Fixed name overriding the template
        screen_index: Screen to grab in fullscreen mode
        extension: File extension, the configured format string lowercased
        delay: Seconds to wait before capturing
    """

    mode: CaptureMode
    output_directory: Path
    format: ImageFormat = ImageFormat.PNG
    quality: int = 90
    filename_template: str = "screenshot_%Y%m%d_%H%M%S"
    custom_filename: str | None = None
    screen_index: int = 0
    extension: str = ""
    delay: float = 0.0

    def __post_init__(self) -> None:
        if not 1 <= self.quality <= 100:
            raise InvalidQualityError(self.quality)
        if not self.extension:
            object.__setattr__(self, "extension", self.format.value)

    @classmethod
    def from_settings(
        cls,
        settings: ScreenshotSettings,
        mode: CaptureMode,
        screen_index: int = 0,
    ) -> CaptureRequest:
        """Build a request from validated settings.

        Raises:
            InvalidFormatError: If the configured format is unknown
            InvalidQualityError: If the configured quality is out of range
        """
        settings.validate_capture_settings()
        return cls(
            mode=mode,
            output_directory=Path(settings.output_directory).expanduser(),
            format=ImageFormat.parse(settings.default_format),
            quality=settings.default_quality,
            filename_template=settings.filename_template,
            custom_filename=settings.custom_filename,
            screen_index=screen_index,
            extension=settings.default_format.strip().lower(),
            delay=settings.delay,
        )


@dataclass(frozen=True)
class CapturedArtifact:
    """A written capture file, guaranteed to exist when returned.

    Attributes:
        path: Absolute path of the file
        mode: Mode that produced it
        screen_index: Screen it came from (fullscreen only)
    """

    path: Path
    mode: CaptureMode
    screen_index: int | None = None

    def __str__(self) -> str:
        return str(self.path)
