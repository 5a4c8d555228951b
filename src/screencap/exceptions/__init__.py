"""Exceptions package.

Error taxonomy of the capture pipeline. Every exception knows its exit code.
"""

from .clipboard_exception import ClipboardError
from .configuration_exception import ConfigurationError, InvalidFormatError, InvalidQualityError
from .file_exceptions import PermissionDeniedError, SaveError
from .image_processing_exception import ImageProcessingError
from .screen_capture_exception import (
    CaptureFailedError,
    ExternalCommandFailedError,
    NoScreensFoundError,
    PlatformNotSupportedError,
    ScreenNotFoundError,
)
from .screenshot_exception import ScreenshotException, exit_code_for

__all__ = [
    "ScreenshotException",
    "exit_code_for",
    "NoScreensFoundError",
    "ScreenNotFoundError",
    "CaptureFailedError",
    "ExternalCommandFailedError",
    "PlatformNotSupportedError",
    "SaveError",
    "PermissionDeniedError",
    "ImageProcessingError",
    "ConfigurationError",
    "InvalidFormatError",
    "InvalidQualityError",
    "ClipboardError",
]
