"""Filesystem exceptions."""

from .screenshot_exception import ScreenshotException


class SaveError(ScreenshotException):
    """Raised when writing a capture to disk fails."""

    exit_code = 4

    def __init__(self, message: str = "File save error", cause: Exception | None = None):
        super().__init__(message, cause)


class PermissionDeniedError(ScreenshotException):
    """Raised on path traversal attempts or filesystem permission problems."""

    exit_code = 13

    def __init__(self, message: str = "Permission denied", cause: Exception | None = None):
        super().__init__(message, cause)
