"""Clipboard exception."""

from .screenshot_exception import ScreenshotException


class ClipboardError(ScreenshotException):
    """Exception thrown when handing an image to the clipboard fails."""

    def __init__(self, message: str = "Clipboard error", cause: Exception | None = None):
        super().__init__(message, cause)
