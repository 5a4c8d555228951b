"""Screen capture exceptions.

Exceptions thrown when obtaining pixels or running a capture tool fails.
"""

from .screenshot_exception import ScreenshotException


class NoScreensFoundError(ScreenshotException):
    """Raised when screen enumeration returns no screens."""

    exit_code = 2

    def __init__(self, message: str = "No screens found", cause: Exception | None = None):
        super().__init__(message, cause)


class ScreenNotFoundError(ScreenshotException):
    """Raised when a requested screen index is out of range."""

    exit_code = 2

    def __init__(self, screen_index: int, cause: Exception | None = None):
        """Initialize screen not found exception.

        Args:
            screen_index: The index that was requested
            cause: Underlying exception that caused this error
        """
        super().__init__(f"Screen {screen_index} not found", cause)
        self.screen_index = screen_index


class CaptureFailedError(ScreenshotException):
    """Raised when a grab or external tool fails with no more specific cause."""

    exit_code = 3

    def __init__(self, message: str = "Screen capture failed", cause: Exception | None = None):
        super().__init__(message, cause)


class ExternalCommandFailedError(ScreenshotException):
    """Raised when a capture or clipboard tool could not be launched at all."""

    def __init__(self, program: str, cause: Exception | None = None):
        """Initialize external command exception.

        Args:
            program: Name of the program that failed to launch
            cause: Underlying OS error
        """
        super().__init__(f"External command failed: {program}", cause)
        self.program = program


class PlatformNotSupportedError(ScreenshotException):
    """Raised when no implementation exists for this platform, mode or format."""

    exit_code = 5

    def __init__(self, message: str = "Platform not supported", cause: Exception | None = None):
        super().__init__(message, cause)
