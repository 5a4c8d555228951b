"""Image processing exception.

Exception thrown when a pixel buffer cannot be encoded.
"""

from .screenshot_exception import ScreenshotException


class ImageProcessingError(ScreenshotException):
    """Exception thrown when a pixel buffer does not match its declared geometry.

    Raised during encoding, never after a file has been written.
    """

    def __init__(
        self,
        message: str = "Image processing error",
        cause: Exception | None = None,
        expected_length: int | None = None,
        actual_length: int | None = None,
    ):
        """Initialize image processing exception.

        Args:
            message: Error message
            cause: Underlying exception that caused this error
            expected_length: Buffer length the geometry requires (if applicable)
            actual_length: Buffer length that was supplied (if applicable)
        """
        super().__init__(message, cause)
        self.expected_length = expected_length
        self.actual_length = actual_length
