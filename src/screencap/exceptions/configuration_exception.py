"""Configuration exceptions.

Exceptions thrown when configuration is invalid or missing.
"""

from .screenshot_exception import ScreenshotException


class ConfigurationError(ScreenshotException):
    """Exception thrown when configuration is invalid or missing.

    Raised during configuration loading, saving or validation.
    """

    def __init__(
        self,
        message: str = "Configuration error",
        cause: Exception | None = None,
        config_key: str | None = None,
    ):
        """Initialize configuration exception.

        Args:
            message: Error message
            cause: Underlying exception that caused this error
            config_key: Configuration key that caused the error (if applicable)
        """
        super().__init__(message, cause)
        self.config_key = config_key


class InvalidFormatError(ConfigurationError):
    """Raised for an unsupported or unrecognized image format string."""

    def __init__(self, value: str):
        super().__init__(f"Invalid format: {value}", config_key="default_format")
        self.value = value


class InvalidQualityError(ConfigurationError):
    """Raised when quality lies outside 1-100."""

    def __init__(self, value: int):
        super().__init__(
            f"Invalid quality value: {value} (must be 1-100)", config_key="default_quality"
        )
        self.value = value
