"""Screenshot runtime exception.

Base exception for the capture pipeline.
"""


class ScreenshotException(RuntimeError):
    """Base runtime exception for all screencap exceptions.

    This is the root of the screencap exception hierarchy. Each subclass
    carries the process exit code the CLI reports for it, so errors can
    propagate through the pipeline untouched and be mapped to an exit
    status once, at the command boundary.
    """

    exit_code: int = 1

    def __init__(self, message: str | None = None, cause: Exception | None = None):
        """Construct a new runtime exception.

        Args:
            message: The detail message
            cause: The cause of the exception
        """
        if message and cause:
            super().__init__(f"{message}: {cause}")
            self.__cause__ = cause
        elif message:
            super().__init__(message)
        elif cause:
            super().__init__(str(cause))
            self.__cause__ = cause
        else:
            super().__init__()


def exit_code_for(error: BaseException) -> int:
    """Map an exception to a process exit code.

    Args:
        error: Exception raised by the pipeline

    Returns:
        Exit code; 1 for anything outside the screencap hierarchy
    """
    if isinstance(error, ScreenshotException):
        return error.exit_code
    return 1
