"""HAL implementations."""

from .mss_capture import MSSScreenCapture
from .subprocess_runner import SubprocessRunner

__all__ = [
    "MSSScreenCapture",
    "SubprocessRunner",
]
