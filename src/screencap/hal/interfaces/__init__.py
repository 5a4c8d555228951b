"""HAL interface definitions."""

from .process_runner import IProcessRunner
from .screen_capture import IScreenCapture, Monitor

__all__ = [
    "IProcessRunner",
    "IScreenCapture",
    "Monitor",
]
