"""Hardware Abstraction Layer for screencap.

Abstracts the screen grab primitive and external process execution.
"""

from .container import HALContainer
from .interfaces import IProcessRunner, IScreenCapture, Monitor

__all__ = [
    "HALContainer",
    "IProcessRunner",
    "IScreenCapture",
    "Monitor",
]
