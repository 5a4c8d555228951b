"""screencap Command Line Interface.

Usage:
    python -m screencap --help
    screencap fullscreen --screen 1
    screencap --format jpg --quality 80 selection
    screencap list
"""

from .main import main

__all__ = ["main"]
