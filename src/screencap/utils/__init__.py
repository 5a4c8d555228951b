"""Post-capture utilities."""

from .clipboard import clipboard_chain, copy_file_to_clipboard
from .opener import open_file

__all__ = [
    "clipboard_chain",
    "copy_file_to_clipboard",
    "open_file",
]
